#!/usr/bin/env python3
"""
Ask a running study plan relay for a plan and print the markdown.

Usage:
    python demo_scripts/request_plan.py --subjects "Math, Physics" --exam-date 2024-06-01 \
        --hours 4 --goals "pass exam" --learning-style reading --api-key $GEMINI_API_KEY

Omit --api-key when the service is configured with its own GEMINI_API_KEY.
"""

from __future__ import annotations

import argparse
import sys

import httpx


def build_body(args: argparse.Namespace) -> dict:
    body = {
        "subjects": args.subjects,
        "examDate": args.exam_date,
        "studyHours": args.hours,
        "goals": args.goals,
    }
    for key, value in (
        ("learningStyle", args.learning_style),
        ("strengths", args.strengths),
        ("weaknesses", args.weaknesses),
    ):
        if value:
            body[key] = value
    return body


def main() -> int:
    ap = argparse.ArgumentParser(description="Request a study plan from the relay service.")
    ap.add_argument("--url", default="http://localhost:8000/api/v1/plans")
    ap.add_argument("--subjects", required=True, help="Comma-separated subjects")
    ap.add_argument("--exam-date", required=True)
    ap.add_argument("--hours", type=float, required=True, help="Daily study hours (1-24)")
    ap.add_argument("--goals", required=True)
    ap.add_argument("--learning-style", choices=["video", "reading", "practice", "interactive"])
    ap.add_argument("--strengths")
    ap.add_argument("--weaknesses")
    ap.add_argument("--api-key", help="Gemini API key, sent as a Bearer token")
    ap.add_argument("--timeout", type=float, default=60.0)
    args = ap.parse_args()

    headers = {"Authorization": f"Bearer {args.api_key}"} if args.api_key else {}
    try:
        resp = httpx.post(args.url, json=build_body(args), headers=headers, timeout=args.timeout)
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    try:
        data = resp.json()
    except ValueError:
        data = None

    if resp.status_code != 200 or not isinstance(data, dict) or "plan" not in data:
        detail = data.get("error") if isinstance(data, dict) else None
        print(f"[{resp.status_code}] {detail or resp.text}", file=sys.stderr)
        return 1

    print(data["plan"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
