import json
import os
import unittest
from unittest.mock import patch

import httpx

from app.core.errors import (
    InvalidRequestError,
    MalformedUpstreamResponseError,
    MissingCredentialError,
    UpstreamError,
)
from app.orchestrators.study_plan_orchestrator import (
    compose_study_plan_prompt,
    extract_plan_text,
    generate_plan,
    normalize_credential,
)
from app.schemas.requests import StudyPlanRequest

SAMPLE_REQUEST = {
    "subjects": ["Math", "Physics"],
    "examDate": "2024-06-01",
    "studyHours": 4,
    "goals": "pass exam",
    "learningStyle": "reading",
}


def _success_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RecordingTransport:
    """Collects outbound requests and answers each with a canned response."""

    def __init__(self, status_code=200, body=None):
        self.requests = []
        self.status_code = status_code
        self.body = body if body is not None else _success_body("# Plan\n...")

    def handler(self, request):
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    def transport(self):
        return httpx.MockTransport(self.handler)


class TestCredentialNormalization(unittest.TestCase):
    def test_bearer_prefix_is_stripped_once(self):
        self.assertEqual(normalize_credential("Bearer abc123"), "abc123")
        self.assertEqual(normalize_credential("Bearer Bearer abc123"), "Bearer abc123")

    def test_plain_credential_is_unchanged(self):
        self.assertEqual(normalize_credential("abc123"), "abc123")
        self.assertEqual(normalize_credential("xBearer abc"), "xBearer abc")

    def test_empty_credentials_are_rejected(self):
        for value in (None, "", "   ", "Bearer ", "Bearer   "):
            with self.subTest(value=value):
                with self.assertRaises(MissingCredentialError):
                    normalize_credential(value)


class TestPromptComposition(unittest.TestCase):
    def test_prompt_embeds_request_fields(self):
        prompt = compose_study_plan_prompt(StudyPlanRequest(**SAMPLE_REQUEST))

        for expected in ("Math, Physics", "2024-06-01", "Daily Study Hours: 4\n", "reading", "pass exam"):
            self.assertIn(expected, prompt)
        self.assertIn("Reading Books and Notes", prompt)
        self.assertIn("1. Distribution of study hours across subjects", prompt)
        self.assertIn("5. Timeline adaptation for the exam", prompt)
        self.assertIn("FORMAT THE ENTIRE RESPONSE IN MARKDOWN SYNTAX", prompt)

    def test_prompt_is_deterministic(self):
        first = compose_study_plan_prompt(StudyPlanRequest(**SAMPLE_REQUEST))
        second = compose_study_plan_prompt(StudyPlanRequest(**SAMPLE_REQUEST))
        self.assertEqual(first, second)

    def test_comma_separated_subjects_match_list_form(self):
        from_list = compose_study_plan_prompt(StudyPlanRequest(**SAMPLE_REQUEST))
        from_string = compose_study_plan_prompt(
            StudyPlanRequest(**{**SAMPLE_REQUEST, "subjects": " Math ,Physics, "})
        )
        self.assertEqual(from_list, from_string)

    def test_strength_and_weakness_clauses_are_optional(self):
        prompt = compose_study_plan_prompt(StudyPlanRequest(**SAMPLE_REQUEST))
        self.assertNotIn("Strengths", prompt)
        self.assertNotIn("Weaknesses", prompt)
        self.assertNotIn("Strategies leveraging strengths", prompt)

        prompt = compose_study_plan_prompt(
            StudyPlanRequest(**SAMPLE_REQUEST, strengths="algebra", weaknesses="optics")
        )
        self.assertIn("- Strengths: algebra", prompt)
        self.assertIn("- Weaknesses: optics", prompt)
        self.assertIn("6. Strategies leveraging strengths", prompt)
        self.assertIn("7. Plans to improve weak areas", prompt)

    def test_unknown_learning_style_passes_through(self):
        prompt = compose_study_plan_prompt(
            StudyPlanRequest(**{**SAMPLE_REQUEST, "learningStyle": "flashcards"})
        )
        self.assertIn("- Learning Style: flashcards\n", prompt)

    def test_missing_learning_style_renders_not_specified(self):
        for style in (None, "", "   "):
            with self.subTest(style=style):
                prompt = compose_study_plan_prompt(
                    StudyPlanRequest(**{**SAMPLE_REQUEST, "learningStyle": style})
                )
                self.assertIn("- Learning Style: Not specified\n", prompt)


class TestStudyPlanRequestModel(unittest.TestCase):
    def test_credential_is_hidden_from_repr(self):
        req = StudyPlanRequest(**SAMPLE_REQUEST, geminiApiKey="secret-key-123")

        self.assertEqual(req.credential, "secret-key-123")
        self.assertNotIn("secret-key-123", repr(req))
        self.assertNotIn("credential", repr(req))
        self.assertIn("Math", repr(req))


class TestExtractPlanText(unittest.TestCase):
    def test_returns_first_candidate_text_unmodified(self):
        text = "# Plan\n\n  - keep whitespace  \n"
        self.assertEqual(extract_plan_text(_success_body(text)), text)

    def test_incomplete_shapes_raise(self):
        bodies = [
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {}}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{}]}}]},
            {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        ]
        for body in bodies:
            with self.subTest(body=body):
                with self.assertRaises(MalformedUpstreamResponseError):
                    extract_plan_text(body)

    def test_block_reason_is_reported(self):
        with self.assertRaises(MalformedUpstreamResponseError) as exc:
            extract_plan_text({"promptFeedback": {"blockReason": "SAFETY"}})
        self.assertIn("blockReason=SAFETY", exc.exception.message)


@patch.dict(os.environ, {"GEMINI_AUTH_MODE": "query", "GEMINI_MODEL": "gemini-1.5-flash"})
class TestGeneratePlan(unittest.TestCase):
    def test_end_to_end_with_bearer_credential(self):
        recorder = RecordingTransport()

        result = generate_plan(SAMPLE_REQUEST, "Bearer abc123", transport=recorder.transport())

        self.assertEqual(result.plan, "# Plan\n...")
        self.assertEqual(len(recorder.requests), 1)
        sent = recorder.requests[0]
        self.assertEqual(sent.method, "POST")
        self.assertEqual(sent.url.params["key"], "abc123")
        self.assertTrue(sent.url.path.endswith("/models/gemini-1.5-flash:generateContent"))

        prompt = json.loads(sent.content)["contents"][0]["parts"][0]["text"]
        for expected in ("Math, Physics", "2024-06-01", "4", "reading", "pass exam"):
            self.assertIn(expected, prompt)

    def test_missing_credential_fails_before_outbound_call(self):
        recorder = RecordingTransport()

        with self.assertRaises(MissingCredentialError):
            generate_plan(SAMPLE_REQUEST, "", transport=recorder.transport())

        self.assertEqual(recorder.requests, [])

    def test_missing_required_fields_fail_before_outbound_call(self):
        for field in ("subjects", "examDate", "studyHours", "goals"):
            with self.subTest(field=field):
                recorder = RecordingTransport()
                body = {k: v for k, v in SAMPLE_REQUEST.items() if k != field}

                with self.assertRaises(InvalidRequestError) as exc:
                    generate_plan(body, "abc123", transport=recorder.transport())

                self.assertIn(field, exc.exception.message)
                self.assertEqual(recorder.requests, [])

    def test_blank_and_out_of_range_values_are_invalid(self):
        overrides = [
            {"subjects": []},
            {"subjects": " , "},
            {"goals": "   "},
            {"studyHours": 0},
            {"studyHours": 25},
        ]
        for override in overrides:
            with self.subTest(override=override):
                recorder = RecordingTransport()
                with self.assertRaises(InvalidRequestError):
                    generate_plan({**SAMPLE_REQUEST, **override}, "abc123", transport=recorder.transport())
                self.assertEqual(recorder.requests, [])

    def test_upstream_error_message_is_passed_through(self):
        recorder = RecordingTransport(status_code=403, body={"error": {"message": "invalid key"}})

        with self.assertRaises(UpstreamError) as exc:
            generate_plan(SAMPLE_REQUEST, "abc123", transport=recorder.transport())

        self.assertEqual(exc.exception.message, "invalid key")
        self.assertEqual(exc.exception.upstream_status, 403)

    def test_empty_candidates_are_malformed(self):
        recorder = RecordingTransport(body={"candidates": []})

        with self.assertRaises(MalformedUpstreamResponseError):
            generate_plan(SAMPLE_REQUEST, "abc123", transport=recorder.transport())

        self.assertEqual(len(recorder.requests), 1)


if __name__ == "__main__":
    unittest.main()
