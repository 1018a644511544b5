"""
Artifact: plan_service/app/clients/gemini_client.py
Purpose: Builds the Gemini generateContent request body and performs the single outbound POST.
Created: 2026-10-19
Revised:
- 2026-10-19: Added httpx client for Gemini generateContent.
Preconditions:
- `httpx` is installed; the caller supplies a raw API key (no "Bearer " prefix).
Inputs:
- Acceptable: Prompt string, endpoint URL, API key, auth mode "query" or "bearer".
- Unacceptable: Empty API key or unsupported auth modes.
Postconditions:
- Returns the decoded JSON body of a successful provider response.
Returns:
- `dict` parsed from the provider response.
Errors/Exceptions:
- UpstreamTimeoutError when the bounded wait expires.
- UpstreamError for transport failures and non-success statuses.
- MalformedUpstreamResponseError when a success body is not a JSON object.
- ValueError for unsupported auth modes.
"""

from typing import Optional

import httpx

from ..core.errors import MalformedUpstreamResponseError, UpstreamError, UpstreamTimeoutError
from ..schemas.shared import DEFAULT_SAFETY_SETTINGS, GenerationConfig


def build_generation_payload(prompt: str) -> dict:
    """Wrap a prompt in the generateContent body with fixed sampling and safety settings."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": GenerationConfig().model_dump(),
        "safetySettings": [s.model_dump() for s in DEFAULT_SAFETY_SETTINGS],
    }


def build_gemini_http_client(
    timeout_seconds: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create an httpx client with a bounded timeout."""
    return httpx.Client(timeout=timeout_seconds, transport=transport)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"Error: {response.reason_phrase or response.status_code}"


def post_generate_content(
    client: httpx.Client,
    endpoint: str,
    prompt: str,
    api_key: str,
    auth_mode: str = "query",
) -> dict:
    """POST one generateContent request and return the decoded success body."""
    headers = {"Content-Type": "application/json"}
    params = {}
    if auth_mode == "query":
        params["key"] = api_key
    elif auth_mode == "bearer":
        headers["Authorization"] = f"Bearer {api_key}"
    else:
        raise ValueError(f"Unsupported Gemini auth mode: {auth_mode!r}")

    try:
        response = client.post(
            endpoint,
            params=params,
            headers=headers,
            json=build_generation_payload(prompt),
        )
    except httpx.TimeoutException as e:
        raise UpstreamTimeoutError(f"Gemini request timed out: {e}") from e
    except httpx.HTTPError as e:
        raise UpstreamError(f"Gemini request failed: {e}") from e

    if not response.is_success:
        raise UpstreamError(_error_message(response), upstream_status=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise MalformedUpstreamResponseError("Gemini response body is not valid JSON") from e
    if not isinstance(data, dict):
        raise MalformedUpstreamResponseError("Gemini response body is not a JSON object")
    return data
