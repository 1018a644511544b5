"""
Artifact: plan_service/app/core/errors.py
Purpose: Defines the relay error taxonomy and the HTTP status each error maps to.
Created: 2026-10-19
Revised:
- 2026-10-19: Added typed relay errors with per-kind HTTP status codes.
Preconditions:
- None.
Inputs:
- Acceptable: Human-readable message strings and optional upstream status codes.
- Unacceptable: Non-string messages.
Postconditions:
- Callers can distinguish failure kinds and map them to transport responses.
Returns:
- Exception classes deriving from `PlanRelayError`.
Errors/Exceptions:
- Not applicable.
"""

from typing import Optional


class PlanRelayError(Exception):
    """Base class for every failure the relay reports to its caller."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredentialError(PlanRelayError):
    status_code = 401

    def __init__(self, message: str = "Gemini API key is required"):
        super().__init__(message)


class InvalidRequestError(PlanRelayError):
    status_code = 400


class UpstreamError(PlanRelayError):
    """The provider answered with a non-success status or could not be reached."""

    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class MalformedUpstreamResponseError(PlanRelayError):
    status_code = 502


class UpstreamTimeoutError(PlanRelayError):
    status_code = 504
