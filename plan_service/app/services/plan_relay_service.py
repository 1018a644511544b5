"""
Artifact: plan_service/app/services/plan_relay_service.py
Purpose: Coordinates request-level study-plan relay execution for API handlers.
Created: 2026-10-19
Revised:
- 2026-10-19: Added service layer for credential resolution and plan relay.
Preconditions:
- Incoming request is validated as StudyPlanRequest.
Inputs:
- Acceptable: StudyPlanRequest plus optional Authorization header value.
- Unacceptable: Requests without any resolvable credential.
Postconditions:
- The relay is executed with the first available credential: body field, then the
  configured GEMINI_API_KEY, then the Authorization header (only when no key is configured).
Returns:
- Dictionary `{"plan": <markdown>}`.
Errors/Exceptions:
- Propagates relay errors to the API layer for HTTP error mapping.
"""

from typing import Optional, Tuple

from ..core.config import settings
from ..core.logging import get_logger
from ..schemas.requests import StudyPlanRequest

logger = get_logger("studyplan.main")


def _generate_plan(req: StudyPlanRequest, credential: Optional[str]):
    """Lazy import to avoid loading prompt dependencies at module import time."""
    from ..orchestrators.study_plan_orchestrator import generate_plan

    return generate_plan(req, credential)


def resolve_credential(
    req: StudyPlanRequest, authorization: Optional[str]
) -> Tuple[Optional[str], str]:
    """
    Pick the credential from the body, then server config, then the header.

    The Authorization header is only a fallback: hosted front ends often send a
    platform session token there, which must not reach Gemini when the operator
    has configured GEMINI_API_KEY.
    """
    if req.credential and req.credential.strip():
        return req.credential, "body"
    configured = settings.gemini_api_key()
    if configured.strip():
        return configured, "server"
    if authorization and authorization.strip():
        return authorization, "header"
    return None, "none"


def run_plan_workflow(
    req: StudyPlanRequest, authorization: Optional[str], route_path: str
) -> dict:
    """Execute the relay for a validated request and shape the caller response."""
    credential, source = resolve_credential(req, authorization)

    logger.info(
        "POST %s | subjects=%d | examDate=%s | studyHours=%g | learningStyle=%s | credential=%s",
        route_path,
        len(req.subjects),
        req.examDate,
        req.studyHours,
        req.learningStyle or "-",
        source,
    )

    result = _generate_plan(req, credential)
    logger.info("Plan generated | plan_len=%d", len(result.plan))
    return result.model_dump()
