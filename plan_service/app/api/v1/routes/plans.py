"""
Artifact: plan_service/app/api/v1/routes/plans.py
Purpose: Defines study-plan route handlers and maps relay failures to HTTP responses.
Created: 2026-10-19
Revised:
- 2026-10-19: Added versioned plans route with shared plan handler function.
Preconditions:
- Incoming request body conforms to StudyPlanRequest schema.
Inputs:
- Acceptable: POST body with study-plan fields and a credential in the body or Authorization header.
- Unacceptable: Invalid schema payloads or malformed JSON bodies.
Postconditions:
- Executes the relay workflow and returns the plan markdown.
Returns:
- `{"plan": ...}` on success, `JSONResponse({"error": ...})` on failure.
Errors/Exceptions:
- Relay errors map to their status code; anything else maps to 500.
"""

import traceback
from typing import Optional

from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from ....core.errors import PlanRelayError
from ....core.logging import get_logger
from ....schemas.requests import StudyPlanRequest
from ....services.plan_relay_service import run_plan_workflow

logger = get_logger("studyplan.main")
router = APIRouter(tags=["plans"])


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_plan_request(req: StudyPlanRequest, authorization: Optional[str], route_path: str):
    """Shared plan handler body used by v1 and legacy routes."""
    try:
        return run_plan_workflow(req, authorization, route_path=route_path)
    except PlanRelayError as e:
        logger.error("Relay error (%s): %s", type(e).__name__, e.message)
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.error("Unexpected relay error: %s", repr(e))
        logger.debug("Traceback:\n%s", traceback.format_exc())
        return error_response(500, str(e))


@router.post("/plans")
def create_plan(req: StudyPlanRequest, authorization: Optional[str] = Header(default=None)):
    return handle_plan_request(req, authorization, route_path="/api/v1/plans")
