"""
Artifact: plan_service/app/api/v1/routes/health.py
Purpose: Liveness probe for the relay; shared by the v1 and legacy health paths.
Created: 2026-10-19
Preconditions:
- FastAPI routing context is initialized.
Inputs:
- Acceptable: HTTP GET without body.
- Unacceptable: Other methods (answered with 405 by FastAPI).
Postconditions:
- No outbound call is made; Gemini reachability is not checked.
Returns:
- `{"ok": true, "service": <app title>}`.
Errors/Exceptions:
- None.
"""

from fastapi import APIRouter

from ....core.config import settings
from ....core.logging import get_logger

logger = get_logger("studyplan.main")
router = APIRouter(tags=["health"])


def get_health_status(route_path: str) -> dict:
    logger.debug("GET %s", route_path)
    return {"ok": True, "service": settings.app_title}


@router.get("/health")
def relay_health():
    return get_health_status("/api/v1/health")
