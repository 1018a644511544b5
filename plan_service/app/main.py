"""
Artifact: plan_service/app/main.py
Purpose: Builds the FastAPI application, wires CORS and error handlers, and keeps legacy routes.
Created: 2026-10-19
Revised:
- 2026-10-19: Mounted v1 plan routes and legacy /generate-study-plan path.
Preconditions:
- Route modules and core configuration are importable.
Inputs:
- Acceptable: HTTP requests to /health, /generate-study-plan, and /api/v1/*.
- Unacceptable: Request bodies failing StudyPlanRequest validation (answered with 400).
Postconditions:
- `app` is ready to be served by an ASGI server.
Returns:
- FastAPI application instance.
Errors/Exceptions:
- Body validation failures are converted to `{"error": ...}` with status 400.
"""

from typing import Optional

from fastapi import FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import api_v1_router
from .api.v1.routes.health import get_health_status
from .api.v1.routes.plans import error_response, handle_plan_request
from .core.config import settings
from .core.cors import answer_preflight
from .core.errors import InvalidRequestError
from .core.logging import configure_logging, get_logger
from .schemas.requests import StudyPlanRequest

configure_logging()
logger = get_logger("studyplan.main")

app = FastAPI(title=settings.app_title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registered after CORSMiddleware so it runs first and short-circuits OPTIONS.
app.middleware("http")(answer_preflight)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        parts.append(f"{'.'.join(loc) or 'body'}: {err.get('msg', 'invalid value')}")
    message = "Invalid study plan request: " + "; ".join(parts)
    logger.warning("%s %s | %s", request.method, request.url.path, message)
    return error_response(InvalidRequestError.status_code, message)


app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
def health_legacy():
    return get_health_status("/health")


@app.post("/generate-study-plan")
def generate_study_plan_legacy(
    req: StudyPlanRequest, authorization: Optional[str] = Header(default=None)
):
    return handle_plan_request(req, authorization, route_path="/generate-study-plan")
