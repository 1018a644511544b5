"""
Artifact: plan_service/app/api/v1/router.py
Purpose: Aggregates v1 API route modules for single include in app startup.
Created: 2026-10-19
Preconditions:
- Route modules under api/v1/routes are importable.
Inputs:
- Acceptable: FastAPI include_router integration.
- Unacceptable: Missing route modules or invalid router objects.
Postconditions:
- Exposes a composed APIRouter containing health and plan routes.
Returns:
- `APIRouter` instance.
Errors/Exceptions:
- Import errors if route modules cannot be resolved.
"""

from fastapi import APIRouter

from .routes.health import router as health_router
from .routes.plans import router as plans_router

api_v1_router = APIRouter()
api_v1_router.include_router(health_router)
api_v1_router.include_router(plans_router)
