"""
Artifact: plan_service/app/schemas/responses.py
Purpose: Defines the success and error payloads returned to relay callers.
Created: 2026-10-19
Revised:
- 2026-10-19: Added plan and error payloads.
Preconditions:
- Pydantic BaseModel is available.
Inputs:
- Acceptable: Plan markdown text or an error message string.
- Unacceptable: Non-string values.
Postconditions:
- Response objects serialize to `{"plan": ...}` or `{"error": ...}`.
Returns:
- `GeneratedPlanResult` and `ErrorResponse` model instances.
Errors/Exceptions:
- Pydantic validation errors for non-string values.
"""

from pydantic import BaseModel


class GeneratedPlanResult(BaseModel):
    plan: str


class ErrorResponse(BaseModel):
    error: str
