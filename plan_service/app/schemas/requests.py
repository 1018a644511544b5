"""
Artifact: plan_service/app/schemas/requests.py
Purpose: Defines the study-plan request model accepted by the relay routes.
Created: 2026-10-19
Revised:
- 2026-10-19: Added StudyPlanRequest with subjects normalization and credential aliases.
Preconditions:
- Pydantic v2 is available.
Inputs:
- Acceptable: JSON object with subjects (list or comma-separated string), examDate,
  studyHours (1-24), goals, and optional learningStyle/strengths/weaknesses/credential.
- Unacceptable: Missing or blank required fields, or studyHours outside 1-24.
Postconditions:
- Subjects are normalized to a list of trimmed names; blank optional text becomes None.
Returns:
- `StudyPlanRequest` model instances.
Errors/Exceptions:
- Pydantic validation errors for malformed request bodies.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class StudyPlanRequest(BaseModel):
    subjects: List[str] = Field(min_length=1)
    examDate: str
    studyHours: float = Field(ge=1, le=24)
    goals: str
    learningStyle: Optional[str] = None
    strengths: Optional[str] = None
    weaknesses: Optional[str] = None
    credential: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("credential", "apiKey", "geminiApiKey"),
        repr=False,
    )

    @field_validator("subjects", mode="before")
    @classmethod
    def _split_subjects(cls, value):
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return [
                s.strip() if isinstance(s, str) else s
                for s in value
                if not isinstance(s, str) or s.strip()
            ]
        return value

    @field_validator("examDate", "goals")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("learningStyle", "strengths", "weaknesses")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value
