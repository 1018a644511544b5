"""
Artifact: plan_service/app/schemas/shared.py
Purpose: Defines the Gemini generation settings sent with every plan request.
Created: 2026-10-19
Revised:
- 2026-10-19: Added generation config and safety setting models.
Preconditions:
- Pydantic BaseModel is installed and importable.
Inputs:
- Acceptable: Numeric sampling parameters and provider category/threshold names.
- Unacceptable: Non-numeric sampling values.
Postconditions:
- Models serialize to the camelCase shape the provider expects.
Returns:
- Typed model instances for generation config and safety settings.
Errors/Exceptions:
- Pydantic validation errors for invalid values.
"""

from pydantic import BaseModel


class GenerationConfig(BaseModel):
    temperature: float = 0.7
    topP: float = 0.8
    topK: int = 40
    maxOutputTokens: int = 2048


class SafetySetting(BaseModel):
    category: str
    threshold: str


DEFAULT_SAFETY_SETTINGS = (
    SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_MEDIUM_AND_ABOVE"),
)
