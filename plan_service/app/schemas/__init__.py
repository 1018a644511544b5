"""Schema package exports for study plan relay contracts."""

from .requests import StudyPlanRequest
from .responses import ErrorResponse, GeneratedPlanResult
from .shared import DEFAULT_SAFETY_SETTINGS, GenerationConfig, SafetySetting

__all__ = [
    "DEFAULT_SAFETY_SETTINGS",
    "ErrorResponse",
    "GeneratedPlanResult",
    "GenerationConfig",
    "SafetySetting",
    "StudyPlanRequest",
]
