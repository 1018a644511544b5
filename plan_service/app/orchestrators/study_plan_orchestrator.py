"""
Artifact: plan_service/app/orchestrators/study_plan_orchestrator.py
Purpose: Turns a study-plan request into one Gemini generation call and unwraps the plan text.
Created: 2026-10-19
Revised:
- 2026-10-19: Added study-plan relay orchestration.
Preconditions:
- `langchain_core` and `httpx` are installed.
- A Gemini API key is supplied by the caller (optionally prefixed with "Bearer ").
Inputs:
- Acceptable: StudyPlanRequest instance or mapping with subjects, examDate, studyHours, goals.
- Unacceptable: Missing/blank credential, missing required fields, studyHours outside 1-24.
Postconditions:
- Exactly one outbound call is made for a valid request; nothing is retained afterwards.
Returns:
- `GeneratedPlanResult` carrying the first candidate's text unchanged.
Errors/Exceptions:
- MissingCredentialError, InvalidRequestError before any outbound call.
- UpstreamError, UpstreamTimeoutError, MalformedUpstreamResponseError from the call itself.
"""

import time
from typing import Any, Mapping, Optional, Union

import httpx
from langchain_core.prompts import PromptTemplate
from pydantic import ValidationError

from ..clients.gemini_client import build_gemini_http_client, post_generate_content
from ..core.config import settings
from ..core.errors import InvalidRequestError, MalformedUpstreamResponseError, MissingCredentialError
from ..core.logging import get_logger
from ..schemas.requests import StudyPlanRequest
from ..schemas.responses import GeneratedPlanResult

logger = get_logger("studyplan.relay")

BEARER_PREFIX = "Bearer "

LEARNING_STYLE_LABELS = {
    "video": "Watching Educational Videos",
    "reading": "Reading Books and Notes",
    "practice": "Practice and Problem Solving",
    "interactive": "Interactive Learning Tools",
}

PLAN_TEMPLATE = PromptTemplate.from_template("""\
Please generate a detailed study plan and format the response in markdown syntax. Here are the details:

# Study Plan Details
{details}

Please create a comprehensive study schedule that includes:

{requirements}

FORMAT THE ENTIRE RESPONSE IN MARKDOWN SYNTAX with proper headings, lists, and emphasis where appropriate.\
""")

BASE_REQUIREMENTS = [
    "Distribution of study hours across subjects",
    "Learning activities based on the specified learning style",
    "Breaks and revision periods",
    "Measurable milestones",
    "Timeline adaptation for the exam",
]


def normalize_credential(credential: Optional[str]) -> str:
    """Strip one leading "Bearer " and return the raw key."""
    if credential is None or not credential.strip():
        raise MissingCredentialError()
    if credential.startswith(BEARER_PREFIX):
        credential = credential[len(BEARER_PREFIX):]
    if not credential.strip():
        raise MissingCredentialError()
    return credential


def _summarize_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "request"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "Invalid study plan request: " + "; ".join(parts)


def coerce_request(request: Union[StudyPlanRequest, Mapping[str, Any]]) -> StudyPlanRequest:
    if isinstance(request, StudyPlanRequest):
        return request
    try:
        return StudyPlanRequest.model_validate(request)
    except ValidationError as e:
        raise InvalidRequestError(_summarize_validation_error(e)) from e


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


def _format_learning_style(style: Optional[str]) -> str:
    if not style:
        return "Not specified"
    label = LEARNING_STYLE_LABELS.get(style.strip().lower())
    return f"{style} ({label})" if label else style


def compose_study_plan_prompt(request: StudyPlanRequest) -> str:
    """Render the fixed study-plan prompt; identical requests yield identical prompts."""
    details = [
        f"- Subjects: {', '.join(request.subjects)}",
        f"- Exam Date: {request.examDate}",
        f"- Daily Study Hours: {_format_hours(request.studyHours)}",
        f"- Learning Style: {_format_learning_style(request.learningStyle)}",
    ]
    requirements = list(BASE_REQUIREMENTS)
    if request.strengths:
        details.append(f"- Strengths: {request.strengths}")
        requirements.append("Strategies leveraging strengths")
    if request.weaknesses:
        details.append(f"- Weaknesses: {request.weaknesses}")
        requirements.append("Plans to improve weak areas")
    details.append(f"- Goals: {request.goals}")

    return PLAN_TEMPLATE.format(
        details="\n".join(details),
        requirements="\n".join(f"{i}. {item}" for i, item in enumerate(requirements, start=1)),
    )


def extract_plan_text(data: Mapping[str, Any]) -> str:
    """Return candidates[0].content.parts[0].text or raise if the shape is incomplete."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        feedback = data.get("promptFeedback")
        reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        suffix = f" (blockReason={reason})" if reason else ""
        raise MalformedUpstreamResponseError(f"Invalid response format from API: no candidates{suffix}")

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    if not isinstance(content, dict):
        finish = first.get("finishReason")
        suffix = f" (finishReason={finish})" if finish else ""
        raise MalformedUpstreamResponseError(f"Invalid response format from API: no content{suffix}")

    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        raise MalformedUpstreamResponseError("Invalid response format from API: no content parts")

    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        raise MalformedUpstreamResponseError("Invalid response format from API: empty text part")
    return text


def generate_plan(
    request: Union[StudyPlanRequest, Mapping[str, Any]],
    credential: Optional[str],
    transport: Optional[httpx.BaseTransport] = None,
) -> GeneratedPlanResult:
    """
    Relay one study-plan request to Gemini.

    The credential is checked first, then the request; both fail before any
    network traffic. The plan text is returned exactly as the provider sent it.
    """
    api_key = normalize_credential(credential)
    plan_request = coerce_request(request)
    prompt = compose_study_plan_prompt(plan_request)

    endpoint = settings.gemini_endpoint()
    auth_mode = settings.gemini_auth_mode()
    logger.info(
        "Calling Gemini | model=%s auth_mode=%s prompt_chars=%d",
        settings.gemini_model(),
        auth_mode,
        len(prompt),
    )

    t0 = time.time()
    with build_gemini_http_client(settings.gemini_timeout_seconds(), transport=transport) as client:
        data = post_generate_content(client, endpoint, prompt, api_key, auth_mode=auth_mode)
    elapsed_ms = int((time.time() - t0) * 1000)
    logger.info("Gemini returned in %dms", elapsed_ms)

    plan_text = extract_plan_text(data)
    logger.debug("Plan output (first 500 chars): %r", plan_text[:500])
    return GeneratedPlanResult(plan=plan_text)
