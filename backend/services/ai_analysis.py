"""Optional AI deep analysis of a resume.

Builds a plain-text resume context, redacts contact details, asks Gemini for
a qualitative ATS review and coerces whatever comes back into AIAnalysis.
Failures never propagate to the caller: they end up in the ``error`` field
of the result so the scoring response is unaffected.
"""

import json
import logging
import re
from typing import Any

from config import settings
from models.responses import AIAnalysis, BulletFeedback, DeepAnalysisResult
from models.resume import ResumeDocument
from services import gemini_client, prompt_builder
from services.gemini_client import LLMServiceError
from services.redaction import redact_contact_info

logger = logging.getLogger(__name__)

__all__ = [
    "LLMResponseParseError",
    "LLMServiceError",
    "coerce_analysis",
    "deep_analyze",
    "parse_llm_json",
]

_FENCED_JSON_RE = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)
MAX_BULLET_FEEDBACK = 3


class LLMResponseParseError(ValueError):
    """The model output could not be read as JSON by any strategy."""


def sanitize_json_string(text: str) -> str:
    """Escape raw newlines that appear inside JSON string literals."""
    out: list[str] = []
    in_string = False
    escaped = False
    for char in text:
        if char == "\\" and in_string and not escaped:
            escaped = True
            out.append(char)
            continue
        if char == '"' and not escaped:
            in_string = not in_string
            out.append(char)
            continue
        if in_string and char in "\r\n":
            out.append("\\n")
        else:
            out.append(char)
        escaped = False
    return "".join(out)


def _candidates(text: str):
    yield text
    fenced = _FENCED_JSON_RE.search(text)
    if fenced and fenced.group(1).strip():
        yield fenced.group(1).strip()
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        yield text[start:end + 1]


def parse_llm_json(output: str) -> Any:
    """Parse model output as JSON.

    Tries the whole output, then a ```json fenced block, then the span from
    the first ``{`` to the last ``}``.
    """
    trimmed = output.strip()
    for candidate in _candidates(trimmed):
        try:
            return json.loads(sanitize_json_string(candidate))
        except json.JSONDecodeError:
            continue
    raise LLMResponseParseError("Model output is not valid JSON")


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def coerce_analysis(data: Any) -> AIAnalysis:
    """Build an AIAnalysis from loosely shaped model output."""
    if not isinstance(data, dict):
        data = {}

    score = data.get("score")
    if isinstance(score, (int, float)) and not isinstance(score, bool):
        score = min(100, max(0, round(score)))
    else:
        score = 0

    bullets = []
    raw_bullets = data.get("bulletFeedback")
    if isinstance(raw_bullets, list):
        for item in raw_bullets:
            if not isinstance(item, dict):
                continue
            bullets.append(BulletFeedback(
                original=str(item.get("original", "")),
                improved=str(item.get("improved", "")),
                reason=str(item.get("reason", "")),
            ))

    summary_feedback = data.get("summaryFeedback")
    return AIAnalysis(
        score=score,
        strengths=_string_list(data.get("strengths")),
        critical_issues=_string_list(data.get("criticalIssues")),
        improvements=_string_list(data.get("improvements")),
        keyword_suggestions=_string_list(data.get("keywordSuggestions")),
        format_issues=_string_list(data.get("formatIssues")),
        summary_feedback=summary_feedback.strip() if isinstance(summary_feedback, str) else "",
        bullet_feedback=bullets[:MAX_BULLET_FEEDBACK],
    )


async def deep_analyze(
    resume: ResumeDocument,
    job_description: str | None = None,
) -> DeepAnalysisResult:
    """Run the Gemini ATS review for a resume."""
    if not settings.ai_analysis_enabled:
        logger.warning("AI analysis requested but disabled by configuration")
        return DeepAnalysisResult(error="AI analysis is disabled.")

    resume_text = prompt_builder.build_resume_text(resume)
    redacted = settings.redact_contact_info
    if redacted:
        resume_text = redact_contact_info(resume_text)
        if job_description:
            job_description = redact_contact_info(job_description)

    prompt = prompt_builder.build_ats_analysis_prompt(resume_text, job_description)

    try:
        output = await gemini_client.generate_text(prompt)
    except LLMServiceError as e:
        logger.warning("AI analysis failed: %s", e)
        return DeepAnalysisResult(
            error="AI analysis failed. Please try again later.", redacted=redacted
        )

    if output is None:
        return DeepAnalysisResult(
            error="AI analysis is unavailable: no Gemini API key configured.",
            redacted=redacted,
        )

    try:
        data = parse_llm_json(output)
    except LLMResponseParseError:
        logger.warning("AI analysis returned unparseable output (%d chars)", len(output))
        return DeepAnalysisResult(
            error="AI analysis returned an unreadable response.", redacted=redacted
        )

    return DeepAnalysisResult(analysis=coerce_analysis(data), redacted=redacted)
