"""ATS scoring engine entry point.

Pipeline:
1. Section extraction (flattened text, bullets, seniority)
2. Keyword matching against the job description, when one is given
3. Check catalog (impact, content, formatting, readability)
4. Score aggregation weighted by seniority
5. Feedback, prioritized fixes, bullet suggestions, parsing preview and risks

Pure and synchronous: no I/O and no shared state.
"""

import logging
from datetime import datetime

from models.responses import ATSCheck, ATSScoreResult
from models.resume import ResumeDocument
from models.schemas.fix_candidate import FixCandidate
from services.ats import aggregator, section_extractor
from services.ats.bullets import generate_bullet_suggestions
from services.ats.checks import CheckContext, run_checks
from services.ats.checks.base import BaseCheck
from services.ats.checks.readability import readability_notes
from services.ats.fixes import prioritize_fixes
from services.ats.keyword_matcher import analyze as analyze_keywords
from services.ats.parsing_preview import build_parsing_preview, detect_parsing_risks
from services.ats.text import clamp

logger = logging.getLogger(__name__)

ALL_CLEAR_FEEDBACK = "Excellent! Your resume is optimized for ATS."


def _feedback(results: list[tuple[BaseCheck, ATSCheck]]) -> list[str]:
    lines = [
        check.feedback(outcome)
        for check, outcome in results
        if not outcome.passed or outcome.score < outcome.max_score
    ]
    return lines or [ALL_CLEAR_FEEDBACK]


def _fix_candidates(results: list[tuple[BaseCheck, ATSCheck]]) -> list[FixCandidate]:
    candidates = []
    for check, outcome in results:
        fix = check.fix_for(outcome)
        if fix is not None:
            candidates.append(fix)
    return candidates


def calculate_ats_score(
    resume: ResumeDocument,
    job_description: str | None = None,
    now: datetime | None = None,
) -> ATSScoreResult:
    """Score a structured resume, optionally against a job description.

    An empty job description counts as absent; any other string, even
    whitespace only, turns on keyword matching.
    """
    extracted = section_extractor.extract(resume, now=now)
    has_jd = bool(job_description)
    keyword_analysis = (
        analyze_keywords(job_description, extracted, resume) if has_jd else None
    )

    ctx = CheckContext(
        resume=resume,
        extracted=extracted,
        job_description=job_description,
        keyword_analysis=keyword_analysis,
    )
    results = run_checks(ctx)
    checks = [outcome for _, outcome in results]

    level = extracted.experience_level
    match_score = (
        int(clamp(keyword_analysis.summary.match_score)) if keyword_analysis else None
    )
    ats = aggregator.ats_score(checks, level)
    readability = aggregator.readability_score(checks)
    total = aggregator.total_score(ats, readability, match_score, level, has_jd)

    logger.debug(
        "ATS score: level=%s years=%.1f total=%d ats=%d readability=%d match=%s",
        level, extracted.total_experience_years, total, ats, readability, match_score,
    )

    return ATSScoreResult(
        total_score=total,
        ats_score=ats,
        readability_score=readability,
        match_score=match_score,
        coverage_score=aggregator.coverage_score(resume, ctx.total_bullets),
        checks=checks,
        feedback=_feedback(results),
        prioritized_fixes=prioritize_fixes(_fix_candidates(results), checks),
        bullet_suggestions=generate_bullet_suggestions(resume),
        readability_notes=readability_notes(ctx),
        parsing_preview=build_parsing_preview(resume),
        parsing_risks=detect_parsing_risks(resume),
        keyword_match=keyword_analysis.summary if keyword_analysis else None,
    )
