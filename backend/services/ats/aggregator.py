"""Roll individual check scores up into the headline scores."""

from models.responses import ATSCheck
from models.resume import ResumeDocument
from models.schemas.extracted_resume import ExperienceLevel
from services.ats.text import clamp, round_half_up

# Weight of each ATS category by seniority: senior resumes lean on impact
CATEGORY_WEIGHTS: dict[ExperienceLevel, dict[str, float]] = {
    "entry": {"impact": 0.4, "content": 0.4, "formatting": 0.2},
    "mid": {"impact": 0.45, "content": 0.35, "formatting": 0.2},
    "senior": {"impact": 0.5, "content": 0.3, "formatting": 0.2},
}

# (ats, readability, match); each row sums to 1
BLEND_WEIGHTS_WITH_JD: dict[ExperienceLevel, tuple[float, float, float]] = {
    "entry": (0.5, 0.3, 0.2),
    "mid": (0.55, 0.25, 0.2),
    "senior": (0.6, 0.2, 0.2),
}
BLEND_WEIGHTS_WITHOUT_JD: dict[ExperienceLevel, tuple[float, float, float]] = {
    "entry": (0.6, 0.4, 0.0),
    "mid": (0.65, 0.35, 0.0),
    "senior": (0.7, 0.3, 0.0),
}


def ats_score(checks: list[ATSCheck], level: ExperienceLevel) -> int:
    """Weighted mean of the impact, content and formatting category fractions."""
    weights = CATEGORY_WEIGHTS[level]
    totals = {category: [0, 0] for category in weights}
    for check in checks:
        if check.category in totals:
            totals[check.category][0] += check.score
            totals[check.category][1] += check.max_score

    weighted = sum(
        score / maximum * weights[category]
        for category, (score, maximum) in totals.items()
        if maximum
    )
    return int(clamp(round_half_up(weighted / sum(weights.values()) * 100)))


def readability_score(checks: list[ATSCheck]) -> int:
    readable = [c for c in checks if c.category == "readability"]
    maximum = sum(c.max_score for c in readable)
    if not maximum:
        return 0
    return int(clamp(round_half_up(sum(c.score for c in readable) / maximum * 100)))


def coverage_score(resume: ResumeDocument, total_bullets: int) -> int:
    """Share of the core building blocks a complete resume has."""
    indicators = [
        bool(resume.basics.summary),
        bool(resume.work),
        bool(resume.skills),
        bool(resume.education),
        total_bullets >= 6,
    ]
    return int(clamp(round_half_up(sum(indicators) / len(indicators) * 100)))


def blend_weights(level: ExperienceLevel, has_job_description: bool) -> tuple[float, float, float]:
    table = BLEND_WEIGHTS_WITH_JD if has_job_description else BLEND_WEIGHTS_WITHOUT_JD
    return table[level]


def total_score(
    ats: int,
    readability: int,
    match: int | None,
    level: ExperienceLevel,
    has_job_description: bool,
) -> int:
    w_ats, w_read, w_match = blend_weights(level, has_job_description)
    blended = ats * w_ats + readability * w_read + (match or 0) * w_match
    return int(clamp(round_half_up(blended)))
