"""Flatten a structured resume into section text and estimate seniority."""

import re
from datetime import datetime

from models.resume import ResumeDocument
from models.schemas.extracted_resume import ExperienceLevel, ExtractedResume
from services.ats.text import normalize

_YEAR_MONTH_RE = re.compile(r"(\d{4})(?:-(\d{2}))?", re.ASCII)


def _join(*parts: str) -> str:
    return " ".join(parts)


def build_section_texts(resume: ResumeDocument) -> dict[str, str]:
    """Raw text per section, in the order used for the full-document text."""
    return {
        "summary": resume.basics.summary,
        "work": " ".join(
            _join(w.position, w.company, w.summary, " ".join(w.highlights))
            for w in resume.work
        ),
        "education": " ".join(
            _join(e.study_type, e.area, e.institution, e.summary)
            for e in resume.education
        ),
        "skills": " ".join(
            _join(s.name, " ".join(s.keywords)) for s in resume.skills
        ),
        "projects": " ".join(
            _join(p.name, p.description, " ".join(p.highlights))
            for p in resume.projects
        ),
        "certificates": " ".join(
            _join(c.name, c.issuer, c.summary) for c in resume.certificates
        ),
        "publications": " ".join(
            _join(p.name, p.publisher, p.summary) for p in resume.publications
        ),
        "awards": " ".join(
            _join(a.title, a.awarder, a.summary) for a in resume.awards
        ),
    }


def parse_year_month(value: str | None) -> tuple[int, int] | None:
    """Parse 'YYYY' or 'YYYY-MM'. Returns (year, month) or None."""
    if not value:
        return None
    match = _YEAR_MONTH_RE.fullmatch(value)
    if not match:
        return None
    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else 1
    return year, month


def estimate_years(start: str | None, end: str | None, now: datetime | None = None) -> float:
    """Fractional years between two YYYY[-MM] dates; open-ended ranges run to now."""
    start_parts = parse_year_month(start)
    if start_parts is None:
        return 0.0
    end_parts = parse_year_month(end)
    if end_parts is None:
        now = now or datetime.now()
        end_parts = (now.year, now.month)

    start_index = start_parts[0] * 12 + max(0, start_parts[1] - 1)
    end_index = end_parts[0] * 12 + max(0, end_parts[1] - 1)
    return max(0.0, (end_index - start_index) / 12)


def classify_experience_level(years: float) -> ExperienceLevel:
    if years < 2:
        return "entry"
    if years < 6:
        return "mid"
    return "senior"


def extract(resume: ResumeDocument, now: datetime | None = None) -> ExtractedResume:
    sections = build_section_texts(resume)
    full_text = " ".join(sections.values())
    total_years = sum(
        estimate_years(job.start_date, job.end_date, now) for job in resume.work
    )
    return ExtractedResume(
        sections=sections,
        normalized={name: normalize(text) for name, text in sections.items()},
        full_text=full_text,
        full_normalized=normalize(full_text),
        highlights=[b for job in resume.work for b in job.highlights],
        total_experience_years=total_years,
        experience_level=classify_experience_level(total_years),
    )
