"""Section Extractor output: flattened resume text shared by all ATS checks."""

from typing import Literal

from pydantic import BaseModel

ExperienceLevel = Literal["entry", "mid", "senior"]


class ExtractedResume(BaseModel):
    """Per-section raw and normalized text plus seniority estimate.

    ``sections`` and ``normalized`` are keyed by summary, work, education,
    skills, projects, certificates, publications, awards (in that order).
    """
    sections: dict[str, str] = {}
    normalized: dict[str, str] = {}
    full_text: str = ""
    full_normalized: str = ""
    highlights: list[str] = []  # work bullets in document order
    total_experience_years: float = 0.0
    experience_level: ExperienceLevel = "entry"
