"""Internal Pydantic contracts passed between ATS engine stages."""

from models.schemas.extracted_resume import ExperienceLevel, ExtractedResume
from models.schemas.fix_candidate import FixCandidate

__all__ = [
    "ExperienceLevel",
    "ExtractedResume",
    "FixCandidate",
]
