"""Abstract base class and shared evaluation context for ATS checks."""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from models.responses import ATSCheck, CheckCategory
from models.resume import ResumeDocument
from models.schemas.extracted_resume import ExtractedResume
from models.schemas.fix_candidate import FixCandidate
from services.ats.text import normalize, split_sentences, tokenize
from services.ats.vocabulary import METRIC_RE

if TYPE_CHECKING:
    from services.ats.keyword_matcher import KeywordAnalysis


@dataclass
class CheckContext:
    """Everything a check may read. Derived statistics are computed once, lazily."""

    resume: ResumeDocument
    extracted: ExtractedResume
    job_description: str | None = None
    keyword_analysis: "KeywordAnalysis | None" = None

    @property
    def bullets(self) -> list[str]:
        return self.extracted.highlights

    @property
    def total_bullets(self) -> int:
        return len(self.extracted.highlights)

    @cached_property
    def metrics_count(self) -> int:
        """Metric matches in work highlights only; job summaries never count."""
        return sum(
            len(METRIC_RE.findall(" ".join(job.highlights))) for job in self.resume.work
        )

    @cached_property
    def normalized_bullets(self) -> list[str]:
        return [normalize(b) for b in self.extracted.highlights]

    @cached_property
    def bullet_counts(self) -> Counter:
        return Counter(b for b in self.normalized_bullets if b)

    @cached_property
    def sentences(self) -> list[str]:
        return split_sentences(self.extracted.full_text)

    @cached_property
    def sentence_word_counts(self) -> list[int]:
        counts = (len(tokenize(s)) for s in self.sentences)
        return [n for n in counts if n > 0]

    @cached_property
    def full_tokens(self) -> list[str]:
        return tokenize(self.extracted.full_text)


class BaseCheck(ABC):
    """Base class for catalog entries.

    Subclasses set the class attributes and implement evaluate(). A check
    with a ``fix`` template contributes that fix whenever it does not pass.
    """

    check_id: str = ""
    name: str = ""
    category: CheckCategory = "content"
    max_score: int = 0
    fix: FixCandidate | None = None

    @abstractmethod
    def evaluate(self, ctx: CheckContext) -> ATSCheck | None:
        """Score the resume. Returns None when the check does not apply."""

    def result(
        self,
        passed: bool,
        score: float,
        message: str,
        details: list[str] | None = None,
    ) -> ATSCheck:
        return ATSCheck(
            id=self.check_id,
            name=self.name,
            category=self.category,
            passed=passed,
            score=int(min(self.max_score, max(0, score))),
            max_score=self.max_score,
            message=message,
            details=details,
        )

    def feedback(self, check: ATSCheck) -> str:
        """One-line feedback shown when the check is not at full marks."""
        return check.message

    def fix_for(self, check: ATSCheck) -> FixCandidate | None:
        if self.fix is not None and not check.passed:
            return self.fix
        return None
