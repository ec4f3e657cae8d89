from typing import Literal

from pydantic import BaseModel

CheckCategory = Literal["impact", "content", "formatting", "readability"]
Severity = Literal["high", "medium", "low"]


class ATSCheck(BaseModel):
    id: str
    name: str
    category: CheckCategory
    passed: bool
    score: int
    max_score: int
    message: str
    details: list[str] | None = None


class KeywordBucket(BaseModel):
    matched: list[str] = []
    missing: list[str] = []


class KeywordCategories(BaseModel):
    skills: KeywordBucket = KeywordBucket()
    tools: KeywordBucket = KeywordBucket()
    responsibilities: KeywordBucket = KeywordBucket()


class PrioritizedMissing(BaseModel):
    skills: list[str] = []
    tools: list[str] = []
    responsibilities: list[str] = []


class SuggestedPlacement(BaseModel):
    skills: str = "Skills section, Summary"
    tools: str = "Skills section, Projects"
    responsibilities: str = "Work experience bullets"


class KeywordMatchSummary(BaseModel):
    matched: list[str] = []
    missing: list[str] = []
    top_keywords: list[str] = []
    match_score: int = 0
    categories: KeywordCategories = KeywordCategories()
    prioritized_missing: PrioritizedMissing = PrioritizedMissing()
    suggested_placement: SuggestedPlacement = SuggestedPlacement()


class FeedbackItem(BaseModel):
    id: str
    title: str
    severity: Severity
    reason: str
    action: str
    rationale: str
    impact_score: int = 0


class BulletSuggestion(BaseModel):
    section: Literal["work", "projects"]
    company_or_project: str
    original: str
    issue: str
    template: str


class ParsingRisk(BaseModel):
    id: str
    severity: Severity
    message: str
    suggestion: str


class ATSScoreResult(BaseModel):
    total_score: int = 0
    ats_score: int = 0
    readability_score: int = 0
    match_score: int | None = None
    coverage_score: int = 0
    checks: list[ATSCheck] = []
    feedback: list[str] = []
    prioritized_fixes: list[FeedbackItem] = []
    bullet_suggestions: list[BulletSuggestion] = []
    readability_notes: list[str] = []
    parsing_preview: str = ""
    parsing_risks: list[ParsingRisk] = []
    keyword_match: KeywordMatchSummary | None = None


class BulletFeedback(BaseModel):
    original: str = ""
    improved: str = ""
    reason: str = ""


class AIAnalysis(BaseModel):
    """Qualitative review returned by the text-completion provider."""
    score: int = 0
    strengths: list[str] = []
    critical_issues: list[str] = []
    improvements: list[str] = []
    keyword_suggestions: list[str] = []
    format_issues: list[str] = []
    summary_feedback: str = ""
    bullet_feedback: list[BulletFeedback] = []


class DeepAnalysisResult(BaseModel):
    analysis: AIAnalysis | None = None
    error: str | None = None
    redacted: bool = False
