"""Job-description keyword matching.

Pulls the most frequent terms (unigrams plus bigrams/trigrams) out of a job
description, sorts each into skills, tools or responsibilities, and measures
how well the resume covers them. Coverage is weighted by where a term shows
up: a skill listed in the Skills section counts for more than one that only
appears in passing.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Literal

from models.responses import (
    KeywordBucket,
    KeywordCategories,
    KeywordMatchSummary,
    PrioritizedMissing,
)
from models.resume import ResumeDocument
from models.schemas.extracted_resume import ExtractedResume
from services.ats.text import (
    clamp,
    extract_phrases,
    matches_word_boundary,
    normalize,
    round_half_up,
    tokenize,
)
from services.ats.vocabulary import (
    COMMON_TOOLS,
    MULTI_WORD_TOOLS,
    RESPONSIBILITY_VERBS,
    STOP_WORDS,
)

logger = logging.getLogger(__name__)

Bucket = Literal["skills", "tools", "responsibilities"]

BUCKETS: tuple[Bucket, ...] = ("skills", "tools", "responsibilities")

TOP_TERMS = 30
BASE_WEIGHTS: dict[Bucket, float] = {"skills": 0.5, "tools": 0.2, "responsibilities": 0.3}

# Output caps for the summary lists
_MATCHED_CAP = 20
_BUCKET_CAPS: dict[Bucket, int] = {"skills": 15, "tools": 10, "responsibilities": 10}
_PRIORITIZED_CAP = 5

# Integer-like terms (e.g. "2024") go ahead of other terms on frequency ties
_INDEX_KEY_RE = re.compile(r"0|[1-9][0-9]*")


# ---------------------------------------------------------------------------
# Term classification: first matching rule wins
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TermRule:
    bucket: Bucket
    applies: Callable[[str, list[str], frozenset[str]], bool]


def _has_responsibility_verb(term: str, tokens: list[str], vocab: frozenset[str]) -> bool:
    return any(t in RESPONSIBILITY_VERBS for t in tokens)


def _is_known_tool(term: str, tokens: list[str], vocab: frozenset[str]) -> bool:
    return (
        any(t in COMMON_TOOLS for t in tokens)
        or term in COMMON_TOOLS
        or any(tool in term for tool in MULTI_WORD_TOOLS)
    )


def _in_resume_skills(term: str, tokens: list[str], vocab: frozenset[str]) -> bool:
    return term in vocab or any(t in vocab for t in tokens)


def _looks_technical(term: str, tokens: list[str], vocab: frozenset[str]) -> bool:
    return any(
        t.endswith(("js", "py")) or t.startswith(("ci", "cd")) for t in tokens
    )


CLASSIFIER_RULES: tuple[TermRule, ...] = (
    TermRule("responsibilities", _has_responsibility_verb),
    TermRule("tools", _is_known_tool),
    TermRule("skills", _in_resume_skills),
    TermRule("tools", _looks_technical),
)


def resume_skill_vocabulary(resume: ResumeDocument) -> frozenset[str]:
    """Normalized skill names, skill keywords and project keywords."""
    raw = [s.name for s in resume.skills]
    raw += [kw for s in resume.skills for kw in s.keywords]
    raw += [kw for p in resume.projects for kw in p.keywords]
    return frozenset(n for n in (normalize(r) for r in raw) if n)


def classify_term(term: str, skill_vocab: frozenset[str] = frozenset()) -> Bucket:
    tokens = [t for t in term.split(" ") if t]
    for rule in CLASSIFIER_RULES:
        if rule.applies(term, tokens, skill_vocab):
            return rule.bucket
    return "skills"


# ---------------------------------------------------------------------------
# JD term extraction
# ---------------------------------------------------------------------------
def extract_jd_terms(job_description: str, limit: int = TOP_TERMS) -> tuple[list[str], Counter]:
    """Rank JD unigrams and phrases by frequency.

    Returns the top ``limit`` terms and the full frequency counter. Ties go
    to integer-like terms in ascending order, then to first appearance.
    """
    tokens = [t for t in tokenize(job_description) if len(t) >= 3 and t not in STOP_WORDS]
    counts = Counter(t for t in tokens + extract_phrases(tokens, 3) if t)
    ranked = sorted(_key_order(counts), key=lambda term: -counts[term])
    return ranked[:limit], counts


def _is_index_key(term: str) -> bool:
    return bool(_INDEX_KEY_RE.fullmatch(term)) and int(term) < 2**32 - 1


def _key_order(counts: Counter) -> list[str]:
    """Integer-like terms ascending, then the rest in first-appearance order.

    Tie order of the stable frequency sort follows this listing.
    """
    numeric = sorted((t for t in counts if _is_index_key(t)), key=int)
    return numeric + [t for t in counts if not _is_index_key(t)]


def term_weight(term: str, counts: Counter) -> float:
    base = counts.get(term) or 1
    return base * (1.5 if " " in term else 1)


def section_bonus(term: str, bucket: Bucket, sections: dict[str, str]) -> float:
    """Credit for a matched term depending on which section mentions it."""
    def found(section: str) -> bool:
        return matches_word_boundary(sections.get(section, ""), term)

    if bucket == "responsibilities":
        if found("work"):
            return 1.0
        if found("projects"):
            return 0.7
        if found("summary"):
            return 0.5
        return 0.3

    if found("skills"):
        return 1.0
    if found("summary") or found("work"):
        return 0.6
    return 0.4


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------
@dataclass
class KeywordAnalysis:
    """Uncapped matching results plus the capped summary returned to clients."""

    summary: KeywordMatchSummary
    matched_count: int = 0
    buckets: dict[str, KeywordBucket] = field(default_factory=dict)
    weights: dict[str, float] = field(default_factory=dict)


def _prioritize(terms: list[str], weights: dict[str, float]) -> list[str]:
    return sorted(terms, key=lambda t: -weights.get(t, 0))[:_PRIORITIZED_CAP]


def analyze(
    job_description: str,
    extracted: ExtractedResume,
    resume: ResumeDocument,
) -> KeywordAnalysis:
    """Match a job description against an extracted resume."""
    top_terms, counts = extract_jd_terms(job_description)
    skill_vocab = resume_skill_vocabulary(resume)
    resume_text = extracted.full_normalized

    weights = {term: term_weight(term, counts) for term in top_terms}
    buckets: dict[str, KeywordBucket] = {b: KeywordBucket() for b in BUCKETS}
    earned = dict.fromkeys(BUCKETS, 0.0)
    possible = dict.fromkeys(BUCKETS, 0.0)
    matched: list[str] = []
    missing: list[str] = []

    for term in top_terms:
        bucket = classify_term(term, skill_vocab)
        weight = weights[term]
        possible[bucket] += weight
        if matches_word_boundary(resume_text, term):
            matched.append(term)
            buckets[bucket].matched.append(term)
            earned[bucket] += weight * section_bonus(term, bucket, extracted.normalized)
        else:
            missing.append(term)
            buckets[bucket].missing.append(term)

    scores = {b: earned[b] / possible[b] if possible[b] else 0.0 for b in BUCKETS}
    active = {
        b: BASE_WEIGHTS[b]
        for b in BUCKETS
        if scores[b] > 0 or (b == "skills" and buckets["skills"].missing)
    }
    divisor = sum(active.values()) or 1
    weighted = sum(scores[b] * w for b, w in active.items())
    match_score = int(clamp(round_half_up(weighted / divisor * 100)))

    summary = KeywordMatchSummary(
        matched=matched[:_MATCHED_CAP],
        missing=missing[:_MATCHED_CAP],
        top_keywords=top_terms,
        match_score=match_score,
        categories=KeywordCategories(**{
            b: KeywordBucket(
                matched=buckets[b].matched[:_BUCKET_CAPS[b]],
                missing=buckets[b].missing[:_BUCKET_CAPS[b]],
            )
            for b in BUCKETS
        }),
        prioritized_missing=PrioritizedMissing(**{
            b: _prioritize(buckets[b].missing, weights) for b in BUCKETS
        }),
    )
    logger.debug(
        "Keyword match: %d/%d terms, score=%d", len(matched), len(top_terms), match_score
    )
    return KeywordAnalysis(
        summary=summary,
        matched_count=len(matched),
        buckets=buckets,
        weights=weights,
    )
