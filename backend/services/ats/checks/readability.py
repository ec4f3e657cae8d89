"""Readability checks scored separately from the ATS categories."""

from models.responses import ATSCheck
from models.schemas.fix_candidate import FixCandidate
from services.ats.checks.base import BaseCheck, CheckContext
from services.ats.text import round_half_up
from services.ats.vocabulary import FILLER_WORDS, PASSIVE_VOICE_RE


def average_sentence_length(ctx: CheckContext) -> float:
    counts = ctx.sentence_word_counts
    return sum(counts) / len(counts) if counts else 0.0


def long_sentence_ratio(ctx: CheckContext) -> float:
    counts = ctx.sentence_word_counts
    return sum(1 for n in counts if n >= 30) / len(counts) if counts else 0.0


def passive_ratio(ctx: CheckContext) -> float:
    sentences = ctx.sentences
    if not sentences:
        return 0.0
    return sum(1 for s in sentences if PASSIVE_VOICE_RE.search(s)) / len(sentences)


def filler_count(ctx: CheckContext) -> int:
    return sum(1 for token in ctx.full_tokens if token in FILLER_WORDS)


def filler_ratio(ctx: CheckContext) -> float:
    if not ctx.extracted.full_text:
        return 0.0
    return filler_count(ctx) / max(1, len(ctx.full_tokens))


class SentenceClarityCheck(BaseCheck):
    check_id = "sentence-clarity"
    name = "Sentence Clarity"
    category = "readability"
    max_score = 20
    fix = FixCandidate(
        id="fix-sentence-length",
        check_id="sentence-clarity",
        title="Shorten long sentences",
        severity="medium",
        reason="Sentences are too long for quick recruiter scanning.",
        action="Split long sentences into 1–2 shorter bullets.",
        rationale_hint="Shorter sentences improve recruiter scan speed.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        avg = average_sentence_length(ctx)
        readable = 0 < avg <= 22 and long_sentence_ratio(ctx) < 0.2
        return self.result(
            passed=readable,
            score=20 if readable else 12,
            message=(
                "Sentence length is easy to scan."
                if readable
                else "Shorten long sentences for recruiter readability."
            ),
            details=[f"Avg sentence length: {avg:.1f} words"] if avg else None,
        )


class ActiveVoiceCheck(BaseCheck):
    check_id = "active-voice"
    name = "Active Voice"
    category = "readability"
    max_score = 15
    fix = FixCandidate(
        id="fix-passive-voice",
        check_id="active-voice",
        title="Use active voice",
        severity="low",
        reason="Passive voice reduces clarity and impact.",
        action="Rewrite sentences to start with an action verb.",
        rationale_hint="Active voice improves clarity and ownership.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        ratio = passive_ratio(ctx)
        ok = ratio <= 0.2
        return self.result(
            passed=ok,
            score=15 if ok else 8,
            message="Good use of active voice." if ok else "Reduce passive voice for clearer impact.",
            details=(
                [f"Passive voice in {round_half_up(ratio * 100)}% of sentences."]
                if ctx.sentences else None
            ),
        )


class ConciseLanguageCheck(BaseCheck):
    check_id = "concise-language"
    name = "Concise Language"
    category = "readability"
    max_score = 15
    fix = FixCandidate(
        id="fix-filler-words",
        check_id="concise-language",
        title="Remove filler words",
        severity="low",
        reason="Filler words reduce punchiness.",
        action="Remove terms like “very”, “really”, “just”.",
        rationale_hint="Concise language increases impact.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        count = filler_count(ctx)
        ok = filler_ratio(ctx) <= 0.02
        return self.result(
            passed=ok,
            score=15 if ok else 8,
            message="Language is concise." if ok else "Remove filler words to sharpen statements.",
            details=[f"Filler word count: {count}"] if count > 0 else None,
        )


class BulletDensityCheck(BaseCheck):
    check_id = "bullet-density"
    name = "Bullet Density"
    category = "readability"
    max_score = 10
    fix = FixCandidate(
        id="fix-bullet-density",
        check_id="bullet-density",
        title="Add more bullets",
        severity="medium",
        reason="Resume is not scannable enough.",
        action="Use bullets for key accomplishments instead of paragraphs.",
        rationale_hint="Bullets improve scanability.",
    )

    def evaluate(self, ctx: CheckContext) -> ATSCheck:
        total = ctx.total_bullets
        ok = total >= 6
        return self.result(
            passed=ok,
            score=10 if ok else 4,
            message=(
                "Bullets provide a scannable format."
                if ok
                else "Use more bullet points for scan-friendly impact."
            ),
            details=[f"Total bullets: {total}"] if total else None,
        )


def readability_notes(ctx: CheckContext) -> list[str]:
    """Plain-language readability observations shown beside the scores."""
    notes: list[str] = []
    avg = average_sentence_length(ctx)
    if avg:
        notes.append(f"Average sentence length: {avg:.1f} words.")
    ratio = passive_ratio(ctx)
    if ratio > 0:
        notes.append(f"Passive voice detected in {round_half_up(ratio * 100)}% of sentences.")
    count = filler_count(ctx)
    if count > 0:
        notes.append(f"Filler words found: {count}.")
    if ctx.total_bullets < 6:
        notes.append("Add more bullets to improve scanability.")
    return notes
