"""Per-bullet rewrite suggestions for work experience highlights."""

from collections import Counter
from typing import Callable, NamedTuple

from models.responses import BulletSuggestion
from models.resume import ResumeDocument
from services.ats.checks.impact import is_strong_opener
from services.ats.text import normalize, tokenize
from services.ats.vocabulary import METRIC_RE, PASSIVE_VOICE_RE

MAX_COLLECTED = 8
MAX_RETURNED = 6
LONG_BULLET_TOKENS = 28


class BulletRule(NamedTuple):
    issue: str
    template: str
    applies: Callable[[str, Counter], bool]


def _is_repeated(bullet: str, counts: Counter) -> bool:
    normalized = normalize(bullet)
    return bool(normalized) and counts[normalized] > 1


BULLET_RULES: tuple[BulletRule, ...] = (
    BulletRule(
        "Weak action verb opener",
        "Led/Improved/Delivered X by Y%, resulting in Z.",
        lambda bullet, _: not is_strong_opener(bullet),
    ),
    BulletRule(
        "Missing measurable impact",
        "Increased/Reduced/Delivered X by Y% through Z.",
        lambda bullet, _: METRIC_RE.search(bullet) is None,
    ),
    BulletRule(
        "Passive voice",
        "Action verb + direct object + result (e.g., “Built X that achieved Y”).",
        lambda bullet, _: PASSIVE_VOICE_RE.search(bullet) is not None,
    ),
    BulletRule(
        "Too long for quick scanning",
        "Split into two bullets, each with one impact and one metric.",
        lambda bullet, _: len(tokenize(bullet)) > LONG_BULLET_TOKENS,
    ),
    BulletRule(
        "Repetitive phrasing",
        "Use a different verb and focus on a distinct outcome.",
        _is_repeated,
    ),
)


def generate_bullet_suggestions(resume: ResumeDocument) -> list[BulletSuggestion]:
    """Flag weak work bullets, in document order, one suggestion per issue."""
    counts = Counter(
        n for n in (normalize(b) for job in resume.work for b in job.highlights) if n
    )
    suggestions: list[BulletSuggestion] = []
    for job in resume.work:
        owner = job.company or job.position or "Work Experience"
        for bullet in job.highlights:
            for rule in BULLET_RULES:
                if len(suggestions) >= MAX_COLLECTED:
                    return suggestions[:MAX_RETURNED]
                if rule.applies(bullet, counts):
                    suggestions.append(BulletSuggestion(
                        section="work",
                        company_or_project=owner,
                        original=bullet,
                        issue=rule.issue,
                        template=rule.template,
                    ))
    return suggestions[:MAX_RETURNED]
