"""Text normalization, tokenization and whole-word matching for ATS scoring."""

import math
import re

_DASHES_RE = re.compile(r"[–—]")
# ASCII word chars only, so accented letters are stripped the same way a naive ATS would
_DISALLOWED_RE = re.compile(r"[^\w\s.%+$-]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_RE = re.compile(r"\b[a-z0-9][a-z0-9+.-]*\b")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_NON_ALPHA_RE = re.compile(r"[^a-z]")


def normalize(text: str | None) -> str:
    """Lowercase, unify dashes, drop punctuation except . % + $ - and collapse spaces."""
    if not text:
        return ""
    text = _DASHES_RE.sub("-", text)
    text = _DISALLOWED_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip().lower()


def tokenize(text: str | None) -> list[str]:
    return _TOKEN_RE.findall(normalize(text))


def split_sentences(text: str | None) -> list[str]:
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def extract_phrases(tokens: list[str], max_n: int = 3) -> list[str]:
    """All contiguous n-grams with 2 <= n <= max_n, in reading order."""
    phrases: list[str] = []
    for i in range(len(tokens)):
        for n in range(2, max_n + 1):
            if i + n <= len(tokens):
                phrases.append(" ".join(tokens[i:i + n]))
    return phrases


def matches_word_boundary(text: str, term: str) -> bool:
    """Whole-word match for single terms, phrase containment for multi-word terms.

    Both sides are expected to be normalized, so multi-word terms share the
    single-space joining used when the phrases were built.
    """
    if " " in term:
        return term in text
    return re.search(rf"\b{re.escape(term)}\b", text, re.IGNORECASE) is not None


def opening_word(bullet: str) -> str:
    """First space-separated word of a bullet, lowercased, letters only."""
    first = bullet.strip().split(" ")[0]
    return _NON_ALPHA_RE.sub("", first.lower())


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return min(high, max(low, value))
