from services.ats.text import (
    clamp,
    extract_phrases,
    matches_word_boundary,
    normalize,
    opening_word,
    round_half_up,
    split_sentences,
    tokenize,
)
from services.ats.vocabulary import DATE_RE, METRIC_RE, PASSIVE_VOICE_RE


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Led a TEAM (of 5)!") == "led a team of 5"


def test_normalize_keeps_metric_characters():
    assert normalize("Grew revenue +$1.5M, up 20%") == "grew revenue +$1.5m up 20%"


def test_normalize_unifies_dashes_and_whitespace():
    assert normalize("2019 – 2021   remote") == "2019 - 2021 remote"


def test_normalize_empty():
    assert normalize("") == ""
    assert normalize(None) == ""


def test_tokenize_keeps_technical_tokens():
    assert tokenize("Node.js, React and CI/CD") == ["node.js", "react", "and", "ci", "cd"]


def test_split_sentences():
    text = "Built APIs. Led a team!  Why?   "
    assert split_sentences(text) == ["Built APIs.", "Led a team!", "Why?"]


def test_split_sentences_empty():
    assert split_sentences("") == []


def test_extract_phrases_bigrams_then_trigrams():
    assert extract_phrases(["machine", "learning", "engineer"]) == [
        "machine learning",
        "machine learning engineer",
        "learning engineer",
    ]


def test_extract_phrases_short_input():
    assert extract_phrases(["python"]) == []


class TestWordBoundary:
    def test_term_inside_word_does_not_match(self):
        assert not matches_word_boundary("chainsaws and other power tools", "aws")

    def test_react_inside_create_does_not_match(self):
        assert not matches_word_boundary("create reusable components", "react")

    def test_whole_word_matches(self):
        assert matches_word_boundary("deployed on aws lambda", "aws")

    def test_multi_word_uses_containment(self):
        assert matches_word_boundary("applied machine learning models", "machine learning")
        assert not matches_word_boundary("machine shop learning", "machine learning")

    def test_dotted_term_is_escaped(self):
        assert matches_word_boundary("built node.js services", "node.js")
        assert not matches_word_boundary("built nodexjs services", "node.js")


def test_opening_word():
    assert opening_word("  Spearheaded the rollout") == "spearheaded"
    assert opening_word("Co-led 3 teams") == "coled"
    assert opening_word("") == ""


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4999) == 2


def test_clamp():
    assert clamp(120) == 100
    assert clamp(-3) == 0
    assert clamp(42) == 42


def test_normalize_drops_non_ascii_letters():
    assert normalize("Café Lead") == "caf lead"


class TestAsciiPatterns:
    def test_metric_needs_ascii_digits(self):
        assert METRIC_RE.search("Grew sales 30%")
        assert METRIC_RE.search("Grew sales ٣٠%") is None
        assert METRIC_RE.search("Added １２ users") is None

    def test_passive_needs_ascii_word(self):
        assert PASSIVE_VOICE_RE.search("The report was taken")
        assert PASSIVE_VOICE_RE.search("The report was mañen") is None

    def test_date_is_whole_ascii_value(self):
        assert DATE_RE.fullmatch("2020-01")
        assert DATE_RE.fullmatch("2020\n") is None
        assert DATE_RE.fullmatch("２０２０") is None
