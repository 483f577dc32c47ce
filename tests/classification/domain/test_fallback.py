"""Tests for the keyword fallback classifier."""

import pytest

from feedback_triage.classification.domain.fallback import (
    FALLBACK_CONFIDENCE,
    FALLBACK_REASONING,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    URGENT_WORDS,
    count_matches,
    fallback_judgment,
)


class TestCountMatches:
    """Each lexicon word counts once if it appears anywhere in the text."""

    def test_counts_distinct_words(self) -> None:
        assert count_matches("a bug and a crash", NEGATIVE_WORDS) == 2

    def test_repeated_word_counts_once(self) -> None:
        assert count_matches("bug bug bug", NEGATIVE_WORDS) == 1

    def test_matches_inside_longer_words(self) -> None:
        # "errors" contains "error", "failing" contains "fail"
        assert count_matches("errors keep failing", NEGATIVE_WORDS) == 2

    def test_no_matches(self) -> None:
        assert count_matches("the weather today.", POSITIVE_WORDS) == 0


class TestFallbackSentiment:
    """Sentiment follows the larger of the positive and negative counts."""

    def test_more_positive_words_is_positive(self) -> None:
        assert fallback_judgment("Great docs, easy setup").sentiment == "positive"

    def test_more_negative_words_is_negative(self) -> None:
        assert fallback_judgment("Broken build, slow deploys").sentiment == "negative"

    def test_tie_is_neutral(self) -> None:
        assert fallback_judgment("Good idea but there is a bug").sentiment == "neutral"

    def test_no_signal_is_neutral(self) -> None:
        assert fallback_judgment("The weather today.").sentiment == "neutral"

    def test_matching_is_case_insensitive(self) -> None:
        assert fallback_judgment("EXCELLENT WORK").sentiment == "positive"


class TestFallbackUrgency:
    """Urgency rules are evaluated in order: urgent, heavy negative, negative, positive."""

    def test_any_urgent_word_is_five(self) -> None:
        assert fallback_judgment("Love it, but production is down").urgency == 5

    def test_more_than_two_negative_words_is_four(self) -> None:
        assert fallback_judgment("bug, crash and error again").urgency == 4

    @pytest.mark.parametrize("text", ["there is a bug", "a bug and a crash"])
    def test_one_or_two_negative_words_is_three(self, text: str) -> None:
        assert fallback_judgment(text).urgency == 3

    def test_only_positive_words_is_one(self) -> None:
        assert fallback_judgment("Wonderful and helpful").urgency == 1

    def test_no_signal_defaults_to_three(self) -> None:
        assert fallback_judgment("The weather today.").urgency == 3


class TestFallbackJudgment:
    def test_broken_and_urgent(self) -> None:
        judgment = fallback_judgment("This is broken and needs urgent attention!")

        assert judgment.sentiment == "negative"
        assert judgment.urgency == 5
        assert judgment.confidence == pytest.approx(0.5)

    def test_no_lexicon_matches(self) -> None:
        judgment = fallback_judgment("The weather today.")

        assert judgment.sentiment == "neutral"
        assert judgment.urgency == 3
        assert judgment.confidence == pytest.approx(0.5)

    def test_confidence_and_reasoning_are_fixed_markers(self) -> None:
        judgment = fallback_judgment("Anything at all")

        assert judgment.confidence == FALLBACK_CONFIDENCE
        assert judgment.reasoning == FALLBACK_REASONING

    def test_empty_text_is_classified(self) -> None:
        judgment = fallback_judgment("   ")

        assert judgment.sentiment == "neutral"
        assert judgment.urgency == 3


class TestLexicons:
    """Lexicons are immutable tuples of lower-case words."""

    @pytest.mark.parametrize("lexicon", [POSITIVE_WORDS, NEGATIVE_WORDS, URGENT_WORDS])
    def test_lexicon_is_lower_case_tuple(self, lexicon: tuple[str, ...]) -> None:
        assert isinstance(lexicon, tuple)
        assert all(word == word.lower() for word in lexicon)
