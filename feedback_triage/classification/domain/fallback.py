"""Keyword fallback: deterministic classification used when the model path fails."""

from feedback_triage.classification.domain.judgment import Judgment, Sentiment
from feedback_triage.classification.domain.normalize import DEFAULT_URGENCY

FALLBACK_CONFIDENCE = 0.5
FALLBACK_REASONING = "Fallback rule-based analysis"

POSITIVE_WORDS: tuple[str, ...] = (
    "great",
    "love",
    "excellent",
    "amazing",
    "wonderful",
    "fantastic",
    "good",
    "helpful",
    "easy",
    "smooth",
)
NEGATIVE_WORDS: tuple[str, ...] = (
    "bug",
    "broken",
    "crash",
    "error",
    "fail",
    "slow",
    "bad",
    "terrible",
    "worst",
    "issue",
)
URGENT_WORDS: tuple[str, ...] = (
    "urgent",
    "critical",
    "production",
    "down",
    "blocker",
    "immediately",
)


def count_matches(text: str, lexicon: tuple[str, ...]) -> int:
    """Number of lexicon words occurring anywhere in text (substring match)."""
    return sum(1 for word in lexicon if word in text)


def fallback_judgment(content: str) -> Judgment:
    """Classify content by counting positive, negative and urgent keywords.

    Always succeeds. Confidence is fixed at 0.5 and reasoning carries a fixed
    marker so heuristic judgments can be told apart from model ones.
    """
    text = content.lower()
    positive = count_matches(text=text, lexicon=POSITIVE_WORDS)
    negative = count_matches(text=text, lexicon=NEGATIVE_WORDS)
    urgent = count_matches(text=text, lexicon=URGENT_WORDS)

    return Judgment(
        sentiment=_sentiment(positive=positive, negative=negative),
        urgency=_urgency(positive=positive, negative=negative, urgent=urgent),
        confidence=FALLBACK_CONFIDENCE,
        reasoning=FALLBACK_REASONING,
    )


def _sentiment(positive: int, negative: int) -> Sentiment:
    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def _urgency(positive: int, negative: int, urgent: int) -> int:
    if urgent > 0:
        return 5
    if negative > 2:
        return 4
    if negative > 0:
        return 3
    if positive > 0:
        return 1
    return DEFAULT_URGENCY
