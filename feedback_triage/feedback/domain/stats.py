"""FeedbackStats: aggregated counts over the feedback store."""

from pydantic import BaseModel


class SourceCount(BaseModel, frozen=True):
    source: str
    count: int


class SentimentCount(BaseModel, frozen=True):
    sentiment: str
    count: int


class UrgencySummary(BaseModel, frozen=True):
    """Average, minimum and maximum urgency; all None when no row has an urgency."""

    avg_urgency: float | None = None
    min_urgency: int | None = None
    max_urgency: int | None = None


class FeedbackStats(BaseModel, frozen=True):
    total: int
    by_source: list[SourceCount]
    by_sentiment: list[SentimentCount]
    urgency: UrgencySummary
