"""Judgment: the structured result of classifying one feedback text."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

type Sentiment = Literal["positive", "negative", "neutral"]

SENTIMENTS: tuple[Sentiment, ...] = ("positive", "negative", "neutral")


class Judgment(BaseModel):
    """Immutable sentiment/urgency classification of a single feedback text.

    Constructed fresh for every classification call, either from a normalized
    model response or by the keyword fallback. Urgency 1 is a feature request,
    5 a critical production issue.
    """

    model_config = ConfigDict(frozen=True)

    sentiment: Sentiment
    urgency: int = Field(ge=1, le=5)
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str | None = None
