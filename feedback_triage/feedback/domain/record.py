"""Feedback records: stored feedback rows and new-feedback submissions."""

from pydantic import BaseModel, Field, field_validator

from feedback_triage.classification.domain.judgment import Sentiment


class NewFeedback(BaseModel, frozen=True):
    """A feedback submission before it is stored.

    ``source`` and ``content`` must be non-blank. Urgency defaults to a
    moderate 3 until the entry is classified.
    """

    source: str = Field(min_length=1)
    content: str = Field(min_length=1)
    author: str | None = None
    sentiment: Sentiment | None = None
    urgency: int = Field(default=3, ge=1, le=5)
    themes: str | None = None

    @field_validator("source", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class FeedbackRecord(BaseModel, frozen=True):
    """One stored feedback row."""

    id: int
    source: str
    content: str
    author: str | None = None
    created_at: str | None = None
    sentiment: str | None = None
    urgency: int | None = None
    themes: str | None = None
