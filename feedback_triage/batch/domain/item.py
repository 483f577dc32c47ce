"""FeedbackItem: one (identifier, text) pair submitted for classification."""

from pydantic import BaseModel

type ItemId = int


class FeedbackItem(BaseModel, frozen=True):
    """Immutable value object pairing a feedback identifier with its text."""

    id: ItemId
    content: str
