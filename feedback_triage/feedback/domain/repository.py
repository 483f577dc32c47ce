"""FeedbackRepository Protocol: structural interface for the feedback store."""

from collections.abc import Sequence
from typing import Protocol

from feedback_triage.batch.domain.item import FeedbackItem
from feedback_triage.feedback.domain.record import FeedbackRecord, NewFeedback
from feedback_triage.feedback.domain.stats import FeedbackStats


class FeedbackRepository(Protocol):
    """Persists feedback entries and their classifications."""

    def add(self, feedback: NewFeedback) -> int: ...

    def add_many(self, feedback: Sequence[NewFeedback]) -> int: ...

    def list_feedback(
        self,
        source: str | None = None,
        sentiment: str | None = None,
        limit: int = 50,
    ) -> list[FeedbackRecord]: ...

    def get_content(self, feedback_id: int) -> str | None: ...

    def update_classification(
        self, feedback_id: int, sentiment: str, urgency: int
    ) -> bool: ...

    def list_unscored(self, limit: int = 50) -> list[FeedbackItem]: ...

    def stats(self) -> FeedbackStats: ...
