"""Observer port for the feedback domain: defines events in domain language."""

from typing import Protocol


class FeedbackObserver(Protocol):
    def feedback_added(self, feedback_id: int, source: str) -> None: ...

    def feedback_classified(
        self, feedback_id: int, sentiment: str, urgency: int
    ) -> None: ...

    def feedback_seeded(self, count: int) -> None: ...
