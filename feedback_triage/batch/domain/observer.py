"""Observer port for the batch domain: defines events in domain language."""

from typing import Protocol


class BatchObserver(Protocol):
    """Observer port emitting structured events during a batch classification.

    Implementations may log to structlog, render progress bars, or record for tests.
    """

    def batch_started(self, batch_id: str, total_items: int) -> None: ...

    def batch_item_classified(
        self,
        batch_id: str,
        item_id: int,
        sentiment: str,
        urgency: int,
    ) -> None: ...

    def batch_progress(self, batch_id: str, completed: int, total: int) -> None: ...

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None: ...
