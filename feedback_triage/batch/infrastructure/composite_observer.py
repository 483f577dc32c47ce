"""CompositeBatchObserver: fans out all events to a list of observers."""

from feedback_triage.batch.domain.observer import BatchObserver


class CompositeBatchObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[BatchObserver]) -> None:
        self._observers = observers

    def batch_started(self, batch_id: str, total_items: int) -> None:
        for obs in self._observers:
            obs.batch_started(batch_id=batch_id, total_items=total_items)

    def batch_item_classified(
        self,
        batch_id: str,
        item_id: int,
        sentiment: str,
        urgency: int,
    ) -> None:
        for obs in self._observers:
            obs.batch_item_classified(
                batch_id=batch_id,
                item_id=item_id,
                sentiment=sentiment,
                urgency=urgency,
            )

    def batch_progress(self, batch_id: str, completed: int, total: int) -> None:
        for obs in self._observers:
            obs.batch_progress(batch_id=batch_id, completed=completed, total=total)

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.batch_completed(
                batch_id=batch_id,
                total_items=total_items,
                elapsed_seconds=elapsed_seconds,
            )
