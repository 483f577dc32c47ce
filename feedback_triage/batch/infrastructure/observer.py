"""StructlogBatchObserver: production observer that delegates to structlog."""

import structlog


class StructlogBatchObserver:
    """Logs batch domain events to structlog.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(self, batch_id: str, total_items: int) -> None:
        self._log.info("batch.started", batch_id=batch_id, total_items=total_items)

    def batch_item_classified(
        self,
        batch_id: str,
        item_id: int,
        sentiment: str,
        urgency: int,
    ) -> None:
        self._log.debug(
            "batch.item_classified",
            batch_id=batch_id,
            item_id=item_id,
            sentiment=sentiment,
            urgency=urgency,
        )

    def batch_progress(self, batch_id: str, completed: int, total: int) -> None:
        self._log.debug(
            "batch.progress",
            batch_id=batch_id,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "batch.completed",
            batch_id=batch_id,
            total_items=total_items,
            elapsed_seconds=round(elapsed_seconds, 2),
        )
