"""Tests for ProgressBatchObserver."""

from feedback_triage.batch.infrastructure.progress_observer import (
    ProgressBatchObserver,
)


def _started(total: int = 3) -> ProgressBatchObserver:
    observer = ProgressBatchObserver(disabled=True)
    observer.batch_started(batch_id="batch-1234", total_items=total)
    return observer


class TestProgressBatchObserver:
    """Counters are tracked even when terminal output is disabled."""

    def test_started_resets_counters(self) -> None:
        observer = _started(total=5)

        assert observer.total == 5
        assert observer.completed == 0

    def test_progress_updates_completed(self) -> None:
        observer = _started()

        observer.batch_progress(batch_id="batch-1234", completed=2, total=3)

        assert observer.completed == 2

    def test_item_classified_sets_label(self) -> None:
        observer = _started()

        observer.batch_item_classified(
            batch_id="batch-1234", item_id=9, sentiment="negative", urgency=4
        )

        assert "#9" in observer.last_label
        assert "negative" in observer.last_label
        assert "u4" in observer.last_label

    def test_completed_without_live_display_is_safe(self) -> None:
        observer = _started()

        observer.batch_completed(
            batch_id="batch-1234", total_items=3, elapsed_seconds=0.1
        )

    def test_restart_clears_previous_batch(self) -> None:
        observer = _started(total=2)
        observer.batch_progress(batch_id="batch-1234", completed=2, total=2)

        observer.batch_started(batch_id="batch-5678", total_items=7)

        assert observer.completed == 0
        assert observer.total == 7
