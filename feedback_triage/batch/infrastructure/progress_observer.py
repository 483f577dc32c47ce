"""ProgressBatchObserver: renders a Rich progress bar for a batch to stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

# Bar colour per sentiment of the most recently classified item.
_SENTIMENT_COLORS: dict[str, str] = {
    "positive": "green",
    "negative": "red",
    "neutral": "yellow",
}


class ProgressBatchObserver:
    """Shows one progress bar per batch, annotated with the last classification.

    Only batch_started, batch_item_classified, batch_progress and
    batch_completed produce output.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests);
    counters are still tracked.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self.completed = 0
        self.total = 0
        self.last_label = ""
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def batch_started(self, batch_id: str, total_items: int) -> None:
        self.completed = 0
        self.total = total_items
        self.last_label = ""

        if self._disabled:
            return

        self._progress = Progress(
            TextColumn("Classifying"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TextColumn("eta"),
            TimeRemainingColumn(),
            TextColumn("{task.fields[last]}"),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=batch_id[:8], total=float(total_items), last=""
        )
        self._progress.start()

    def batch_item_classified(
        self,
        batch_id: str,
        item_id: int,
        sentiment: str,
        urgency: int,
    ) -> None:
        color = _SENTIMENT_COLORS.get(sentiment, "white")
        self.last_label = f"#{item_id} [{color}]{sentiment}[/{color}] u{urgency}"

    def batch_progress(self, batch_id: str, completed: int, total: int) -> None:
        self.completed = completed
        if self._progress is not None and self._task_id is not None:
            self._progress.update(
                self._task_id, completed=completed, last=self.last_label
            )

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
