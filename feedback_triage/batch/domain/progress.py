"""ProgressCallback: caller-supplied hook invoked after each batch item."""

from typing import Protocol


class ProgressCallback(Protocol):
    """Called synchronously with (items completed so far, total item count)."""

    def __call__(self, completed: int, total: int) -> None: ...
