"""Error types raised by classification infrastructure."""

from feedback_triage.core.errors import FeedbackTriageError


class ModelInvocationError(FeedbackTriageError):
    """Raised when the language model cannot be invoked or returns no text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to invoke model: {reason}")
