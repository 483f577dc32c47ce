"""Error types raised by the feedback service."""

from feedback_triage.core.errors import FeedbackTriageError


class FeedbackValidationError(FeedbackTriageError):
    """Raised when a feedback submission or analyze request is incomplete or invalid."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate feedback: {reason}")


class FeedbackNotFoundError(FeedbackTriageError):
    """Raised when a referenced feedback id does not exist."""

    def __init__(self, feedback_id: int) -> None:
        self.feedback_id = feedback_id
        super().__init__(f"Failed to find feedback: no entry with id {feedback_id}")
