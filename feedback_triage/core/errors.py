"""Base exception class for all feedback-triage-specific errors."""


class FeedbackTriageError(Exception):
    """Base class for all feedback-triage errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
