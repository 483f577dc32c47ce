"""Structlog implementation of the FeedbackObserver port."""

import structlog


class StructlogFeedbackObserver:
    """Delegates feedback domain events to structlog.

    Satisfies the FeedbackObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def feedback_added(self, feedback_id: int, source: str) -> None:
        self._log.info("feedback.added", feedback_id=feedback_id, source=source)

    def feedback_classified(
        self, feedback_id: int, sentiment: str, urgency: int
    ) -> None:
        self._log.info(
            "feedback.classified",
            feedback_id=feedback_id,
            sentiment=sentiment,
            urgency=urgency,
        )

    def feedback_seeded(self, count: int) -> None:
        self._log.info("feedback.seeded", count=count)
