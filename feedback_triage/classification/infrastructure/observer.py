"""Structlog implementation of the ClassifierObserver port."""

import structlog


class StructlogClassifierObserver:
    """Delegates classification events to structlog.

    Satisfies the ClassifierObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def classification_started(self, model: str) -> None:
        self._log.debug("classifier.started", model=model)

    def classification_completed(
        self,
        source: str,
        sentiment: str,
        urgency: int,
        duration_ms: int,
    ) -> None:
        self._log.info(
            "classifier.completed",
            source=source,
            sentiment=sentiment,
            urgency=urgency,
            duration_ms=duration_ms,
        )

    def classification_fallback_used(self, kind: str, reason: str) -> None:
        self._log.warning("classifier.fallback_used", kind=kind, reason=reason)
