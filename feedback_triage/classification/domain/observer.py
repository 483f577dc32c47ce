"""ClassifierObserver port: domain events emitted while classifying feedback."""

from typing import Literal, Protocol

type ResultSource = Literal["model", "fallback"]
type FailureKind = Literal["call_failure", "parse_failure"]


class ClassifierObserver(Protocol):
    """Observer port for classification events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def classification_started(self, model: str) -> None: ...

    def classification_completed(
        self,
        source: ResultSource,
        sentiment: str,
        urgency: int,
        duration_ms: int,
    ) -> None: ...

    def classification_fallback_used(self, kind: FailureKind, reason: str) -> None: ...
