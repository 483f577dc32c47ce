"""FeedbackClassifier: model-backed classification with a keyword fallback."""

import time

from feedback_triage.classification.domain.fallback import fallback_judgment
from feedback_triage.classification.domain.judgment import Judgment
from feedback_triage.classification.domain.model_client import ModelClient
from feedback_triage.classification.domain.normalize import (
    extract_payload,
    judgment_from_payload,
)
from feedback_triage.classification.domain.observer import ClassifierObserver
from feedback_triage.classification.domain.outcome import (
    CallFailure,
    ClassificationOutcome,
    ModelJudgment,
    ParseFailure,
)
from feedback_triage.classification.domain.prompt import build_prompt

DEFAULT_MAX_TOKENS = 150


class FeedbackClassifier:
    """Classifies feedback through a ModelClient, degrading to keyword counting.

    ``classify`` never raises: a failed call, an unparseable response, or any
    other error on the model path produces the fallback Judgment instead.
    Individually malformed fields in an otherwise parseable response are
    repaired per field and do not trigger the fallback.
    """

    def __init__(
        self,
        model_client: ModelClient,
        observer: ClassifierObserver,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        self._model_client = model_client
        self._observer = observer
        self._max_tokens = max_tokens

    async def classify(self, content: str) -> Judgment:
        """Return a Judgment for content, from the model when possible."""
        self._observer.classification_started(model=self._model_client.model)
        start = time.monotonic()

        outcome = await self.classify_outcome(content=content)

        if isinstance(outcome, ModelJudgment):
            judgment = outcome.judgment
            source = "model"
        else:
            kind = "call_failure" if isinstance(outcome, CallFailure) else "parse_failure"
            self._observer.classification_fallback_used(kind=kind, reason=outcome.reason)
            judgment = fallback_judgment(content=content)
            source = "fallback"

        self._observer.classification_completed(
            source=source,
            sentiment=judgment.sentiment,
            urgency=judgment.urgency,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return judgment

    async def classify_outcome(self, content: str) -> ClassificationOutcome:
        """Run only the model path and report how it ended, without falling back."""
        try:
            prompt = build_prompt(content=content)
            raw = await self._model_client.complete(
                prompt=prompt, max_tokens=self._max_tokens
            )
        except Exception as exc:
            return CallFailure(reason=str(exc) or type(exc).__name__)

        try:
            payload = extract_payload(raw=raw)
            if isinstance(payload, str):
                return ParseFailure(reason=payload, raw_response=raw)
            return ModelJudgment(judgment=judgment_from_payload(payload=payload))
        except Exception as exc:
            return ParseFailure(
                reason=str(exc) or type(exc).__name__, raw_response=str(raw)
            )
