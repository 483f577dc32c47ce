"""TriageService: feedback operations on top of the store and the classifier."""

from pydantic import ValidationError

from feedback_triage.batch.application.runner import BatchRunner
from feedback_triage.batch.domain.progress import ProgressCallback
from feedback_triage.classification.domain.classifier import Classifier
from feedback_triage.classification.domain.judgment import Judgment
from feedback_triage.feedback.domain.observer import FeedbackObserver
from feedback_triage.feedback.domain.record import FeedbackRecord, NewFeedback
from feedback_triage.feedback.domain.repository import FeedbackRepository
from feedback_triage.feedback.domain.seed import MOCK_FEEDBACK
from feedback_triage.feedback.domain.stats import FeedbackStats
from feedback_triage.feedback.infrastructure.errors import (
    FeedbackNotFoundError,
    FeedbackValidationError,
)


class TriageService:
    """Adds, lists, seeds and classifies stored feedback.

    The service receives the repository, classifier and batch runner as
    collaborators so tests can substitute in-memory fakes.
    """

    def __init__(
        self,
        repository: FeedbackRepository,
        classifier: Classifier,
        batch_runner: BatchRunner,
        observer: FeedbackObserver,
        batch_limit: int = 50,
    ) -> None:
        self._repository = repository
        self._classifier = classifier
        self._batch_runner = batch_runner
        self._observer = observer
        self._batch_limit = batch_limit

    def add(
        self,
        source: str | None,
        content: str | None,
        author: str | None = None,
        sentiment: str | None = None,
        urgency: int | None = None,
        themes: str | None = None,
    ) -> int:
        """Store a new feedback entry and return its id.

        Raises:
            FeedbackValidationError: if source or content is missing, or the
                supplied sentiment/urgency is out of range.
        """
        if not source or not content:
            raise FeedbackValidationError(reason="source and content are required")

        fields: dict[str, object] = {
            "source": source,
            "content": content,
            "author": author,
            "sentiment": sentiment,
            "themes": themes,
        }
        if urgency is not None:
            fields["urgency"] = urgency
        try:
            feedback = NewFeedback.model_validate(fields)
        except ValidationError as exc:
            raise FeedbackValidationError(reason=str(exc)) from exc

        feedback_id = self._repository.add(feedback)
        self._observer.feedback_added(feedback_id=feedback_id, source=feedback.source)
        return feedback_id

    def list_feedback(
        self,
        source: str | None = None,
        sentiment: str | None = None,
        limit: int = 50,
    ) -> list[FeedbackRecord]:
        return self._repository.list_feedback(
            source=source, sentiment=sentiment, limit=limit
        )

    def stats(self) -> FeedbackStats:
        return self._repository.stats()

    def seed(self) -> int:
        """Insert the fixed mock feedback set and return how many rows were added."""
        count = self._repository.add_many(MOCK_FEEDBACK)
        self._observer.feedback_seeded(count=count)
        return count

    async def analyze(
        self,
        content: str | None = None,
        feedback_id: int | None = None,
    ) -> Judgment:
        """Classify free text or a stored entry.

        With only ``feedback_id``, the stored content is classified. Whenever
        ``feedback_id`` is given, the resulting sentiment and urgency are
        written back to that entry.

        Raises:
            FeedbackValidationError: if neither content nor feedback_id is given.
            FeedbackNotFoundError: if feedback_id is needed for content and does not exist.
        """
        if not content:
            if feedback_id is None:
                raise FeedbackValidationError(reason="content or id is required")
            content = self._repository.get_content(feedback_id)
            if content is None:
                raise FeedbackNotFoundError(feedback_id=feedback_id)

        judgment = await self._classifier.classify(content=content)

        if feedback_id is not None:
            self._store(feedback_id=feedback_id, judgment=judgment)
        return judgment

    async def analyze_unscored(
        self,
        limit: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> dict[int, Judgment]:
        """Classify every stored entry without a sentiment, up to ``limit`` entries."""
        items = self._repository.list_unscored(limit=limit or self._batch_limit)
        if not items:
            return {}

        results = await self._batch_runner.run(items=items, on_progress=on_progress)
        for feedback_id, judgment in results.items():
            self._store(feedback_id=feedback_id, judgment=judgment)
        return results

    def _store(self, feedback_id: int, judgment: Judgment) -> None:
        self._repository.update_classification(
            feedback_id=feedback_id,
            sentiment=judgment.sentiment,
            urgency=judgment.urgency,
        )
        self._observer.feedback_classified(
            feedback_id=feedback_id,
            sentiment=judgment.sentiment,
            urgency=judgment.urgency,
        )
