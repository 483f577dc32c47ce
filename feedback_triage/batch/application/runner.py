"""BatchRunner: classifies a list of feedback items one after another."""

import time
import uuid
from collections.abc import Sequence

from feedback_triage.batch.domain.item import FeedbackItem, ItemId
from feedback_triage.batch.domain.observer import BatchObserver
from feedback_triage.batch.domain.progress import ProgressCallback
from feedback_triage.classification.domain.classifier import Classifier
from feedback_triage.classification.domain.judgment import Judgment


class BatchRunner:
    """Runs the classifier over every item, strictly sequentially and in input order.

    Each model call completes before the next begins. Because the classifier
    never raises, every input item gets a Judgment and the runner has no
    failure path of its own.
    """

    def __init__(self, classifier: Classifier, observer: BatchObserver) -> None:
        self._classifier = classifier
        self._observer = observer

    async def run(
        self,
        items: Sequence[FeedbackItem],
        on_progress: ProgressCallback | None = None,
    ) -> dict[ItemId, Judgment]:
        """Classify items and return a mapping from item id to Judgment.

        After each item, ``on_progress(completed, total)`` is called before the
        next item starts.
        """
        batch_id = str(uuid.uuid4())
        total = len(items)
        self._observer.batch_started(batch_id=batch_id, total_items=total)
        started_at = time.monotonic()

        results: dict[ItemId, Judgment] = {}
        for completed, item in enumerate(items, start=1):
            judgment = await self._classifier.classify(content=item.content)
            results[item.id] = judgment

            self._observer.batch_item_classified(
                batch_id=batch_id,
                item_id=item.id,
                sentiment=judgment.sentiment,
                urgency=judgment.urgency,
            )
            self._observer.batch_progress(
                batch_id=batch_id, completed=completed, total=total
            )
            if on_progress is not None:
                on_progress(completed, total)

        self._observer.batch_completed(
            batch_id=batch_id,
            total_items=len(results),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return results
