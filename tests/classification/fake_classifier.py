"""FakeClassifier: in-memory Classifier implementation for use in tests."""

from feedback_triage.classification.domain.judgment import Judgment

_DEFAULT_JUDGMENT = Judgment(
    sentiment="neutral",
    urgency=3,
    confidence=0.8,
    reasoning="Canned.",
)


class FakeClassifier:
    """Satisfies the Classifier protocol.

    Returns the judgment mapped to the exact content when one is configured,
    otherwise a canned default. Records every content it was asked to classify.
    """

    def __init__(
        self,
        judgments: dict[str, Judgment] | None = None,
        default: Judgment = _DEFAULT_JUDGMENT,
    ) -> None:
        self._judgments = judgments or {}
        self._default = default
        self.contents: list[str] = []

    async def classify(self, content: str) -> Judgment:
        self.contents.append(content)
        return self._judgments.get(content, self._default)
