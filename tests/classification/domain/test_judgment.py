"""Tests for the Judgment model."""

import pytest
from pydantic import ValidationError

from feedback_triage.classification.domain.judgment import Judgment


class TestJudgment:
    def test_is_immutable(self) -> None:
        judgment = Judgment(sentiment="positive", urgency=1, confidence=0.9)

        with pytest.raises(ValidationError):
            judgment.urgency = 5  # type: ignore[misc]

    def test_reasoning_is_optional(self) -> None:
        judgment = Judgment(sentiment="neutral", urgency=3, confidence=0.5)

        assert judgment.reasoning is None

    @pytest.mark.parametrize("urgency", [0, 6])
    def test_rejects_out_of_range_urgency(self, urgency: int) -> None:
        with pytest.raises(ValidationError):
            Judgment(sentiment="neutral", urgency=urgency, confidence=0.5)

    def test_rejects_unknown_sentiment(self) -> None:
        with pytest.raises(ValidationError):
            Judgment(sentiment="mixed", urgency=3, confidence=0.5)  # type: ignore[arg-type]

    def test_dump_omits_missing_reasoning(self) -> None:
        judgment = Judgment(sentiment="negative", urgency=4, confidence=0.7)

        assert judgment.model_dump(exclude_none=True) == {
            "sentiment": "negative",
            "urgency": 4,
            "confidence": 0.7,
        }
