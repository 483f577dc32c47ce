"""Tests for NewFeedback validation and the seed data."""

import pytest
from pydantic import ValidationError

from feedback_triage.feedback.domain.record import NewFeedback
from feedback_triage.feedback.domain.seed import MOCK_FEEDBACK


class TestNewFeedback:
    def test_urgency_defaults_to_three(self) -> None:
        feedback = NewFeedback(source="github", content="Add dark mode")

        assert feedback.urgency == 3
        assert feedback.sentiment is None
        assert feedback.author is None

    @pytest.mark.parametrize(("source", "content"), [("", "text"), ("github", "   ")])
    def test_blank_source_or_content_is_rejected(
        self, source: str, content: str
    ) -> None:
        with pytest.raises(ValidationError):
            NewFeedback(source=source, content=content)

    def test_unknown_sentiment_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NewFeedback(source="github", content="x", sentiment="angry")  # type: ignore[arg-type]


class TestMockFeedback:
    def test_has_fifteen_entries_across_four_sources(self) -> None:
        assert len(MOCK_FEEDBACK) == 15
        assert {f.source for f in MOCK_FEEDBACK} == {
            "discord",
            "github",
            "support",
            "twitter",
        }

    def test_every_entry_is_preclassified(self) -> None:
        assert all(f.sentiment is not None for f in MOCK_FEEDBACK)
