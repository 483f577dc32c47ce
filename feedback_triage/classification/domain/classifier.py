"""Classifier Protocol: structural interface for all feedback classifiers."""

from typing import Protocol

from feedback_triage.classification.domain.judgment import Judgment


class Classifier(Protocol):
    """Turns one feedback text into exactly one Judgment. Never raises."""

    async def classify(self, content: str) -> Judgment: ...
