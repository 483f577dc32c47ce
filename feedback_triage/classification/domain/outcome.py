"""ClassificationOutcome: tagged result of the model-backed classification path."""

from dataclasses import dataclass

from feedback_triage.classification.domain.judgment import Judgment


@dataclass(frozen=True)
class ModelJudgment:
    """The model responded and its payload was normalized into a Judgment."""

    judgment: Judgment


@dataclass(frozen=True)
class ParseFailure:
    """The model responded but no JSON object could be recovered from the text."""

    reason: str
    raw_response: str


@dataclass(frozen=True)
class CallFailure:
    """The model call itself raised before producing any text."""

    reason: str


type ClassificationOutcome = ModelJudgment | ParseFailure | CallFailure
