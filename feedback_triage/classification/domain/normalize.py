"""Response normalization: recovers a Judgment from loosely-structured model text.

Parsing happens in two steps. ``extract_payload`` turns the raw response into a
generic mapping (or an error string when nothing usable is found). Each of the
four Judgment fields is then read through its own accessor, which defaults or
clamps independently so that one malformed field never discards the others.
"""

import json
import math
import re

from feedback_triage.classification.domain.judgment import Judgment, Sentiment

DEFAULT_URGENCY = 3
MIN_URGENCY = 1
MAX_URGENCY = 5
MODEL_DEFAULT_CONFIDENCE = 0.7

type Payload = dict[str, object]

_CODE_FENCE_PATTERN = re.compile(r"```(?:json)?\n?")
_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)
_INT_PREFIX_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def strip_code_fences(raw: str) -> str:
    """Remove markdown code fences (optionally tagged ``json``) and surrounding whitespace."""
    return _CODE_FENCE_PATTERN.sub("", raw.strip()).strip()


def extract_payload(raw: str) -> Payload | str:
    """
    Recover the JSON object embedded in a model response.

    The span from the first ``{`` to the last ``}`` is parsed, so prose before
    or after the object is ignored.

    Returns the parsed mapping on success, or an error string describing why
    no object could be recovered.
    """
    text = strip_code_fences(raw)
    match = _JSON_OBJECT_PATTERN.search(text)
    if match is None:
        return "no JSON object found in model response"

    try:
        data = json.loads(match.group(0))
    except ValueError as exc:
        return f"invalid JSON in model response: {exc}"

    if not isinstance(data, dict):
        return f"expected a JSON object, got {type(data).__name__}"
    return data


def normalize_sentiment(value: object) -> Sentiment:
    """Map any sentiment label onto positive/negative/neutral by substring match."""
    if value is None:
        return "neutral"
    label = str(value).lower()
    if "positive" in label:
        return "positive"
    if "negative" in label:
        return "negative"
    return "neutral"


def normalize_urgency(value: object) -> int:
    """Parse urgency as an integer, defaulting to 3, then clamp into [1, 5]."""
    parsed = _parse_int(value)
    urgency = DEFAULT_URGENCY if parsed is None else parsed
    return max(MIN_URGENCY, min(MAX_URGENCY, urgency))


def normalize_confidence(
    value: object, default: float = MODEL_DEFAULT_CONFIDENCE
) -> float:
    """Parse confidence as a real number, defaulting when invalid, clamped into [0, 1]."""
    parsed = _parse_float(value)
    confidence = default if parsed is None else parsed
    return max(0.0, min(1.0, confidence))


def normalize_reasoning(value: object) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def judgment_from_payload(payload: Payload) -> Judgment:
    """Build a Judgment from a parsed model payload, repairing each field in isolation."""
    return Judgment(
        sentiment=normalize_sentiment(payload.get("sentiment")),
        urgency=normalize_urgency(payload.get("urgency")),
        confidence=normalize_confidence(payload.get("confidence")),
        reasoning=normalize_reasoning(payload.get("reasoning")),
    )


def _parse_int(value: object) -> int | None:
    """Integer parse with leading-prefix semantics for strings ("4 - blocker" -> 4)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PREFIX_PATTERN.match(value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # digit string past the interpreter's int conversion limit
            return None
    return None


def _parse_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        raw: int | float | str = value
    elif isinstance(value, str):
        match = _FLOAT_PREFIX_PATTERN.match(value)
        if match is None:
            return None
        raw = match.group(1)
    else:
        return None
    try:
        number = float(raw)
    except (OverflowError, ValueError):
        # int too large for a float
        return None
    return number if math.isfinite(number) else None
