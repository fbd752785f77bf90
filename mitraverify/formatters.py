"""Presentation helpers for verification results. Pure functions."""

import math
from enum import Enum


class VerdictStyle(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @property
    def css_class(self) -> str:
        return _CSS_CLASSES[self]


_CSS_CLASSES = {
    VerdictStyle.POSITIVE: "text-green-600",
    VerdictStyle.NEGATIVE: "text-red-600",
    VerdictStyle.NEUTRAL: "text-yellow-600",
}

_POSITIVE_VERDICTS = {"reliable", "true"}
_NEGATIVE_VERDICTS = {"misinformation", "fake"}


def format_confidence(confidence: float) -> str:
    """0.8034 -> "80%". Halves round up (0.125 -> "13%"); NaN/inf -> "N/A"."""
    if not math.isfinite(confidence):
        return "N/A"
    return f"{math.floor(confidence * 100 + 0.5)}%"


def get_verdict_color(verdict: str) -> VerdictStyle:
    label = verdict.lower()
    if label in _POSITIVE_VERDICTS:
        return VerdictStyle.POSITIVE
    if label in _NEGATIVE_VERDICTS:
        return VerdictStyle.NEGATIVE
    # uncertain, unknown and anything new from the backend
    return VerdictStyle.NEUTRAL


def get_confidence_level(confidence: float) -> str:
    if confidence >= 0.8:
        return "High"
    if confidence >= 0.6:
        return "Medium"
    return "Low"
