"""
Sentiment Data Models - Classifier result structures.

All values are computed fresh per classification and never cached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SentimentLabel(Enum):
    """Three-way sentiment label stored with each comment."""
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"


class PatternPolarity(Enum):
    """Which pattern set a phrase belongs to."""
    NEGATIVE = "negative"
    POSITIVE = "positive"


# Fixed score contribution of a single matching pattern
PATTERN_WEIGHTS: dict[PatternPolarity, float] = {
    PatternPolarity.NEGATIVE: -0.5,
    PatternPolarity.POSITIVE: 0.5,
}


@dataclass(frozen=True)
class PatternMatch:
    """A pattern that fired for a given text."""
    pattern: str
    polarity: PatternPolarity
    weight: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "polarity": self.polarity.value,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class PatternEvaluation:
    """Outcome of running the pattern table over one text."""
    adjustment: float = 0.0
    matches: tuple[PatternMatch, ...] = ()

    @property
    def negative_matches(self) -> list[PatternMatch]:
        return [m for m in self.matches if m.polarity is PatternPolarity.NEGATIVE]

    @property
    def positive_matches(self) -> list[PatternMatch]:
        return [m for m in self.matches if m.polarity is PatternPolarity.POSITIVE]


@dataclass(frozen=True)
class SentimentResult:
    """
    Classification of a single text.

    final_score = base_score + pattern_adjustment, unclamped.
    """
    base_score: float
    pattern_adjustment: float
    final_score: float
    label: SentimentLabel
    matches: tuple[PatternMatch, ...] = field(default_factory=tuple)

    @property
    def sentiment(self) -> str:
        """Label as the plain string stored by callers."""
        return self.label.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_score": self.base_score,
            "pattern_adjustment": self.pattern_adjustment,
            "final_score": self.final_score,
            "label": self.label.value,
            "matches": [m.to_dict() for m in self.matches],
        }
