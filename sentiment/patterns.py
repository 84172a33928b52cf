"""
Pattern Table - Phrase overrides layered on top of the lexicon score.

The lexicon misses common marketplace complaints ("too small",
"doesn't fit") and understates plain praise. Each phrase below is
matched case-insensitively against the whole comment and contributes
its fixed weight once, however many times it occurs.
"""

import logging
import re
from typing import Iterable, Optional

from .models import (
    PATTERN_WEIGHTS,
    PatternEvaluation,
    PatternMatch,
    PatternPolarity,
)


logger = logging.getLogger(__name__)


NEGATIVE_PATTERNS: tuple[str, ...] = (
    r"don't like",
    r"do not like",
    r"doesn't fit",
    r"does not fit",
    r"too small",
    r"too large",
    r"too big",
    r"not good",
    r"not great",
    r"not interested",
    r"not what",
    r"disappointed",
    r"don't want",
    r"do not want",
    r"not happy",
    r"not satisfied",
    r"waste",
    r"terrible",
    r"horrible",
    r"awful",
    r"poor quality",
    r"bad condition",
    r"damaged",
    r"broken",
    r"ugly",
    r"hate",
    r"worst",
    r"useless",
)

POSITIVE_PATTERNS: tuple[str, ...] = (
    r"love it",
    r"i love",
    r"so good",
    r"very good",
    r"excellent",
    r"amazing",
    r"wonderful",
    r"fantastic",
    r"perfect",
    r"exactly what",
    r"just what",
    r"thank you",
    r"thanks",
    r"appreciate",
    r"great",
    r"awesome",
    r"beautiful",
)


class PatternTable:
    """
    Ordered negative and positive pattern sets.

    Patterns are compiled once at construction; evaluation is a pure
    function of the input text.
    """

    def __init__(
        self,
        negative_patterns: Optional[Iterable[str]] = None,
        positive_patterns: Optional[Iterable[str]] = None,
    ) -> None:
        if negative_patterns is None:
            negative_patterns = NEGATIVE_PATTERNS
        if positive_patterns is None:
            positive_patterns = POSITIVE_PATTERNS

        self._compiled: list[tuple[re.Pattern[str], PatternPolarity]] = [
            (re.compile(p, re.IGNORECASE), PatternPolarity.NEGATIVE)
            for p in negative_patterns
        ]
        self._compiled.extend(
            (re.compile(p, re.IGNORECASE), PatternPolarity.POSITIVE)
            for p in positive_patterns
        )

    @property
    def negative_patterns(self) -> list[str]:
        return [
            regex.pattern for regex, polarity in self._compiled
            if polarity is PatternPolarity.NEGATIVE
        ]

    @property
    def positive_patterns(self) -> list[str]:
        return [
            regex.pattern for regex, polarity in self._compiled
            if polarity is PatternPolarity.POSITIVE
        ]

    def __len__(self) -> int:
        return len(self._compiled)

    def evaluate(self, text: str) -> PatternEvaluation:
        """
        Sum the weights of every pattern found in the text.

        Negative patterns are tested before positive ones; both sets
        are always tested so opposing matches can cancel out.
        """
        lowered = text.lower()
        adjustment = 0.0
        matches: list[PatternMatch] = []

        for regex, polarity in self._compiled:
            if regex.search(lowered) is None:
                continue
            weight = PATTERN_WEIGHTS[polarity]
            adjustment += weight
            matches.append(PatternMatch(
                pattern=regex.pattern,
                polarity=polarity,
                weight=weight,
            ))
            logger.debug(f"{polarity.value.capitalize()} pattern detected: {regex.pattern}")

        return PatternEvaluation(adjustment=adjustment, matches=tuple(matches))
