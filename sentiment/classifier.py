"""
Sentiment Classifier - Lexicon score fused with pattern overrides.

Pipeline per text:
1. Whitespace tokenization
2. Lexicon base score (stemmed token weights)
3. Pattern adjustment (+/-0.5 per matching phrase)
4. final_score = base_score + pattern_adjustment
5. Fixed asymmetric thresholds -> negative / neutral / positive

The classifier holds no mutable state after construction and may be
shared freely between request handlers.
"""

import logging
from typing import Optional

from .exceptions import ClassifierFaultError
from .lexicon import LexiconScorer, tokenize
from .models import SentimentLabel, SentimentResult
from .patterns import PatternTable


logger = logging.getLogger(__name__)


# Scores strictly below this are negative
NEGATIVE_THRESHOLD = 0.0

# Scores strictly above this are positive
POSITIVE_THRESHOLD = 0.2


def label_for_score(score: float) -> SentimentLabel:
    """
    Map a final score to a label.

    Order matters: 0 itself is neutral, anything below 0 is negative,
    and a positive label needs more than 0.2.
    """
    if score < NEGATIVE_THRESHOLD:
        return SentimentLabel.NEGATIVE
    elif score > POSITIVE_THRESHOLD:
        return SentimentLabel.POSITIVE
    return SentimentLabel.NEUTRAL


def threshold_description() -> dict[str, str]:
    """Human-readable label bands."""
    return {
        "negative": f"< {NEGATIVE_THRESHOLD:g}",
        "neutral": f"{NEGATIVE_THRESHOLD:g} to {POSITIVE_THRESHOLD:g}",
        "positive": f"> {POSITIVE_THRESHOLD:g}",
    }


class SentimentClassifier:
    """
    Three-way comment classifier.

    Args:
        lexicon: Base score provider
        patterns: Phrase override table (default phrase lists if None)
    """

    def __init__(
        self,
        lexicon: LexiconScorer,
        patterns: Optional[PatternTable] = None,
    ) -> None:
        self.lexicon = lexicon
        self.patterns = patterns if patterns is not None else PatternTable()

    def classify(self, text: str) -> SentimentResult:
        """
        Classify a single text.

        Raises:
            ClassifierFaultError: If the lexicon or a pattern fails
        """
        try:
            base_score = float(self.lexicon.score(tokenize(text)))
            evaluation = self.patterns.evaluate(text)
        except Exception as e:
            raise ClassifierFaultError(
                f"Sentiment scoring failed: {e}",
                text=text,
                details={"lexicon": self.lexicon.name},
            ) from e

        final_score = base_score + evaluation.adjustment
        label = label_for_score(final_score)

        logger.debug(
            f"Base score: {base_score}, Pattern adjustment: {evaluation.adjustment}, "
            f"Final score: {final_score}, Sentiment: {label.value}"
        )

        return SentimentResult(
            base_score=base_score,
            pattern_adjustment=evaluation.adjustment,
            final_score=final_score,
            label=label,
            matches=evaluation.matches,
        )
