"""
Sentiment Classifier - Comment sentiment for the GiftLink marketplace.

Every comment posted on a gift is tagged positive, negative or neutral.
The score is an AFINN lexicon sum over the whitespace-split, stemmed
comment, adjusted by +/-0.5 for each marketplace phrase it contains.

Usage:
    from sentiment import AfinnLexicon, SentimentClassifier

    classifier = SentimentClassifier(AfinnLexicon())
    result = classifier.classify("it's too small for my room")

    print(f"Score: {result.final_score}")
    print(f"Label: {result.label.value}")

Thresholds:
- final_score < 0      -> negative
- final_score > 0.2    -> positive
- otherwise            -> neutral (including exactly 0)
"""

from .classifier import (
    NEGATIVE_THRESHOLD,
    POSITIVE_THRESHOLD,
    SentimentClassifier,
    label_for_score,
    threshold_description,
)
from .config import ServiceConfig, setup_logging
from .exceptions import (
    ClassifierFaultError,
    InvalidInputError,
    SentimentServiceError,
    UpstreamUnavailableError,
)
from .lexicon import AfinnLexicon, LexiconScorer, StaticLexicon, tokenize
from .models import (
    PATTERN_WEIGHTS,
    PatternEvaluation,
    PatternMatch,
    PatternPolarity,
    SentimentLabel,
    SentimentResult,
)
from .patterns import NEGATIVE_PATTERNS, POSITIVE_PATTERNS, PatternTable


__all__ = [
    # Classifier
    "SentimentClassifier",
    "label_for_score",
    "threshold_description",
    "NEGATIVE_THRESHOLD",
    "POSITIVE_THRESHOLD",

    # Lexicon
    "LexiconScorer",
    "StaticLexicon",
    "AfinnLexicon",
    "tokenize",

    # Patterns
    "PatternTable",
    "NEGATIVE_PATTERNS",
    "POSITIVE_PATTERNS",

    # Models
    "SentimentLabel",
    "SentimentResult",
    "PatternMatch",
    "PatternPolarity",
    "PatternEvaluation",
    "PATTERN_WEIGHTS",

    # Config
    "ServiceConfig",
    "setup_logging",

    # Exceptions
    "SentimentServiceError",
    "InvalidInputError",
    "ClassifierFaultError",
    "UpstreamUnavailableError",
]


# Version
__version__ = "1.0.0"
