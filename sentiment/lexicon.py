"""
Lexicon Scorers - Word-weight base score for the classifier.

The classifier only depends on LexiconScorer.score(tokens). The AFINN
implementation stems both the vocabulary and the incoming tokens with
the Porter stemmer so inflected forms ("loved", "loving") hit the
same entry.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional, Sequence

from afinn import Afinn
from nltk.stem import PorterStemmer


logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split on whitespace. No punctuation stripping, no case folding."""
    return text.split()


class LexiconScorer(ABC):
    """Abstract interface for lexicon-based base scores."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs."""
        pass

    @abstractmethod
    def score(self, tokens: Sequence[str]) -> float:
        """Return the combined lexicon weight of the tokens."""
        pass


class StaticLexicon(LexiconScorer):
    """
    Lexicon backed by an in-memory word-to-weight mapping.

    Tokens are lower-cased (and stemmed, when a stemmer is given) before
    lookup. Unknown tokens contribute 0.
    """

    def __init__(
        self,
        weights: Mapping[str, float],
        stemmer: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._stem = stemmer
        self._weights: dict[str, float] = {}
        for word, weight in weights.items():
            self._weights[self._normalize(word)] = float(weight)

    @property
    def name(self) -> str:
        return "static"

    def __len__(self) -> int:
        return len(self._weights)

    def _normalize(self, token: str) -> str:
        if self._stem is not None:
            return self._stem(token)
        return token.lower()

    def weight(self, token: str) -> float:
        return self._weights.get(self._normalize(token), 0.0)

    def score(self, tokens: Sequence[str]) -> float:
        return sum(self.weight(token) for token in tokens)


class AfinnLexicon(StaticLexicon):
    """
    AFINN-165 English word list with Porter stemming.

    The vocabulary is stemmed once at construction; when two entries
    share a stem the later one wins. With normalize_by_token_count the
    sum is divided by the number of tokens.
    """

    def __init__(
        self,
        language: str = "en",
        normalize_by_token_count: bool = False,
    ) -> None:
        stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)
        afinn = Afinn(language=language)
        super().__init__(afinn._dict, stemmer=stemmer.stem)
        self.language = language
        self.normalize_by_token_count = normalize_by_token_count
        logger.info(
            f"Loaded AFINN lexicon ({language}): {len(self)} stemmed entries, "
            f"normalize_by_token_count={normalize_by_token_count}"
        )

    @property
    def name(self) -> str:
        return f"afinn-{self.language}"

    def score(self, tokens: Sequence[str]) -> float:
        total = super().score(tokens)
        if self.normalize_by_token_count:
            return total / len(tokens) if tokens else 0.0
        return total
