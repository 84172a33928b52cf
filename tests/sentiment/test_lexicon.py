"""
Tests for the lexicon scorers.

AfinnLexicon tests load the real AFINN-165 word list.
"""

import pytest

from sentiment import AfinnLexicon, SentimentClassifier, StaticLexicon, tokenize


@pytest.fixture(scope="module")
def afinn():
    return AfinnLexicon()


class TestTokenize:

    def test_splits_on_whitespace(self):
        assert tokenize("I  love\tit\n") == ["I", "love", "it"]

    def test_keeps_punctuation_and_case(self):
        assert tokenize("Great item!") == ["Great", "item!"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize("   ") == []


class TestStaticLexicon:

    def test_sum_of_weights(self):
        lexicon = StaticLexicon({"good": 3, "bad": -2})

        assert lexicon.score(["good", "bad", "good"]) == 4

    def test_unknown_tokens_score_zero(self):
        lexicon = StaticLexicon({"good": 3})

        assert lexicon.score(["table", "chair"]) == 0
        assert lexicon.score([]) == 0

    def test_lookup_is_case_insensitive(self):
        lexicon = StaticLexicon({"Good": 3})

        assert lexicon.weight("GOOD") == 3

    def test_stemmer_applies_to_vocabulary_and_tokens(self):
        lexicon = StaticLexicon({"loved": 3}, stemmer=lambda w: w.lower().rstrip("ds"))

        assert lexicon.weight("LOVE") == 3
        assert lexicon.weight("loves") == 3


class TestAfinnLexicon:

    def test_loads_vocabulary(self, afinn):
        assert len(afinn) > 1000
        assert afinn.name == "afinn-en"

    def test_negative_word(self, afinn):
        assert afinn.score(["terrible"]) < 0

    def test_positive_word(self, afinn):
        assert afinn.score(["great"]) > 0

    def test_inflections_share_stem(self, afinn):
        assert afinn.score(["hated"]) < 0
        assert afinn.score(["Hating"]) < 0

    def test_unknown_word(self, afinn):
        assert afinn.score(["dimensions"]) == 0

    def test_punctuation_prevents_match(self, afinn):
        """Tokens are not stripped, so a trailing '?' misses the entry."""
        assert afinn.score(["great?!"]) == 0

    def test_normalized_score(self, afinn):
        normalized = AfinnLexicon(normalize_by_token_count=True)

        assert normalized.score(["terrible", "table"]) == afinn.score(["terrible"]) / 2
        assert normalized.score([]) == 0


class TestAfinnClassification:
    """End-to-end labels with the real lexicon."""

    @pytest.fixture(scope="class")
    def classifier(self, afinn):
        return SentimentClassifier(afinn)

    def test_clearly_negative(self, classifier):
        assert classifier.classify("This is terrible and broken").sentiment == "negative"

    def test_clearly_positive(self, classifier):
        assert classifier.classify("This is amazing! I love it!").sentiment == "positive"

    def test_great_item(self, classifier):
        result = classifier.classify("Great item! Highly recommend!")

        assert result.base_score > 0
        assert result.sentiment == "positive"

    def test_too_small(self, classifier):
        assert classifier.classify("it's too small for my room").sentiment == "negative"
