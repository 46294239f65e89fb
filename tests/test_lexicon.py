"""Tests for the lexicon scorer."""

import pytest
from reviewsense.core.lexicon import (
    LexiconScorer,
    analyze_sentiment,
    compound_to_stars,
    label_from_score,
)


@pytest.fixture(scope="module")
def scorer():
    return LexiconScorer()


def test_positive_review(scorer):
    """Positive scenario matches amazing and recommend."""
    result = scorer.score(
        "This product is absolutely amazing! Best purchase I've ever made. Highly recommend!"
    )
    assert result.total_score > 0
    assert result.label == "Positive"
    assert "amazing" in result.positive_tokens
    assert "recommend" in result.positive_tokens
    assert result.negative_tokens == []


def test_negative_review(scorer):
    result = scorer.score(
        "Terrible quality. Broke after one day. Complete waste of money. Very disappointed."
    )
    assert result.total_score < 0
    assert result.label == "Negative"
    assert "terrible" in result.negative_tokens


def test_empty_text(scorer):
    """Empty input degrades to zeros instead of raising."""
    result = scorer.score("")
    assert result.total_score == 0
    assert result.comparative_score == 0
    assert result.label == "Neutral"
    assert result.confidence == 0
    assert result.tokens == []
    assert result.features.word_count == 0
    assert result.features.avg_word_length == 0
    assert result.features.unique_word_count == 0
    assert result.features.lexical_diversity == 0
    assert result.stars == 3.0


def test_comparative_and_confidence(scorer):
    result = scorer.score("I think this is good")
    assert len(result.tokens) == 5
    assert result.comparative_score == pytest.approx(result.total_score / 5)
    assert result.confidence == pytest.approx(min(abs(result.comparative_score) * 100, 100))


def test_confidence_capped_at_100(scorer):
    result = scorer.score("love")
    assert result.confidence == 100


def test_negation_flips_valence(scorer):
    result = scorer.score("This is not good")
    assert result.total_score < 0
    assert "good" in result.negative_tokens
    assert "good" not in result.positive_tokens


@pytest.mark.parametrize("text", [
    "I love this product!",
    "I hate this product!",
    "The box arrived on Tuesday.",
    "good bad good bad",
    "",
    "Not bad at all, actually quite nice",
])
def test_label_follows_score_sign(scorer, text):
    result = scorer.score(text)
    if result.total_score > 0:
        assert result.label == "Positive"
    elif result.total_score < 0:
        assert result.label == "Negative"
    else:
        assert result.label == "Neutral"


def test_basic_features_use_normalized_tokens(scorer):
    result = scorer.score("Great, great product!")
    assert result.tokens == ["great", "great", "product"]
    assert result.features.word_count == 3
    assert result.features.unique_word_count == 2
    assert result.features.lexical_diversity == pytest.approx(2 / 3)
    assert result.features.avg_word_length == pytest.approx(17 / 3)


def test_label_from_score():
    assert label_from_score(2) == "Positive"
    assert label_from_score(-1) == "Negative"
    assert label_from_score(0) == "Neutral"


def test_compound_to_stars_clamped():
    assert compound_to_stars(1.0) == 5.0
    assert compound_to_stars(-1.0) == 1.0
    assert compound_to_stars(0.0) == 3.0


def test_module_level_scorer_is_shared():
    first = analyze_sentiment("good")
    second = analyze_sentiment("good")
    assert first.total_score == second.total_score
