"""Tests for the advanced preprocessing pipeline."""

import pytest
from reviewsense.core.preprocessing import (
    calculate_emotional_intensity,
    calculate_readability,
    calculate_subjectivity,
    clean_text,
    count_syllables,
    get_lemma,
    preprocess,
    remove_stop_words,
    tokenize,
)


class TestCleaning:
    """Tests for clean_text."""

    def test_removes_urls_mentions_hashtags_and_symbols(self):
        text = "Check https://x.com/a?b=1 @bob #sale this is amazingggg!!! $$$"
        assert clean_text(text) == "check this is amazing!!!"

    def test_collapses_repeated_letter_groups(self):
        assert clean_text("hahaha") == "ha"
        assert clean_text("sooo") == "so"

    def test_long_runs_collapse_to_one_letter(self):
        assert clean_text("soooooo") == "so"
        assert clean_text("amazinggggggg") == "amazing"
        assert clean_text("nooooooooo") == "no"
        assert clean_text("hahahaha") == "ha"

    @pytest.mark.parametrize("text", ["soooooo good", "amazinggggggg!!!", "nooooooooo way"])
    def test_cleaning_is_a_fixed_point(self, text):
        once = clean_text(text)
        assert clean_text(once) == once

    def test_keeps_sentence_punctuation_and_hyphens(self):
        assert clean_text("Well-made. Works? Yes!") == "well-made. works? yes!"

    def test_underscores_become_spaces(self):
        assert clean_text("snake_case") == "snake case"

    def test_empty(self):
        assert clean_text("") == ""


def test_tokenize_splits_sentences_then_words():
    assert tokenize("great product. works well!") == ["great", "product", "works", "well"]
    assert tokenize("") == []


def test_remove_stop_words_drops_short_tokens():
    tokens = ["The", "product", "is", "it", "ok", "running"]
    assert remove_stop_words(tokens) == ["product", "running"]


def test_get_lemma():
    assert get_lemma("Running") == "run"
    assert get_lemma("best") == "good"
    assert get_lemma("amazing") == "amaze"
    assert get_lemma("Widget") == "widget"


@pytest.mark.parametrize("word,expected", [
    ("cake", 1),
    ("table", 2),
    ("rhythm", 1),
    ("the", 1),
    ("product", 2),
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


class TestMetadata:
    """Tests for readability, intensity and subjectivity."""

    def test_readability_empty_is_zero(self):
        assert calculate_readability("") == 0.0
        assert calculate_readability("   ") == 0.0

    def test_readability_is_clamped(self):
        assert calculate_readability("I LOVE this product! Is it good?") == 100.0
        long_words = "incomprehensibility institutionalization " * 20
        assert calculate_readability(long_words) == 0.0

    def test_readability_in_range(self):
        score = calculate_readability(
            "The battery lasts a full day. Charging is reasonably quick, although the cable feels flimsy."
        )
        assert 0.0 <= score <= 100.0

    def test_emotional_intensity(self):
        # one '!', one '?' and one all-caps word
        assert calculate_emotional_intensity("I LOVE this product! Is it good?") == pytest.approx(6.0)
        assert calculate_emotional_intensity("calm words") == 0.0

    def test_emotional_intensity_capped(self):
        assert calculate_emotional_intensity("!" * 100) == 100.0

    def test_subjectivity(self):
        assert calculate_subjectivity("I love it") == pytest.approx(100 / 3)
        assert calculate_subjectivity("") == 0.0
        assert calculate_subjectivity("It arrived Tuesday") == 0.0


class TestPreprocess:
    """Tests for the full pipeline."""

    def test_profile(self):
        text = "I LOVE this product! Is it good?"
        profile = preprocess(text)

        assert profile.original_text == text
        assert profile.cleaned_text == "i love this product! is it good?"
        assert profile.filtered_tokens == ["love", "product", "good"]
        assert profile.lemmatized_tokens == ["love", "product", "good"]

        features = profile.features
        assert features.word_count == 7
        assert features.sentence_count == 2
        assert features.avg_sentence_length == pytest.approx(3.5)
        assert features.unique_word_count == 7
        assert features.lexical_diversity == pytest.approx(1.0)
        assert features.avg_word_length == pytest.approx(24 / 7)
        assert features.exclamation_count == 1
        assert features.question_count == 1
        assert features.special_char_count == 2
        assert features.uppercase_ratio == pytest.approx(6 / 32)

        assert profile.metadata.language == "en"
        assert profile.metadata.emotional_intensity == pytest.approx(6.0)

    def test_empty_text(self):
        profile = preprocess("")
        assert profile.filtered_tokens == []
        assert profile.lemmatized_tokens == []
        assert profile.features.word_count == 0
        assert profile.features.sentence_count == 0
        assert profile.features.avg_word_length == 0
        assert profile.features.avg_sentence_length == 0
        assert profile.features.lexical_diversity == 0
        assert profile.features.uppercase_ratio == 0
        assert profile.metadata.readability_score == 0
        assert profile.metadata.emotional_intensity == 0
        assert profile.metadata.subjectivity == 0

    def test_lemmatized_tokens_align_with_filtered(self):
        profile = preprocess("Loved the design. Terribly slow shipping, still recommended.")
        assert len(profile.lemmatized_tokens) == len(profile.filtered_tokens)
        assert "love" in profile.lemmatized_tokens
        assert "recommend" in profile.lemmatized_tokens
