"""Tests for the subword tokenizer and heuristic classifier."""

import math

import pytest
from reviewsense.core.classifier import (
    BASE_VOCAB,
    HeuristicClassifier,
    SubwordTokenizer,
    softmax,
)


class TestSubwordTokenizer:
    """Tests for SubwordTokenizer."""

    def setup_method(self):
        self.tokenizer = SubwordTokenizer()

    def test_unk_id_is_vocab_position(self):
        assert self.tokenizer.unk_token_id == BASE_VOCAB["[UNK]"] == 5

    def test_tokenize_greedy_prefixes(self):
        assert self.tokenizer.tokenize("amazing product") == ["amaz", "ing", "prod", "uct"]
        assert self.tokenizer.tokenize("The GOOD!") == ["the", "good"]

    def test_tokenize_non_ascii_falls_back_to_single_chars(self):
        assert self.tokenizer.tokenize("日本") == ["日", "本"]

    def test_tokenize_empty(self):
        assert self.tokenizer.tokenize("") == []

    def test_encode_empty(self):
        encoded = self.tokenizer.encode("")
        assert len(encoded.input_ids) == 512
        assert encoded.input_ids[:3] == [101, 102, 0]
        assert sum(encoded.attention_mask) == 2
        assert set(encoded.token_type_ids) == {0}

    def test_encode_known_tokens(self):
        encoded = self.tokenizer.encode("the good love")
        assert encoded.input_ids[:5] == [101, 14, 53, 59, 102]
        assert encoded.attention_mask[:6] == [1, 1, 1, 1, 1, 0]

    def test_encode_unknown_maps_to_unk(self):
        encoded = self.tokenizer.encode("zzz")
        assert encoded.input_ids[:3] == [101, 5, 102]

    def test_encode_lengths_always_match(self):
        for text in ["", "short", "word " * 1000]:
            encoded = self.tokenizer.encode(text)
            assert len(encoded.input_ids) == self.tokenizer.max_length
            assert len(encoded.attention_mask) == self.tokenizer.max_length
            assert len(encoded.token_type_ids) == self.tokenizer.max_length

    def test_encode_truncates(self):
        tokenizer = SubwordTokenizer(max_length=8)
        encoded = tokenizer.encode("a b c d e f g h i j")
        assert encoded.input_ids == [101, 15, 5, 5, 5, 5, 5, 102]
        assert encoded.attention_mask == [1] * 8

    def test_decode_drops_padding_and_markers(self):
        encoded = self.tokenizer.encode("the good love")
        assert self.tokenizer.decode(encoded.input_ids) == "the good love"

    def test_id_to_token(self):
        assert self.tokenizer.id_to_token(53) == "good"
        assert self.tokenizer.id_to_token(101) == "[unused101]"
        assert self.tokenizer.id_to_token(99999) == "[UNK]"


def test_softmax_is_stable():
    probs = softmax([1000.0, 1000.0, 0.0])
    assert probs[0] == pytest.approx(0.5)
    assert probs[1] == pytest.approx(0.5)
    assert probs[2] == pytest.approx(0.0)


class TestHeuristicClassifier:
    """Tests for HeuristicClassifier."""

    def setup_method(self):
        self.classifier = HeuristicClassifier()

    def test_positive(self):
        output = self.classifier.classify("This is amazing!")
        assert output.raw_logits[0] == pytest.approx(1.8)
        assert output.raw_logits[1] == 0
        assert output.raw_logits[2] == pytest.approx(math.log(0.6))
        assert output.predicted_class == "positive"

    def test_negative(self):
        output = self.classifier.classify("Terrible. Worst purchase?")
        assert output.raw_logits[1] == pytest.approx(3.2)
        assert output.predicted_class == "negative"

    def test_neutral_for_long_plain_text(self):
        output = self.classifier.classify("the " * 100)
        assert output.raw_logits[2] == pytest.approx(math.log(10.2))
        assert output.predicted_class == "neutral"

    def test_empty_text_tie_breaks_to_first_class(self):
        output = self.classifier.classify("")
        assert output.raw_logits == pytest.approx((0.0, 0.0, math.log(0.2)))
        assert output.positive_prob == pytest.approx(output.negative_prob)
        assert output.predicted_class == "positive"

    @pytest.mark.parametrize("text", [
        "",
        "I love this product!",
        "Awful. Broken on arrival?? Waste of money.",
        "The package arrived on Tuesday.",
        "!!!???",
    ])
    def test_probabilities_form_distribution(self, text):
        output = self.classifier.classify(text)
        probs = [output.positive_prob, output.negative_prob, output.neutral_prob]
        assert sum(probs) == pytest.approx(1.0)
        assert all(0 <= p <= 1 for p in probs)
        assert output.confidence == pytest.approx(max(probs) * 100)
