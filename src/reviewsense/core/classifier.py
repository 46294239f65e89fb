"""Heuristic sentiment classifier with transformer-style subword encoding.

Nothing here is learned. The tokenizer produces BERT-shaped inputs (ids,
attention mask, token type ids) over a small fixed vocabulary, and the
classifier scores the text with hand-set keyword weights before a softmax.
"""

import logging
import math
import re
from typing import Dict, List, Optional, Sequence, Tuple

from .config import settings
from .constants import ClassifierConstants as CC, LabelConstants
from .models import ClassifierOutput, EncodedInput
from .tokenizer import normalize, tokenize_words

logger = logging.getLogger(__name__)

BASE_VOCAB: Dict[str, int] = {token: idx for idx, token in enumerate(CC.COMMON_TOKENS)}
INVERSE_VOCAB: Dict[int, str] = {idx: token for token, idx in BASE_VOCAB.items()}

_TOKENIZABLE = re.compile(r"[a-z0-9]")
_UNUSED = re.compile(r"\[unused\d+\]")
_WHITESPACE = re.compile(r"\s+")


class SubwordTokenizer:
    """Greedy prefix tokenizer with a fixed vocabulary."""

    def __init__(self, vocab_size: Optional[int] = None, max_length: Optional[int] = None):
        self.vocab_size = settings.vocab_size if vocab_size is None else vocab_size
        self.max_length = settings.max_sequence_length if max_length is None else max_length
        self.pad_token_id = CC.PAD_TOKEN_ID
        self.cls_token_id = CC.CLS_TOKEN_ID
        self.sep_token_id = CC.SEP_TOKEN_ID
        self.mask_token_id = CC.MASK_TOKEN_ID
        self.vocab = BASE_VOCAB
        self.unk_token_id = self.vocab[CC.UNK_TOKEN]

    def _can_be_tokenized(self, subword: str) -> bool:
        return bool(subword) and _TOKENIZABLE.search(subword) is not None

    def tokenize(self, text: str) -> List[str]:
        """Split each normalized word into prefixes of at most four characters."""
        tokens: List[str] = []

        for word in tokenize_words(normalize(text)):
            remaining = word
            while remaining:
                for i in range(min(CC.MAX_SUBWORD_LENGTH, len(remaining)), 0, -1):
                    subword = remaining[:i]
                    if subword in self.vocab or self._can_be_tokenized(subword):
                        tokens.append(subword)
                        remaining = remaining[i:]
                        break
                else:
                    tokens.append(remaining[0])
                    remaining = remaining[1:]

        return tokens

    def token_to_id(self, token: str) -> int:
        return self.vocab.get(token, self.unk_token_id)

    def encode(self, text: str) -> EncodedInput:
        """Encode to fixed-length ids with [CLS]/[SEP] markers and padding."""
        tokens = self.tokenize(text)
        truncated = tokens[:max(0, self.max_length - 2)]

        input_ids = [self.cls_token_id]
        input_ids.extend(self.token_to_id(t) for t in truncated)
        input_ids.append(self.sep_token_id)

        attention_mask = [1] * len(input_ids)
        token_type_ids = [0] * len(input_ids)

        pad_length = self.max_length - len(input_ids)
        if pad_length > 0:
            input_ids.extend([self.pad_token_id] * pad_length)
            attention_mask.extend([0] * pad_length)
            token_type_ids.extend([0] * pad_length)

        return EncodedInput(
            input_ids=input_ids[:self.max_length],
            attention_mask=attention_mask[:self.max_length],
            token_type_ids=token_type_ids[:self.max_length],
        )

    def id_to_token(self, token_id: int) -> str:
        if token_id in INVERSE_VOCAB:
            return INVERSE_VOCAB[token_id]
        if 0 <= token_id < self.vocab_size:
            return f"[unused{token_id}]"
        return CC.UNK_TOKEN

    def decode(self, token_ids: Sequence[int]) -> str:
        """Map ids back to vocabulary strings, dropping padding and placeholders."""
        text = " ".join(
            self.id_to_token(i) for i in token_ids if i != self.pad_token_id
        )
        text = _UNUSED.sub("", text)
        return _WHITESPACE.sub(" ", text).strip()


def softmax(logits: Sequence[float]) -> List[float]:
    """Numerically stable softmax."""
    max_logit = max(logits)
    exps = [math.exp(l - max_logit) for l in logits]
    total = sum(exps)
    return [e / total for e in exps]


class HeuristicClassifier:
    """Keyword-weighted three-way sentiment classifier."""

    def __init__(self, tokenizer: Optional[SubwordTokenizer] = None):
        self.tokenizer = tokenizer or SubwordTokenizer()

    def compute_logits(self, encoded: EncodedInput, original_text: str) -> Tuple[float, float, float]:
        """Return [positive, negative, neutral] logits."""
        positive_score = 0.0
        negative_score = 0.0

        for word in original_text.lower().split():
            if any(pw in word for pw in CC.POSITIVE_WORDS):
                positive_score += CC.WORD_WEIGHT
            if any(nw in word for nw in CC.NEGATIVE_WORDS):
                negative_score += CC.WORD_WEIGHT

        positive_score += original_text.count("!") * CC.EXCLAMATION_BOOST
        negative_score += original_text.count("?") * CC.QUESTION_PENALTY

        token_count = sum(1 for a in encoded.attention_mask if a == 1)
        # Clamp so the log stays finite for degenerate encodings
        neutral_score = math.log(max(1, token_count) / CC.NEUTRAL_SCALE)

        return positive_score, negative_score, neutral_score

    def classify(self, text: str) -> ClassifierOutput:
        """Classify text into positive / negative / neutral."""
        encoded = self.tokenizer.encode(text)
        logits = self.compute_logits(encoded, text)
        probs = softmax(logits)

        # max() keeps the first index on ties
        best = max(range(len(probs)), key=lambda i: probs[i])

        logger.debug(f"Logits {logits} -> {LabelConstants.CLASSES[best]}")

        return ClassifierOutput(
            positive_prob=probs[0],
            negative_prob=probs[1],
            neutral_prob=probs[2],
            predicted_class=LabelConstants.CLASSES[best],
            confidence=probs[best] * 100,
            raw_logits=logits,
        )
