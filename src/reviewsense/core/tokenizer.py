"""Word and sentence segmentation shared by the scoring components."""

import re
from typing import List

# Anything that is not a letter, digit or whitespace (underscore counts as punctuation)
_NON_WORD = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?]+")


def normalize(text: str) -> str:
    """Lower-case, replace punctuation with spaces and collapse whitespace."""
    processed = text.lower()
    processed = _NON_WORD.sub(" ", processed)
    return _WHITESPACE.sub(" ", processed).strip()


def tokenize_words(text: str) -> List[str]:
    """Split text on whitespace; empty text yields no tokens."""
    return text.split()


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence punctuation and drop empty fragments."""
    return [s.strip() for s in _SENTENCE_END.split(text) if s.strip()]


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0 when the denominator is zero."""
    return numerator / denominator if denominator else 0.0
