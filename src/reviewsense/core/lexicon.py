"""Lexicon-based sentiment scoring."""

import logging
import threading
from typing import List, Tuple

from afinn import Afinn
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .constants import LabelConstants, LexiconConstants
from .models import BasicFeatures, LexiconResult
from .tokenizer import normalize, tokenize_words, safe_ratio

logger = logging.getLogger(__name__)


def compound_to_stars(compound: float) -> float:
    """Convert VADER compound score to 1-5 star rating."""
    stars = 3.0 + 2.0 * float(compound)
    return max(LexiconConstants.MIN_STARS, min(LexiconConstants.MAX_STARS, stars))


def label_from_score(total_score: float) -> str:
    """Polarity label from the sign of the total score."""
    if total_score > 0:
        return LabelConstants.POSITIVE
    if total_score < 0:
        return LabelConstants.NEGATIVE
    return LabelConstants.NEUTRAL


def extract_basic_features(tokens: List[str]) -> BasicFeatures:
    """Word count, mean length and type-token ratio of normalized tokens."""
    word_count = len(tokens)
    unique_word_count = len(set(tokens))
    return BasicFeatures(
        word_count=word_count,
        avg_word_length=safe_ratio(sum(len(t) for t in tokens), word_count),
        unique_word_count=unique_word_count,
        lexical_diversity=safe_ratio(unique_word_count, word_count),
    )


class LexiconScorer:
    """AFINN word-valence scorer with a VADER compound side channel.

    The AFINN word list and the VADER analyzer are loaded once per scorer;
    use the module-level ``analyze_sentiment`` to share the default instance.
    """

    def __init__(self):
        self.afinn = Afinn(language="en")
        self.vader = SentimentIntensityAnalyzer()

    def _valence(self, token: str) -> int:
        return int(self.afinn.score(token))

    def _match_tokens(self, tokens: List[str]) -> Tuple[int, List[str], List[str]]:
        """Sum token valences, flipping the sign after a negator."""
        total = 0
        positive: List[str] = []
        negative: List[str] = []

        for i, token in enumerate(tokens):
            value = self._valence(token)
            if value == 0:
                continue
            if i > 0 and tokens[i - 1] in LexiconConstants.NEGATORS:
                value = -value
            total += value
            if value > 0:
                positive.append(token)
            else:
                negative.append(token)

        return total, positive, negative

    def score(self, text: str) -> LexiconResult:
        """Score raw review text."""
        tokens = tokenize_words(normalize(text))
        total, positive, negative = self._match_tokens(tokens)

        comparative = safe_ratio(total, len(tokens))
        confidence = min(abs(comparative) * 100, 100)
        compound = float(self.vader.polarity_scores(text)["compound"])

        logger.debug(f"Lexicon score {total} over {len(tokens)} tokens")

        return LexiconResult(
            total_score=total,
            comparative_score=comparative,
            label=label_from_score(total),
            confidence=confidence,
            tokens=tokens,
            positive_tokens=positive,
            negative_tokens=negative,
            features=extract_basic_features(tokens),
            compound=compound,
            stars=compound_to_stars(compound),
        )


_default_scorer = None
_scorer_lock = threading.Lock()


def get_scorer() -> LexiconScorer:
    """Return the process-wide scorer, creating it on first use."""
    global _default_scorer
    with _scorer_lock:
        if _default_scorer is None:
            _default_scorer = LexiconScorer()
    return _default_scorer


def analyze_sentiment(text: str) -> LexiconResult:
    """Score text with the shared lexicon scorer."""
    return get_scorer().score(text)
