"""Advanced text preprocessing: cleaning, lemmatization and linguistic features."""

import logging
import re
from typing import List

from .constants import PreprocessingConstants as PC
from .models import PreprocessedProfile, TextFeatures, TextMetadata
from .tokenizer import split_sentences, safe_ratio

logger = logging.getLogger(__name__)

_URL = re.compile(r"https?://\S+")
_MENTION = re.compile(r"@\w+")
_HASHTAG = re.compile(r"#\w+")
# A letter group followed by two or more copies of itself: "amazingggg", "hahaha"
_REPEATED = re.compile(r"([^\W\d_]+?)\1{2,}")
_DISALLOWED = re.compile(r"[^\w\s.!?-]|_")
_WHITESPACE = re.compile(r"\s+")
_SPECIAL_CHAR = re.compile(r"[!@#$%^&*()_+=\-\[\]{};:'\",.<>/?\\|`~]")
_UPPERCASE = re.compile(r"[A-Z]")
_CAPS_WORD = re.compile(r"\b[A-Z][A-Z]+\b")


def clean_text(text: str) -> str:
    """Strip URLs, mentions, hashtags, elongations and stray symbols."""
    cleaned = text.lower()
    cleaned = _URL.sub("", cleaned)
    cleaned = _MENTION.sub("", cleaned)
    cleaned = _HASHTAG.sub("", cleaned)
    cleaned = _REPEATED.sub(r"\1", cleaned)
    cleaned = _DISALLOWED.sub(" ", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def tokenize(text: str) -> List[str]:
    """Split into sentences, then words, keeping sentence order."""
    tokens: List[str] = []
    for sentence in split_sentences(text):
        tokens.extend(w for w in sentence.split() if w)
    return tokens


def remove_stop_words(tokens: List[str]) -> List[str]:
    """Drop stop words and tokens of two characters or fewer."""
    return [
        t for t in tokens
        if t.lower() not in PC.STOP_WORDS and len(t) >= PC.MIN_TOKEN_LENGTH
    ]


def get_lemma(word: str) -> str:
    """Map through the irregular-form table; unknown words pass through lower-cased."""
    lowered = word.lower()
    return PC.LEMMA_MAP.get(lowered, lowered)


def extract_advanced_features(original: str, tokens: List[str]) -> TextFeatures:
    """Style signals from the uncleaned text and the unfiltered token list."""
    word_count = len(tokens)
    sentence_count = len(split_sentences(original))
    unique_word_count = len({t.lower() for t in tokens})

    return TextFeatures(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_word_length=safe_ratio(sum(len(t) for t in tokens), word_count),
        avg_sentence_length=safe_ratio(word_count, sentence_count),
        unique_word_count=unique_word_count,
        lexical_diversity=safe_ratio(unique_word_count, word_count),
        special_char_count=len(_SPECIAL_CHAR.findall(original)),
        uppercase_ratio=safe_ratio(len(_UPPERCASE.findall(original)), len(original)),
        exclamation_count=original.count("!"),
        question_count=original.count("?"),
    )


def count_syllables(word: str) -> int:
    """Estimate syllables from vowel-group onsets."""
    word = word.lower()
    count = 0
    previous_was_vowel = False

    for char in word:
        is_vowel = char in PC.VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1
    if word.endswith("le") and len(word) > 2 and word[-3] not in PC.VOWELS:
        count += 1

    return max(1, count)


def estimate_syllables(text: str) -> int:
    """Total syllables over whitespace-separated words, at least 1."""
    return max(1, sum(count_syllables(w) for w in text.lower().split()))


def calculate_readability(text: str) -> float:
    """Flesch Reading Ease clamped to [0, 100]; 0 for text without words."""
    words = len(text.split())
    if words == 0:
        return 0.0
    sentences = max(1, len(split_sentences(text)))
    syllables = estimate_syllables(text)

    flesch = (
        PC.FLESCH_BASE
        - PC.FLESCH_SENTENCE_WEIGHT * (words / sentences)
        - PC.FLESCH_SYLLABLE_WEIGHT * (syllables / words)
    )
    return max(0.0, min(100.0, flesch))


def calculate_emotional_intensity(text: str) -> float:
    """Weighted count of !, ? and ALL-CAPS words, scaled to at most 100."""
    base = (
        text.count("!") * PC.EXCLAMATION_WEIGHT
        + text.count("?") * PC.QUESTION_WEIGHT
        + len(_CAPS_WORD.findall(text)) * PC.CAPS_WORD_WEIGHT
    )
    return min(100.0, base * PC.INTENSITY_SCALE)


def calculate_subjectivity(text: str) -> float:
    """Percentage of words containing a subjective stem."""
    words = text.lower().split()
    matches = sum(1 for w in words if any(sw in w for sw in PC.SUBJECTIVE_WORDS))
    return min(100.0, matches / max(1, len(words)) * 100)


def extract_metadata(original: str) -> TextMetadata:
    return TextMetadata(
        language=PC.LANGUAGE,
        readability_score=calculate_readability(original),
        emotional_intensity=calculate_emotional_intensity(original),
        subjectivity=calculate_subjectivity(original),
    )


def preprocess(text: str) -> PreprocessedProfile:
    """Run the full preprocessing pipeline over one review."""
    cleaned = clean_text(text)
    tokens = tokenize(cleaned)
    filtered = remove_stop_words(tokens)
    lemmatized = [get_lemma(t) for t in filtered]

    logger.debug(f"Preprocessed {len(tokens)} tokens, {len(filtered)} kept after filtering")

    return PreprocessedProfile(
        original_text=text,
        cleaned_text=cleaned,
        filtered_tokens=filtered,
        lemmatized_tokens=lemmatized,
        features=extract_advanced_features(text, tokens),
        metadata=extract_metadata(text),
    )
