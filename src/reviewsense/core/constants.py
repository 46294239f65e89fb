"""Constants and fixed lookup tables for ReviewSense."""

# Sentiment labels
class LabelConstants:
    """Label strings shared by the scorer, classifier and dashboard."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    # Classifier classes, in tie-break order
    CLASSES = ("positive", "negative", "neutral")


# Lexicon Scoring
class LexiconConstants:
    """Constants for the lexicon scorer."""

    # Negators flip the valence of the token that follows them.
    # "t" is what remains of don't / isn't / wasn't after punctuation removal.
    NEGATORS = frozenset([
        "not", "no", "never", "cannot", "neither", "nor", "without",
        "dont", "doesnt", "didnt", "isnt", "wasnt", "wont", "cant", "t",
    ])

    MIN_STARS = 1.0
    MAX_STARS = 5.0


# Advanced Preprocessing
class PreprocessingConstants:
    """Stop words, lemma table and subjectivity stems."""

    STOP_WORDS = frozenset([
        'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from',
        'has', 'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the',
        'to', 'was', 'will', 'with', 'i', 'me', 'my', 'we', 'our', 'you',
        'your', 'they', 'them', 'this', 'these', 'those', 'but', 'or', 'not',
        'can', 'could', 'should', 'would', 'may', 'might', 'must', 'have',
    ])

    MIN_TOKEN_LENGTH = 3  # filtered tokens must be longer than 2 chars

    LEMMA_MAP = {
        'amazing': 'amaze', 'amazed': 'amaze',
        'terrible': 'terrible', 'terribly': 'terrible',
        'good': 'good', 'better': 'good', 'best': 'good',
        'bad': 'bad', 'worse': 'bad', 'worst': 'bad',
        'happy': 'happy', 'happily': 'happy',
        'sad': 'sad', 'sadly': 'sad',
        'running': 'run', 'runs': 'run',
        'walked': 'walk', 'walking': 'walk', 'walks': 'walk',
        'bought': 'buy', 'buying': 'buy', 'buys': 'buy',
        'broken': 'break', 'breaking': 'break',
        'works': 'work', 'working': 'work', 'worked': 'work',
        'loved': 'love', 'loves': 'love', 'loving': 'love',
        'hated': 'hate', 'hates': 'hate', 'hating': 'hate',
        'recommend': 'recommend', 'recommended': 'recommend', 'recommends': 'recommend',
    }

    SUBJECTIVE_WORDS = (
        'amazing', 'terrible', 'wonderful', 'awful', 'perfect', 'horrible',
        'excellent', 'poor', 'fantastic', 'disgusting', 'love', 'hate',
        'believe', 'think', 'feel', 'opinion', 'personal', 'seem', 'appear',
    )

    VOWELS = "aeiouy"

    # Flesch Reading Ease coefficients
    FLESCH_BASE = 206.835
    FLESCH_SENTENCE_WEIGHT = 1.015
    FLESCH_SYLLABLE_WEIGHT = 84.6

    # Emotional intensity weights
    EXCLAMATION_WEIGHT = 0.3
    QUESTION_WEIGHT = 0.2
    CAPS_WORD_WEIGHT = 0.1
    INTENSITY_SCALE = 10

    LANGUAGE = "en"


# Heuristic Classifier
class ClassifierConstants:
    """Vocabulary and scoring constants for the subword classifier."""

    VOCAB_SIZE = 30522
    MAX_LENGTH = 512
    MAX_SUBWORD_LENGTH = 4

    PAD_TOKEN_ID = 0
    CLS_TOKEN_ID = 101
    SEP_TOKEN_ID = 102
    MASK_TOKEN_ID = 103
    UNK_TOKEN = '[UNK]'

    COMMON_TOKENS = (
        '[PAD]', '[unused0]', '[unused1]', '[unused2]', '[unused3]',
        '[UNK]', '[CLS]', '[SEP]', '[MASK]', '!', '"', '#', '$', '%',
        'the', 'a', 'an', 'and', 'or', 'of', 'to', 'in', 'is', 'it',
        'that', 'this', 'for', 'from', 'with', 'by', 'on', 'at', 'as',
        'was', 'be', 'been', 'being', 'have', 'has', 'had', 'do', 'does',
        'did', 'will', 'would', 'could', 'should', 'may', 'might', 'must',
        'can', 'product', 'review', 'good', 'bad', 'great', 'terrible',
        'amazing', 'awful', 'love', 'hate', 'quality', 'price', 'delivery',
        'excellent', 'poor', 'recommend', 'waste', 'money', 'worth', 'value',
    )

    POSITIVE_WORDS = (
        'good', 'great', 'amazing', 'excellent', 'love', 'best', 'perfect',
        'wonderful', 'fantastic', 'awesome',
    )
    NEGATIVE_WORDS = (
        'bad', 'terrible', 'awful', 'hate', 'worst', 'poor', 'waste',
        'horrible', 'disgusting', 'broken',
    )

    WORD_WEIGHT = 1.5
    EXCLAMATION_BOOST = 0.3
    QUESTION_PENALTY = 0.2
    NEUTRAL_SCALE = 10.0


# Dashboard / Aggregation
class DashboardConstants:
    """Limits, thresholds and colors for dashboard metrics and charts."""

    TOP_WORDS_LIMIT = 10
    WORD_CLOUD_LIMIT = 20
    WORD_CLOUD_MIN_LENGTH = 3
    HISTOGRAM_BINS = 10
    REPORT_TOP_WORDS = 5

    # Insight thresholds
    DOMINANT_PERCENTAGE = 60
    HIGH_VARIANCE_STD = 1.5
    HIGH_CONFIDENCE = 85
    LOW_CONFIDENCE = 65

    POSITIVE_COLOR = '#10b981'
    NEGATIVE_COLOR = '#ef4444'
    NEUTRAL_COLOR = '#6b7280'
    HISTOGRAM_COLOR = '#3b82f6'
    HISTOGRAM_BORDER = '#1e40af'


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
    FEATURE_TOKEN_PREVIEW = 50
