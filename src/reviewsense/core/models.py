"""Data models for ReviewSense."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple


@dataclass
class BasicFeatures:
    """Surface statistics computed alongside the lexicon score."""
    word_count: int
    avg_word_length: float
    unique_word_count: int
    lexical_diversity: float


@dataclass
class LexiconResult:
    """Result of lexicon-based polarity scoring."""
    total_score: int
    comparative_score: float
    label: str  # "Positive", "Negative" or "Neutral"
    confidence: float
    tokens: List[str]
    positive_tokens: List[str]
    negative_tokens: List[str]
    features: BasicFeatures
    compound: float = 0.0  # VADER compound in [-1, 1]
    stars: float = 3.0


@dataclass
class TextFeatures:
    """Raw style signals of a review."""
    word_count: int
    sentence_count: int
    avg_word_length: float
    avg_sentence_length: float
    unique_word_count: int
    lexical_diversity: float
    special_char_count: int
    uppercase_ratio: float
    exclamation_count: int
    question_count: int


@dataclass
class TextMetadata:
    """Derived readability and tone scores, each in [0, 100]."""
    language: str
    readability_score: float
    emotional_intensity: float
    subjectivity: float


@dataclass
class PreprocessedProfile:
    """Output of the advanced preprocessing pipeline."""
    original_text: str
    cleaned_text: str
    filtered_tokens: List[str]
    lemmatized_tokens: List[str]
    features: TextFeatures
    metadata: TextMetadata


@dataclass
class EncodedInput:
    """Fixed-length encoding produced by the subword tokenizer."""
    input_ids: List[int]
    attention_mask: List[int]
    token_type_ids: List[int]


@dataclass
class ClassifierOutput:
    """Three-way probability distribution from the heuristic classifier."""
    positive_prob: float
    negative_prob: float
    neutral_prob: float
    predicted_class: str  # "positive", "negative" or "neutral"
    confidence: float
    raw_logits: Tuple[float, float, float]


@dataclass(frozen=True)
class ReviewRecord:
    """Per-review unit consumed by the dashboard aggregation."""
    label: str
    score: float
    confidence: float
    positive_tokens: List[str]
    negative_tokens: List[str]
    tokens: List[str]
    timestamp: str  # ISO 8601
    predicted_class: Optional[str] = None
    classifier_confidence: Optional[float] = None


@dataclass
class WordFrequency:
    """Word with its frequency and the sentiment it is associated with."""
    word: str
    frequency: int
    sentiment: str


@dataclass
class TrendPoint:
    """Sentiment counts for one day."""
    timestamp: str  # YYYY-MM-DD
    positive_count: int
    negative_count: int
    neutral_count: int
    average_score: float


@dataclass
class HistogramBin:
    """Equal-width score bin; both bounds inclusive."""
    min: float
    max: float
    count: int


@dataclass
class SentimentMetrics:
    """Central tendency and spread of a record collection."""
    positive_percentage: float = 0.0
    negative_percentage: float = 0.0
    neutral_percentage: float = 0.0
    avg_score: float = 0.0
    avg_confidence: float = 0.0
    median_score: float = 0.0
    std_deviation: float = 0.0


@dataclass
class DashboardMetrics:
    """Snapshot of aggregated dashboard statistics."""
    total_reviews: int = 0
    positive_count: int = 0
    negative_count: int = 0
    neutral_count: int = 0
    positive_percentage: float = 0.0
    negative_percentage: float = 0.0
    neutral_percentage: float = 0.0
    average_sentiment_score: float = 0.0
    average_confidence: float = 0.0
    median_score: float = 0.0
    std_deviation: float = 0.0
    top_positive_words: List[WordFrequency] = field(default_factory=list)
    top_negative_words: List[WordFrequency] = field(default_factory=list)
    sentiment_trend: List[TrendPoint] = field(default_factory=list)
    word_cloud: List[WordFrequency] = field(default_factory=list)
    score_histogram: List[HistogramBin] = field(default_factory=list)


@dataclass
class ChartDataset:
    """One series of a chart."""
    label: str
    data: List[float]
    background_color: Optional[object] = None  # color or list of colors
    border_color: Optional[object] = None
    fill: Optional[bool] = None


@dataclass
class ChartData:
    """Chart-ready labels and series."""
    labels: List[str]
    datasets: List[ChartDataset]


@dataclass
class ReportSummary:
    """Human-readable summary report of a record collection."""
    report_date: str
    total_reviews_analyzed: int
    sentiment_summary: Dict[str, Dict[str, object]]
    statistical_analysis: Dict[str, str]
    key_insights: List[str]
    top_words: Dict[str, List[WordFrequency]]


@dataclass
class BatchAggregate:
    """Label distribution and means over a batch of lexicon results."""
    total: int = 0
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_percentage: float = 0.0
    negative_percentage: float = 0.0
    neutral_percentage: float = 0.0
    avg_score: float = 0.0
    avg_confidence: float = 0.0


@dataclass
class AnalysisResult:
    """Combined analysis of a single review."""
    text: str
    lexicon: LexiconResult
    classifier: ClassifierOutput
    preprocessed: Optional[PreprocessedProfile] = None
    timestamp: str = ""
    text_length: int = 0


@dataclass
class BatchAnalysis:
    """Order-preserving batch results with their aggregate."""
    count: int
    results: List[AnalysisResult]
    aggregate: BatchAggregate
    timestamp: str = ""


@dataclass
class Comparison:
    """Side-by-side analysis of two reviews."""
    result_a: AnalysisResult
    result_b: AnalysisResult
    score_difference: int
    jaccard_similarity: float


@dataclass
class FeatureSummary:
    """Feature extraction view of a preprocessed review."""
    features: TextFeatures
    metadata: TextMetadata
    tokens_count: int
    lemmatized_count: int
    unique_tokens: int
    tokens: List[str]
    timestamp: str = ""


@dataclass
class Distribution:
    """Per-label counts and percentages."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_percentage: float = 0.0
    negative_percentage: float = 0.0
    neutral_percentage: float = 0.0
    total_reviews: int = 0
