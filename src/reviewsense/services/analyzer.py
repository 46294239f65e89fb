"""Review analysis service combining the lexicon scorer, preprocessor and classifier."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from ..core.classifier import HeuristicClassifier
from ..core.config import settings
from ..core.constants import FileConstants, LabelConstants
from ..core.dashboard import aggregate
from ..core.errors import InvalidInputError
from ..core.lexicon import LexiconScorer, get_scorer
from ..core.models import (
    AnalysisResult,
    BatchAggregate,
    BatchAnalysis,
    Comparison,
    DashboardMetrics,
    Distribution,
    FeatureSummary,
    LexiconResult,
    ReviewRecord,
)
from ..core.preprocessing import preprocess

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now().isoformat()


def _require_text(text: Any, field: str = "text") -> str:
    if not isinstance(text, str):
        raise InvalidInputError(f"Invalid input: {field} field is required and must be a string")
    return text


def _require_texts(texts: Any) -> List[str]:
    if isinstance(texts, str) or not isinstance(texts, (list, tuple)) or len(texts) == 0:
        raise InvalidInputError("Invalid input: reviews must be a non-empty array")
    if not all(isinstance(t, str) for t in texts):
        raise InvalidInputError("Invalid input: all reviews must be strings")
    return list(texts)


def jaccard_similarity(text_a: str, text_b: str) -> float:
    """Overlap of lower-cased whitespace word sets; 0 when both are empty."""
    words_a = set(text_a.lower().split())
    words_b = set(text_b.lower().split())
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def aggregate_results(results: Sequence[LexiconResult]) -> BatchAggregate:
    """Label counts, percentages and mean score/confidence over lexicon results."""
    total = len(results)
    if total == 0:
        return BatchAggregate()

    positive = sum(1 for r in results if r.label == LabelConstants.POSITIVE)
    negative = sum(1 for r in results if r.label == LabelConstants.NEGATIVE)
    neutral = sum(1 for r in results if r.label == LabelConstants.NEUTRAL)

    return BatchAggregate(
        total=total,
        positive=positive,
        negative=negative,
        neutral=neutral,
        positive_percentage=positive / total * 100,
        negative_percentage=negative / total * 100,
        neutral_percentage=neutral / total * 100,
        avg_score=sum(r.total_score for r in results) / total,
        avg_confidence=sum(r.confidence for r in results) / total,
    )


def to_record(result: AnalysisResult, timestamp: Optional[str] = None) -> ReviewRecord:
    """Combine one analysis into the record shape consumed by the dashboard."""
    lexicon = result.lexicon
    classifier = result.classifier
    return ReviewRecord(
        label=lexicon.label,
        score=lexicon.total_score,
        confidence=lexicon.confidence,
        positive_tokens=list(lexicon.positive_tokens),
        negative_tokens=list(lexicon.negative_tokens),
        tokens=list(lexicon.tokens),
        timestamp=timestamp or result.timestamp or _now(),
        predicted_class=classifier.predicted_class if classifier else None,
        classifier_confidence=classifier.confidence if classifier else None,
    )


class SentimentService:
    """Entry points used by the UI and transport layers."""

    def __init__(
        self,
        scorer: Optional[LexiconScorer] = None,
        classifier: Optional[HeuristicClassifier] = None,
        max_workers: Optional[int] = None,
        parallel_min: Optional[int] = None,
    ):
        self.scorer = scorer or get_scorer()
        self.classifier = classifier or HeuristicClassifier()
        self.max_workers = settings.batch_workers if max_workers is None else max_workers
        self.parallel_min = settings.parallel_batch_min if parallel_min is None else parallel_min

    def _analyze(self, text: str, use_advanced: bool = False) -> AnalysisResult:
        return AnalysisResult(
            text=text,
            lexicon=self.scorer.score(text),
            classifier=self.classifier.classify(text),
            preprocessed=preprocess(text) if use_advanced else None,
            timestamp=_now(),
            text_length=len(text),
        )

    def _map(self, texts: List[str], use_advanced: bool) -> List[AnalysisResult]:
        """Analyze texts in input order, fanning out to threads for large batches."""
        if len(texts) < self.parallel_min or self.max_workers <= 1:
            return [self._analyze(t, use_advanced) for t in texts]

        logger.info(f"Analyzing {len(texts)} reviews with {self.max_workers} workers")
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda t: self._analyze(t, use_advanced), texts))

    def analyze_single(self, text: str, use_advanced: bool = False) -> AnalysisResult:
        """Lexicon score plus classifier output; preprocessing only on request."""
        text = _require_text(text)
        return self._analyze(text, use_advanced)

    def analyze_batch(self, texts: Sequence[str], use_advanced: bool = False) -> BatchAnalysis:
        """One result per input, in input order, plus an aggregate summary."""
        texts = _require_texts(texts)
        results = self._map(texts, use_advanced)
        summary = aggregate_results([r.lexicon for r in results])

        logger.info(
            f"Batch of {summary.total}: {summary.positive} positive, "
            f"{summary.negative} negative, {summary.neutral} neutral"
        )

        return BatchAnalysis(count=len(results), results=results, aggregate=summary, timestamp=_now())

    def compare(self, text_a: str, text_b: str) -> Comparison:
        """Analyze two reviews side by side."""
        text_a = _require_text(text_a, "text1")
        text_b = _require_text(text_b, "text2")
        if not text_a or not text_b:
            raise InvalidInputError("Both text1 and text2 are required")

        result_a = self._analyze(text_a)
        result_b = self._analyze(text_b)

        return Comparison(
            result_a=result_a,
            result_b=result_b,
            score_difference=result_a.lexicon.total_score - result_b.lexicon.total_score,
            jaccard_similarity=jaccard_similarity(text_a, text_b),
        )

    def extract_features(self, text: str) -> FeatureSummary:
        """Preprocessing-derived features without a classifier pass."""
        text = _require_text(text)
        if not text:
            raise InvalidInputError("Text field is required")

        profile = preprocess(text)
        tokens = profile.filtered_tokens

        return FeatureSummary(
            features=profile.features,
            metadata=profile.metadata,
            tokens_count=len(tokens),
            lemmatized_count=len(profile.lemmatized_tokens),
            unique_tokens=len(set(tokens)),
            tokens=tokens[:FileConstants.FEATURE_TOKEN_PREVIEW],
            timestamp=_now(),
        )

    def distribution(self, texts: Sequence[str]) -> Distribution:
        """Per-label counts and percentages over lexicon labels."""
        texts = _require_texts(texts)
        summary = aggregate_results([self.scorer.score(t) for t in texts])

        return Distribution(
            positive=summary.positive,
            negative=summary.negative,
            neutral=summary.neutral,
            positive_percentage=summary.positive_percentage,
            negative_percentage=summary.negative_percentage,
            neutral_percentage=summary.neutral_percentage,
            total_reviews=summary.total,
        )

    def build_dashboard(self, results: Sequence[AnalysisResult]) -> DashboardMetrics:
        """Aggregate analysis results into dashboard metrics."""
        return aggregate([to_record(r) for r in results])

    def model_info(self) -> Dict[str, Any]:
        """Describe the analysis components."""
        return {
            "model_type": "Hybrid Sentiment Analysis",
            "components": [
                "Basic Sentiment Analyzer (Lexicon-based)",
                "Advanced Preprocessing Pipeline",
                "Heuristic Subword Classifier",
                "Feature Extraction Engine",
            ],
            "supported_languages": ["English"],
            "max_text_length": self.classifier.tokenizer.max_length,
            "classes": list(LabelConstants.CLASSES),
        }
