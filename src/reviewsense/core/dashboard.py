"""Dashboard aggregation, statistics and chart builders."""

import logging
import math
from collections import Counter, defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .config import settings
from .constants import DashboardConstants as DC, LabelConstants
from .models import (
    ChartData,
    ChartDataset,
    DashboardMetrics,
    HistogramBin,
    ReportSummary,
    ReviewRecord,
    SentimentMetrics,
    TrendPoint,
    WordFrequency,
)

logger = logging.getLogger(__name__)


def _percentage(count: int, total: int) -> float:
    return count / total * 100 if total else 0.0


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def count_labels(records: Sequence[ReviewRecord]) -> Dict[str, int]:
    """Tally records by label; unknown labels count as neutral."""
    counts = {LabelConstants.POSITIVE: 0, LabelConstants.NEGATIVE: 0, LabelConstants.NEUTRAL: 0}
    for r in records:
        if r.label in (LabelConstants.POSITIVE, LabelConstants.NEGATIVE):
            counts[r.label] += 1
        else:
            counts[LabelConstants.NEUTRAL] += 1
    return counts


def median(values: Sequence[float]) -> float:
    """Middle value; mean of the two middle values for even lengths."""
    if not values:
        return 0.0
    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 0:
        return (ordered[n // 2 - 1] + ordered[n // 2]) / 2
    return ordered[n // 2]


def std_deviation(values: Sequence[float]) -> float:
    """Population standard deviation."""
    if not values:
        return 0.0
    mean = _mean(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def extract_top_words(records: Sequence[ReviewRecord], kind: str, limit: int) -> List[WordFrequency]:
    """Most frequent matched tokens of one polarity ('positive' or 'negative')."""
    freq: Counter = Counter()
    for r in records:
        words = r.positive_tokens if kind == "positive" else r.negative_tokens
        freq.update(words)

    # most_common is stable, so equal counts keep first-seen order
    return [
        WordFrequency(word=word, frequency=count, sentiment=kind)
        for word, count in freq.most_common(limit)
    ]


def extract_word_cloud(records: Sequence[ReviewRecord], limit: int) -> List[WordFrequency]:
    """Frequency of every token longer than two characters.

    Each word carries the label of the last record it appeared in.
    """
    freq: Counter = Counter()
    sentiment: Dict[str, str] = {}

    for r in records:
        label = r.label.lower()
        for token in r.tokens or []:
            if len(token) >= DC.WORD_CLOUD_MIN_LENGTH:
                freq[token] += 1
                sentiment[token] = label

    return [
        WordFrequency(word=word, frequency=count, sentiment=sentiment[word])
        for word, count in freq.most_common(limit)
    ]


def generate_trend_data(records: Sequence[ReviewRecord]) -> List[TrendPoint]:
    """Bucket records per calendar day, ascending by date."""
    groups: Dict[str, List[ReviewRecord]] = defaultdict(list)
    for r in records:
        groups[r.timestamp.split("T")[0]].append(r)

    trend = []
    for date, group in groups.items():
        counts = count_labels(group)
        trend.append(TrendPoint(
            timestamp=date,
            positive_count=counts[LabelConstants.POSITIVE],
            negative_count=counts[LabelConstants.NEGATIVE],
            neutral_count=counts[LabelConstants.NEUTRAL],
            average_score=_mean([r.score for r in group]),
        ))

    return sorted(trend, key=lambda t: t.timestamp)


def create_histogram_bins(scores: Sequence[float], bin_count: int = DC.HISTOGRAM_BINS) -> List[HistogramBin]:
    """Equal-width bins over [min, max] with inclusive bounds on both ends.

    A score that falls exactly on a shared boundary is counted in both
    adjoining bins.
    """
    if not scores or bin_count <= 0:
        return []

    min_score = min(scores)
    max_score = max(scores)
    score_range = (max_score - min_score) or 1
    width = score_range / bin_count
    top = max_score if max_score > min_score else min_score + score_range

    bins = []
    for i in range(bin_count):
        low = min_score + width * i
        # last upper edge is exactly max_score
        high = top if i == bin_count - 1 else min_score + width * (i + 1)
        count = sum(1 for s in scores if low <= s <= high)
        bins.append(HistogramBin(min=low, max=high, count=count))

    return bins


def calculate_sentiment_metrics(records: Sequence[ReviewRecord]) -> SentimentMetrics:
    """Percentages, mean, median and spread of record scores."""
    if not records:
        return SentimentMetrics()

    total = len(records)
    counts = count_labels(records)
    scores = [r.score for r in records]

    return SentimentMetrics(
        positive_percentage=_percentage(counts[LabelConstants.POSITIVE], total),
        negative_percentage=_percentage(counts[LabelConstants.NEGATIVE], total),
        neutral_percentage=_percentage(counts[LabelConstants.NEUTRAL], total),
        avg_score=_mean(scores),
        avg_confidence=_mean([r.confidence for r in records]),
        median_score=median(scores),
        std_deviation=std_deviation(scores),
    )


def aggregate(
    records: Sequence[ReviewRecord],
    top_words: Optional[int] = None,
    cloud_size: Optional[int] = None,
    bins: Optional[int] = None,
) -> DashboardMetrics:
    """Build a fresh dashboard snapshot from a record collection."""
    if top_words is None:
        top_words = settings.top_words_limit
    if cloud_size is None:
        cloud_size = settings.word_cloud_limit
    if bins is None:
        bins = settings.histogram_bins

    if not records:
        return DashboardMetrics()

    counts = count_labels(records)
    stats = calculate_sentiment_metrics(records)

    logger.info(
        f"Aggregated {len(records)} records "
        f"({counts[LabelConstants.POSITIVE]} positive, "
        f"{counts[LabelConstants.NEGATIVE]} negative, "
        f"{counts[LabelConstants.NEUTRAL]} neutral)"
    )

    return DashboardMetrics(
        total_reviews=len(records),
        positive_count=counts[LabelConstants.POSITIVE],
        negative_count=counts[LabelConstants.NEGATIVE],
        neutral_count=counts[LabelConstants.NEUTRAL],
        positive_percentage=stats.positive_percentage,
        negative_percentage=stats.negative_percentage,
        neutral_percentage=stats.neutral_percentage,
        average_sentiment_score=stats.avg_score,
        average_confidence=stats.avg_confidence,
        median_score=stats.median_score,
        std_deviation=stats.std_deviation,
        top_positive_words=extract_top_words(records, "positive", top_words),
        top_negative_words=extract_top_words(records, "negative", top_words),
        sentiment_trend=generate_trend_data(records),
        word_cloud=extract_word_cloud(records, cloud_size),
        score_histogram=create_histogram_bins([r.score for r in records], bins),
    )


# --- Chart builders ---

def sentiment_distribution_chart(metrics: DashboardMetrics) -> ChartData:
    total = metrics.total_reviews or 1
    return ChartData(
        labels=[LabelConstants.POSITIVE, LabelConstants.NEGATIVE, LabelConstants.NEUTRAL],
        datasets=[ChartDataset(
            label="Sentiment Distribution",
            data=[
                metrics.positive_count / total * 100,
                metrics.negative_count / total * 100,
                metrics.neutral_count / total * 100,
            ],
            background_color=[DC.POSITIVE_COLOR, DC.NEGATIVE_COLOR, DC.NEUTRAL_COLOR],
            border_color=['#059669', '#dc2626', '#4b5563'],
        )],
    )


def trend_chart(metrics: DashboardMetrics) -> ChartData:
    trend = metrics.sentiment_trend
    series = [
        ("Positive Reviews", [t.positive_count for t in trend], DC.POSITIVE_COLOR, 'rgba(16, 185, 129, 0.1)'),
        ("Negative Reviews", [t.negative_count for t in trend], DC.NEGATIVE_COLOR, 'rgba(239, 68, 68, 0.1)'),
        ("Neutral Reviews", [t.neutral_count for t in trend], DC.NEUTRAL_COLOR, 'rgba(107, 114, 128, 0.1)'),
    ]
    return ChartData(
        labels=[t.timestamp for t in trend],
        datasets=[
            ChartDataset(label=label, data=data, border_color=border, background_color=fill_color, fill=True)
            for label, data, border, fill_color in series
        ],
    )


def word_frequency_chart(metrics: DashboardMetrics, kind: str) -> ChartData:
    """Bar chart of the top positive or negative words."""
    words = metrics.top_positive_words if kind == "positive" else metrics.top_negative_words
    color = DC.POSITIVE_COLOR if kind == "positive" else DC.NEGATIVE_COLOR
    return ChartData(
        labels=[w.word for w in words],
        datasets=[ChartDataset(
            label=f"Top {kind} Words",
            data=[w.frequency for w in words],
            background_color=color,
            border_color=color,
        )],
    )


def score_histogram_chart(records: Sequence[ReviewRecord], bin_count: Optional[int] = None) -> ChartData:
    if bin_count is None:
        bin_count = settings.histogram_bins
    bins = create_histogram_bins([r.score for r in records], bin_count)
    return ChartData(
        labels=[f"{b.min:.1f} - {b.max:.1f}" for b in bins],
        datasets=[ChartDataset(
            label="Distribution of Sentiment Scores",
            data=[b.count for b in bins],
            background_color=DC.HISTOGRAM_COLOR,
            border_color=DC.HISTOGRAM_BORDER,
        )],
    )


# --- Reports ---

def generate_key_insights(metrics: DashboardMetrics, stats: SentimentMetrics) -> List[str]:
    """Qualitative statements derived from distribution, spread and confidence."""
    insights = []

    if stats.positive_percentage > DC.DOMINANT_PERCENTAGE:
        insights.append("Predominantly positive sentiment detected in reviews")
    elif stats.negative_percentage > DC.DOMINANT_PERCENTAGE:
        insights.append("Predominantly negative sentiment detected in reviews")
    else:
        insights.append("Mixed sentiment distribution across reviews")

    if stats.std_deviation > DC.HIGH_VARIANCE_STD:
        insights.append("High variance in sentiment scores indicates diverse opinions")
    else:
        insights.append("Consistent sentiment pattern throughout reviews")

    if metrics.average_confidence > DC.HIGH_CONFIDENCE:
        insights.append("High confidence in sentiment classifications")
    elif metrics.average_confidence < DC.LOW_CONFIDENCE:
        insights.append("Low confidence scores suggest ambiguous content")

    return insights


def generate_report_summary(records: Sequence[ReviewRecord], metrics: DashboardMetrics) -> ReportSummary:
    """Summarize a record collection for export or display."""
    stats = calculate_sentiment_metrics(records)

    return ReportSummary(
        report_date=datetime.now().isoformat(),
        total_reviews_analyzed=metrics.total_reviews,
        sentiment_summary={
            "positive": {"count": metrics.positive_count, "percentage": f"{stats.positive_percentage:.2f}"},
            "negative": {"count": metrics.negative_count, "percentage": f"{stats.negative_percentage:.2f}"},
            "neutral": {"count": metrics.neutral_count, "percentage": f"{stats.neutral_percentage:.2f}"},
        },
        statistical_analysis={
            "average_sentiment_score": f"{stats.avg_score:.3f}",
            "median_sentiment_score": f"{stats.median_score:.3f}",
            "standard_deviation": f"{stats.std_deviation:.3f}",
            "average_confidence": f"{stats.avg_confidence:.2f}",
        },
        key_insights=generate_key_insights(metrics, stats),
        top_words={
            "positive": metrics.top_positive_words[:DC.REPORT_TOP_WORDS],
            "negative": metrics.top_negative_words[:DC.REPORT_TOP_WORDS],
        },
    )
