"""Service layer for ReviewSense."""

from .analyzer import SentimentService, aggregate_results, jaccard_similarity, to_record

__all__ = [
    "SentimentService",
    "aggregate_results",
    "jaccard_similarity",
    "to_record",
]
