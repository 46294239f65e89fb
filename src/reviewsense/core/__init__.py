"""Core modules for ReviewSense."""

from .models import *
from .config import settings
from .errors import InvalidInputError, ReviewSenseError
from .tokenizer import normalize, tokenize_words, split_sentences
from .lexicon import LexiconScorer, analyze_sentiment
from .preprocessing import preprocess
from .classifier import HeuristicClassifier, SubwordTokenizer
from .dashboard import aggregate, calculate_sentiment_metrics, generate_report_summary

__all__ = [
    "settings",
    "InvalidInputError",
    "ReviewSenseError",
    "normalize",
    "tokenize_words",
    "split_sentences",
    "LexiconScorer",
    "analyze_sentiment",
    "preprocess",
    "HeuristicClassifier",
    "SubwordTokenizer",
    "aggregate",
    "calculate_sentiment_metrics",
    "generate_report_summary",
    "LexiconResult",
    "PreprocessedProfile",
    "ClassifierOutput",
    "ReviewRecord",
    "DashboardMetrics",
]
