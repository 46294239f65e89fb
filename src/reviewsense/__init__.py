"""ReviewSense - lexicon and heuristic sentiment analysis for product reviews."""

__version__ = "1.0.0"
__author__ = "ReviewSense Team"

from .core.models import *
from .core.config import settings
from .services.analyzer import SentimentService

__all__ = [
    "settings",
    "SentimentService",
]
