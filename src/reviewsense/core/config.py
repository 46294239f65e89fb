"""Configuration management for ReviewSense."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import ClassifierConstants, DashboardConstants


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Classifier
    vocab_size: int = Field(ClassifierConstants.VOCAB_SIZE, description="Subword vocabulary size")
    max_sequence_length: int = Field(ClassifierConstants.MAX_LENGTH, description="Encoded sequence length")

    # Dashboard
    top_words_limit: int = Field(DashboardConstants.TOP_WORDS_LIMIT, description="Top words per polarity")
    word_cloud_limit: int = Field(DashboardConstants.WORD_CLOUD_LIMIT, description="Word cloud size")
    histogram_bins: int = Field(DashboardConstants.HISTOGRAM_BINS, description="Score histogram bin count")

    # Batch processing
    batch_workers: int = Field(4, description="Worker threads for batch analysis")
    parallel_batch_min: int = Field(32, description="Smallest batch that is fanned out to workers")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "REVIEWSENSE_"


# Global settings instance
settings = Settings()
