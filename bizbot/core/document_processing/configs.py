"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for chunking, tagging and the
batched embedding step.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    max_chunks_per_file: int = Field(
        default=50,
        gt=0,
        description="Chunks beyond this count are dropped before embedding",
    )

    # Embedding batches
    embedding_batch_size: int = Field(
        default=5,
        gt=0,
        description="Concurrent embedding calls per batch",
    )
    embedding_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout applied to every single embedding call",
    )
    batch_delay_seconds: float = Field(
        default=0.2,
        ge=0,
        description="Pause between embedding batches to respect provider rate limits",
    )

    # Tagging
    keyword_limit: int = Field(
        default=10,
        gt=0,
        description="Number of keywords kept per chunk",
    )


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
