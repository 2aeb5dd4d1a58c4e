"""
Core business logic module.

Contains the document pipeline, retrieval, response composition and the
exception hierarchy.
"""

from bizbot.core.exceptions import (
    BizBotException,
    BusinessNotFoundError,
    DocumentProcessingError,
    EmbeddingError,
    ExtractionError,
    PersistenceError,
    ProviderError,
    ResponseGenerationError,
    UnsupportedFormatError,
    ValidationError,
)

__all__ = [
    "BizBotException",
    "ValidationError",
    "DocumentProcessingError",
    "UnsupportedFormatError",
    "ExtractionError",
    "ProviderError",
    "EmbeddingError",
    "PersistenceError",
    "BusinessNotFoundError",
    "ResponseGenerationError",
]
