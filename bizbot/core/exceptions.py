"""
Exception hierarchy for the bizbot knowledge pipeline.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

# Provider failure reasons. Providers only report failures as message strings.
REASON_AUTH = "auth"
REASON_QUOTA = "quota"
REASON_RATE_LIMIT = "rate_limit"
REASON_TIMEOUT = "timeout"
REASON_UNKNOWN = "unknown"


def classify_provider_failure(message: str | None) -> str:
    """
    Classify an embedding or chat provider failure from its message.

    "401" means auth, "quota" means quota, "rate limit" means rate limiting.

    Args:
        message: Raw failure message

    Returns:
        str: One of auth, quota, rate_limit, timeout, unknown
    """
    text = (message or "").lower()
    if "401" in text:
        return REASON_AUTH
    if "quota" in text:
        return REASON_QUOTA
    if "rate limit" in text:
        return REASON_RATE_LIMIT
    if "timeout" in text or "timed out" in text:
        return REASON_TIMEOUT
    return REASON_UNKNOWN


class BizBotException(Exception):
    """Base exception for all bizbot application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(BizBotException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentProcessingError(BizBotException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            filename: Original name of the file being processed
            details: Additional context
        """
        details = details or {}
        if filename:
            details["filename"] = filename
        super().__init__(message, details)


class UnsupportedFormatError(DocumentProcessingError):
    """Raised when no extractor is registered for a file type."""

    def __init__(
        self,
        file_type: str,
        filename: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unsupported format error.

        Args:
            file_type: Declared extension that has no extractor
            filename: Original name of the file
            details: Additional context
        """
        details = details or {}
        details["file_type"] = file_type
        self.file_type = file_type
        super().__init__(f"Unsupported file type: {file_type}", filename, details)


class ExtractionError(DocumentProcessingError):
    """Raised when a supported file cannot be read (corrupt or undecodable content)."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Error message
            filename: Original name of the file
            file_type: Type of file that failed extraction
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, filename, details)


class ProviderError(BizBotException):
    """Base exception for embedding and chat provider failures."""

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Provider failure message
            reason: Explicit reason; classified from the message when None
            details: Additional context
        """
        self.reason = reason or classify_provider_failure(message)
        details = details or {}
        details["reason"] = self.reason
        super().__init__(message, details)


class EmbeddingError(ProviderError):
    """Raised when the embedding provider fails or times out."""

    pass


class PersistenceError(BizBotException):
    """Raised when a knowledge store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            operation: Store operation that failed (save_document, save_chunk, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class BusinessNotFoundError(BizBotException):
    """Raised when a business cannot be found."""

    def __init__(self, business_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize business not found error.

        Args:
            business_id: ID of the missing business
            details: Additional context
        """
        details = details or {}
        details["business_id"] = business_id
        super().__init__(f"Business not found: {business_id}", details)


class ResponseGenerationError(ProviderError):
    """Raised when the chat completion provider fails."""

    pass
