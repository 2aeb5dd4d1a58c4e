"""Service orchestrators."""

from .chat_service import ChatService
from .ingestion_service import IngestionService

__all__ = [
    "ChatService",
    "IngestionService",
]
