"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from bizbot.configs.base import BaseSettings
from bizbot.configs.database import DatabaseSettings
from bizbot.configs.llm import LLMSettings, RetrievalSettings
from bizbot.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    llm: LLMSettings = LLMSettings()
    retrieval: RetrievalSettings = RetrievalSettings()
    pipeline: DocumentPipelineSettings = DocumentPipelineSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once and cached.

    Returns:
        Settings: Application settings instance

    Usage:
        from bizbot.configs import get_settings
        settings = get_settings()
    """
    return Settings()
