"""
LLM provider configuration settings.

Selects the embedding and chat providers and their generation parameters.

Dependencies: pydantic, pydantic_settings
System role: Model provider configuration for embedding and chat
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bizbot.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Embedding and chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BIZBOT_LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google",
        description="Model provider: 'google' (Gemini) or 'openai'",
    )
    api_key: str | None = Field(
        default=None,
        description="Provider API key (falls back to the provider's own env var)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model identifier",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat completion model identifier",
    )
    temperature: float = Field(
        default=0.2,
        description="Sampling temperature; kept low for factual answers",
    )
    max_output_tokens: int = Field(
        default=500,
        description="Upper bound on completion length",
    )


class RetrievalSettings(BaseSettings):
    """Retrieval and prompt composition settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BIZBOT_RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=6, description="Number of chunks passed to the prompt")
    history_window: int = Field(
        default=6,
        description="Number of previous conversation turns sent to the chat model",
    )
