"""
Provider factory.

Builds the embedding and chat providers once from LLMSettings so they can be
injected into the pipeline, retriever and chat agent.

Dependencies: langchain_google_genai, langchain_openai, python-dotenv
System role: Construction point for external model clients
"""

import logging

from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings
from langchain_openai import ChatOpenAI, OpenAIEmbeddings

from bizbot.configs.llm import LLMSettings
from bizbot.core.exceptions import ValidationError

from .chat_client import LangChainChatProvider
from .embeddings_client import LangChainEmbeddingProvider

logger = logging.getLogger(__name__)
load_dotenv()

PROVIDER_GOOGLE = "google"
PROVIDER_OPENAI = "openai"
SUPPORTED_PROVIDERS = (PROVIDER_GOOGLE, PROVIDER_OPENAI)


def _provider_name(settings: LLMSettings) -> str:
    name = settings.provider.strip().lower()
    if name not in SUPPORTED_PROVIDERS:
        raise ValidationError(
            f"Unsupported LLM provider: {settings.provider}",
            field="provider",
            details={"supported": list(SUPPORTED_PROVIDERS)},
        )
    return name


def create_embedding_provider(settings: LLMSettings | None = None) -> LangChainEmbeddingProvider:
    """
    Create the embedding provider for the configured backend.

    Args:
        settings: LLM settings (loaded from environment if None)

    Returns:
        LangChainEmbeddingProvider: Adapter over Gemini or OpenAI embeddings

    Raises:
        ValidationError: When the provider name is not supported
    """
    settings = settings or LLMSettings()
    provider = _provider_name(settings)

    if provider == PROVIDER_OPENAI:
        kwargs = {"model": settings.embedding_model}
        if settings.api_key:
            kwargs["api_key"] = settings.api_key
        embeddings = OpenAIEmbeddings(**kwargs)
    else:
        kwargs = {"model": settings.embedding_model}
        if settings.api_key:
            kwargs["google_api_key"] = settings.api_key
        embeddings = GoogleGenerativeAIEmbeddings(**kwargs)

    logger.info(f"{__name__}:create_embedding_provider - {provider} embeddings, model={settings.embedding_model}")
    return LangChainEmbeddingProvider(embeddings, model_name=settings.embedding_model)


def create_chat_provider(settings: LLMSettings | None = None) -> LangChainChatProvider:
    """
    Create the chat provider for the configured backend.

    Temperature and the output-token limit are fixed on the model.

    Args:
        settings: LLM settings (loaded from environment if None)

    Returns:
        LangChainChatProvider: Adapter over Gemini or OpenAI chat models

    Raises:
        ValidationError: When the provider name is not supported
    """
    settings = settings or LLMSettings()
    provider = _provider_name(settings)

    if provider == PROVIDER_OPENAI:
        kwargs = {
            "model": settings.chat_model,
            "temperature": settings.temperature,
            "max_tokens": settings.max_output_tokens,
        }
        if settings.api_key:
            kwargs["api_key"] = settings.api_key
        model = ChatOpenAI(**kwargs)
    else:
        kwargs = {
            "model": settings.chat_model,
            "temperature": settings.temperature,
            "max_output_tokens": settings.max_output_tokens,
        }
        if settings.api_key:
            kwargs["google_api_key"] = settings.api_key
        model = ChatGoogleGenerativeAI(**kwargs)

    logger.info(f"{__name__}:create_chat_provider - {provider} chat, model={settings.chat_model}")
    return LangChainChatProvider(model, model_name=settings.chat_model)
