"""
Model provider boundary.

Exports: EmbeddingProvider, ChatProvider, LangChainEmbeddingProvider,
LangChainChatProvider, create_embedding_provider, create_chat_provider
"""

from .chat_client import LangChainChatProvider
from .embeddings_client import LangChainEmbeddingProvider
from .provider_factory import create_chat_provider, create_embedding_provider
from .providers import ChatProvider, EmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "ChatProvider",
    "LangChainEmbeddingProvider",
    "LangChainChatProvider",
    "create_embedding_provider",
    "create_chat_provider",
]
