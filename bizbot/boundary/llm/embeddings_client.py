"""
LangChain embedding adapter.

Wraps any LangChain Embeddings implementation (Gemini, OpenAI) behind the
EmbeddingProvider protocol and maps provider failures to EmbeddingError.

Dependencies: langchain_core
System role: Embedding generation adapter
"""

import logging

from langchain_core.embeddings import Embeddings

from bizbot.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class LangChainEmbeddingProvider:
    """EmbeddingProvider backed by a LangChain Embeddings model."""

    def __init__(self, embeddings: Embeddings, model_name: str = "") -> None:
        """
        Initialize adapter.

        Args:
            embeddings: LangChain embeddings client, constructed once and reused
            model_name: Model identifier used in log messages
        """
        self._embeddings = embeddings
        self._model_name = model_name

    async def embed(self, text: str) -> list[float]:
        """
        Generate an embedding for one text.

        Args:
            text: Chunk or query text

        Returns:
            list[float]: Embedding vector

        Raises:
            EmbeddingError: When the provider call fails
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            error = EmbeddingError(
                f"Failed to create embedding: {e}",
                details={"model": self._model_name},
            )
            logger.error(f"{__name__}:embed - {error.reason} failure: {type(e).__name__}: {e}")
            raise error from e
        return [float(value) for value in vector]
