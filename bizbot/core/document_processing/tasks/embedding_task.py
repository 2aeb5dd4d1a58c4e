"""
Embedding generation task.

Embeds chunks in fixed-size concurrent batches. Every call carries its own
timeout and a failing chunk is recorded on that chunk only; the rest of the
batch and the remaining batches still run.

Dependencies: asyncio, bizbot.boundary.llm.providers
System role: Third stage of document ingestion pipeline
"""

import asyncio
import logging

from bizbot.boundary.llm.providers import EmbeddingProvider
from bizbot.core.exceptions import REASON_TIMEOUT, EmbeddingError, classify_provider_failure
from bizbot.observability.log_utils import log_with_context, preview

from ..models import ProcessedChunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings for chunks with bounded parallelism."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        batch_size: int = 5,
        timeout_seconds: float = 15.0,
        batch_delay_seconds: float = 0.2,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            provider: Embedding provider shared by all calls
            batch_size: Number of concurrent calls per batch
            timeout_seconds: Timeout for each single call
            batch_delay_seconds: Pause between consecutive batches

        Raises:
            ValueError: When batch_size or timeout_seconds is not positive
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        self._provider = provider
        self.batch_size = batch_size
        self.timeout_seconds = timeout_seconds
        self.batch_delay_seconds = batch_delay_seconds

    async def embed(self, chunks: list[ProcessedChunk]) -> list[ProcessedChunk]:
        """
        Embed all chunks batch by batch.

        Args:
            chunks: Tagged chunks in document order

        Returns:
            list[ProcessedChunk]: Same chunks, each with either an embedding
                or an error and its classified reason
        """
        results: list[ProcessedChunk] = []
        for batch_start in range(0, len(chunks), self.batch_size):
            if batch_start > 0 and self.batch_delay_seconds > 0:
                await asyncio.sleep(self.batch_delay_seconds)

            batch = chunks[batch_start:batch_start + self.batch_size]
            outcomes = await asyncio.gather(
                *(self._embed_one(chunk.content) for chunk in batch),
                return_exceptions=True,
            )
            for chunk, outcome in zip(batch, outcomes):
                results.append(self._settle(chunk, outcome))

        failed = sum(1 for chunk in results if not chunk.embedded)
        logger.info(
            f"{__name__}:embed - Embedded {len(results) - failed}/{len(results)} chunks",
            extra={"batch_size": self.batch_size, "failed": failed},
        )
        return results

    async def _embed_one(self, text: str) -> list[float]:
        try:
            return await asyncio.wait_for(self._provider.embed(text), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise EmbeddingError(
                f"Embedding timed out after {self.timeout_seconds}s",
                reason=REASON_TIMEOUT,
            ) from e

    def _settle(self, chunk: ProcessedChunk, outcome) -> ProcessedChunk:
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            reason = getattr(outcome, "reason", None) or classify_provider_failure(str(outcome))
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:_settle - Chunk {chunk.index} failed ({reason}): {outcome}",
                chunk_index=chunk.index,
                reason=reason,
                content_preview=preview(chunk.content),
            )
            return chunk.model_copy(update={"embedding": None, "error": str(outcome), "error_reason": reason})
        return chunk.model_copy(update={"embedding": list(outcome), "error": None, "error_reason": None})
