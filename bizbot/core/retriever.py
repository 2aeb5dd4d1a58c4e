"""
Retrieval logic with contact override.

Ranks every chunk of a business by cosine similarity to the query and, for
contact-like queries, makes sure the best contact-card chunk is part of the
result even when similarity alone does not surface it.

Dependencies: bizbot.boundary.llm.providers, bizbot.boundary.db.knowledge_store
System role: RAG retrieval business logic
"""

import logging
import math
from collections.abc import Sequence

from bizbot.boundary.db.knowledge_store import KnowledgeStore
from bizbot.boundary.llm.providers import EmbeddingProvider
from bizbot.models import ScoredChunk, StoredChunk
from bizbot.observability.log_utils import preview

logger = logging.getLogger(__name__)

SIMILARITY_EPSILON = 1e-8

CONTACT_QUERY_KEYWORDS = (
    "contact", "phone", "call", "whatsapp", "email", "address", "location",
    "map", "reach", "visit", "hours", "timings", "working hours", "business hours",
)

# Lowercase marker -> score. The card sentinel outweighs any set of labels.
CONTACT_CHUNK_MARKERS = (
    ("=== contact_card ===", 10),
    ("phone:", 3),
    ("whatsapp:", 2),
    ("email:", 2),
    ("address:", 2),
    ("website:", 1),
    ("hours:", 2),
)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity with an epsilon in the denominator.

    A zero vector yields 0.0 instead of dividing by zero.

    Args:
        a: First vector
        b: Second vector of the same length

    Returns:
        float: dot(a, b) / (|a| * |b| + 1e-8)

    Raises:
        ValueError: When the vectors differ in length
    """
    if len(a) != len(b):
        raise ValueError(f"Vector length mismatch: {len(a)} != {len(b)}")

    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    return dot / (norm_a * norm_b + SIMILARITY_EPSILON)


def is_contact_like(query: str | None) -> bool:
    """True when the query mentions contact, location or opening hours."""
    text = (query or "").lower()
    return any(keyword in text for keyword in CONTACT_QUERY_KEYWORDS)


def contact_chunk_score(content: str | None) -> int:
    """Score how much a chunk looks like contact information."""
    text = (content or "").lower()
    return sum(score for marker, score in CONTACT_CHUNK_MARKERS if marker in text)


def _similarity(query_embedding: list[float], chunk: StoredChunk) -> float:
    if not chunk.embedding or len(chunk.embedding) != len(query_embedding):
        return 0.0
    return cosine_similarity(query_embedding, chunk.embedding)


class Retriever:
    """Stateless retrieval over a business's stored chunks."""

    def __init__(self, embedding_provider: EmbeddingProvider, store: KnowledgeStore) -> None:
        """
        Initialize retriever.

        Args:
            embedding_provider: Provider used to embed queries
            store: Knowledge store holding the chunks
        """
        self._embedding_provider = embedding_provider
        self._store = store

    async def retrieve(self, business_id: str, query: str, top_k: int = 6) -> list[ScoredChunk]:
        """
        Retrieve the most relevant chunks for a query.

        Every call re-embeds the query and re-scans all chunks of the business.

        Args:
            business_id: Business whose knowledge is searched
            query: User message
            top_k: Number of chunks to return

        Returns:
            list[ScoredChunk]: At most top_k chunks, best first; the contact
                override pick, if any, takes the last slot

        Raises:
            ValueError: When top_k is not positive
            EmbeddingError: When the query cannot be embedded
            PersistenceError: When chunks cannot be loaded
        """
        if top_k <= 0:
            raise ValueError("top_k must be positive")

        query_embedding = await self._embedding_provider.embed(query)
        chunks = await self._store.get_chunks_for_business(business_id)
        if not chunks:
            logger.info(f"{__name__}:retrieve - No chunks for business {business_id}")
            return []

        scored = [
            ScoredChunk(chunk=chunk, similarity=_similarity(query_embedding, chunk))
            for chunk in chunks
        ]
        scored.sort(key=lambda item: item.similarity, reverse=True)
        selected = scored[:top_k]

        if is_contact_like(query):
            selected = self._apply_contact_override(selected, scored, top_k)

        logger.info(
            f"{__name__}:retrieve - Selected {len(selected)} of {len(chunks)} chunks",
            extra={"business_id": business_id, "top_k": top_k, "query_preview": preview(query)},
        )
        return selected

    @staticmethod
    def _apply_contact_override(
        selected: list[ScoredChunk],
        scored: list[ScoredChunk],
        top_k: int,
    ) -> list[ScoredChunk]:
        best = None
        best_score = 0
        for item in scored:
            score = contact_chunk_score(item.content)
            if score > best_score:
                best, best_score = item, score

        if best is None or any(item.id == best.id for item in selected):
            return selected

        logger.info(f"{__name__}:_apply_contact_override - Forcing contact chunk {best.id} (score {best_score})")
        pick = best.model_copy(update={"contact_score": best_score})
        return selected[:top_k - 1] + [pick]
