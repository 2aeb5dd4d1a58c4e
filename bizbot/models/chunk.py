"""
Chunk domain models.

Represents persisted document chunks and their retrieval scores.

Dependencies: pydantic
System role: Chunk data structures shared by ingestion, storage and retrieval
"""

from pydantic import BaseModel, Field


class StoredChunk(BaseModel):
    """Embedded chunk as held by the knowledge store."""

    id: str = Field(description="Chunk identifier assigned by the store")
    business_id: str = Field(description="Owning business")
    document_id: str = Field(description="Source document")
    chunk_index: int = Field(ge=0, description="Ordinal position within the document")
    content: str = Field(description="Chunk text content")
    embedding: list[float] | None = Field(default=None, description="Embedding vector")
    category: str = Field(default="general", description="Topic category of the chunk")
    keywords: str = Field(default="", description="Comma-separated top keywords")


class ScoredChunk(BaseModel):
    """Chunk returned by retrieval with its similarity score."""

    chunk: StoredChunk
    similarity: float = Field(description="Cosine similarity to the query embedding")
    contact_score: int = Field(
        default=0,
        description="Contact heuristic score; non-zero only for override picks",
    )

    @property
    def id(self) -> str:
        return self.chunk.id

    @property
    def content(self) -> str:
        return self.chunk.content
