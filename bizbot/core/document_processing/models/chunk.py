"""
Chunk model for document processing pipeline.

A chunk travelling through tagging and embedding before it is saved.

Dependencies: pydantic
System role: Intermediate data structure between pipeline tasks
"""

from pydantic import BaseModel, Field


class ProcessedChunk(BaseModel):
    """Tagged chunk with its embedding outcome."""

    index: int = Field(ge=0, description="Position in the document's chunk sequence")
    content: str = Field(description="Chunk text content")
    category: str = Field(default="general", description="Topic category of the chunk")
    keywords: str = Field(default="", description="Comma-separated top keywords")
    embedding: list[float] | None = Field(default=None, description="Embedding vector, None until embedded")
    error: str | None = Field(default=None, description="Embedding failure message")
    error_reason: str | None = Field(default=None, description="Classified failure reason")

    @property
    def embedded(self) -> bool:
        return self.embedding is not None and self.error is None
