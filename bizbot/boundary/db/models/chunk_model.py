"""
Chunk ORM model.

Embedded chunk of a document. The embedding is stored as a JSON array and
compared in Python at query time.

Dependencies: sqlalchemy, bizbot.boundary.db.base
System role: Chunk persistence for retrieval
"""

import uuid

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ChunkModel(Base, UUIDMixin, TimestampMixin):
    """
    Chunk ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        business_id: Owning business, denormalized for the per-business scan
        document_id: Foreign key to DocumentModel (cascade delete)
        chunk_index: Position in the document's chunk sequence
        content: Chunk text
        embedding: Embedding vector as JSON list
        category: Chunk-level category
        keywords: Comma-separated top keywords
    """

    __tablename__ = "chunks"

    business_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[list | None] = mapped_column(JSON, nullable=True, default=None)
    category: Mapped[str] = mapped_column(String(64), nullable=False, default="general")
    keywords: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    document = relationship("DocumentModel", back_populates="chunks")
