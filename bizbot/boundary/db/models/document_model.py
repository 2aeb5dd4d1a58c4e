"""
Document ORM model.

Processed text of one uploaded file. Immutable once written.

Dependencies: sqlalchemy, bizbot.boundary.db.base
System role: Document persistence for ingestion
"""

import uuid

from sqlalchemy import ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        business_id: Foreign key to BusinessModel (cascade delete)
        original_name: Filename as uploaded
        file_type: Declared extension
        size_bytes: Upload size
        content: Processed text including the contact card
        category: Document-level category

    Relationships:
        business: Parent BusinessModel
        chunks: One-to-many with ChunkModel (CASCADE on delete)
    """

    __tablename__ = "documents"

    business_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    original_name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Original filename")
    file_type: Mapped[str] = mapped_column(String(16), nullable=False)
    size_bytes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(64), nullable=False, default="general")

    # Relationships
    business = relationship("BusinessModel", back_populates="documents")
    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
