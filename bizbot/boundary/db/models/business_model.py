"""
Business ORM model.

Identity and contact record of a business. Deleting a business deletes its
documents and chunks.

Dependencies: sqlalchemy, bizbot.boundary.db.base
System role: Business persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizbot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class BusinessModel(Base, UUIDMixin, TimestampMixin):
    """
    Business ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        description, phone, whatsapp, email, address, website, hours: Optional
            contact fields used as the fallback contact card

    Relationships:
        documents: One-to-many with DocumentModel (CASCADE on delete)
    """

    __tablename__ = "businesses"

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Business name")
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    whatsapp: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    address: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    website: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    hours: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    # Relationships
    documents = relationship(
        "DocumentModel",
        back_populates="business",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
