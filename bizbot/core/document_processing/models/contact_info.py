"""
Contact information model.

Holds the contact fields found in a document before they are rendered
into a contact card.

Dependencies: pydantic
System role: Intermediate result of contact-card synthesis
"""

from pydantic import BaseModel, Field


class ContactInfo(BaseModel):
    """Contact fields extracted from document text."""

    phones: list[str] = Field(default_factory=list, description="Normalized phone numbers, first-seen order")
    whatsapp: str | None = Field(default=None, description="Number found under a WhatsApp label")
    email: str | None = Field(default=None)
    address: str | None = Field(default=None)
    website: str | None = Field(default=None)
    hours: str | None = Field(default=None, description="Opening hours block, one line per entry")

    @property
    def is_empty(self) -> bool:
        """True when no field was found."""
        return not (
            self.phones or self.whatsapp or self.email
            or self.address or self.website or self.hours
        )
