"""
Business domain model.

The business record is owned by the surrounding service; the knowledge
pipeline only reads it as the authoritative fallback for contact details.

Dependencies: pydantic
System role: Business identity data structure
"""

from pydantic import BaseModel, Field


class Business(BaseModel):
    """Business identity and contact record."""

    id: str = Field(description="Business identifier")
    name: str = Field(description="Display name of the business")
    description: str | None = Field(default=None, description="Short description")
    phone: str | None = Field(default=None, description="Primary phone number")
    whatsapp: str | None = Field(default=None, description="WhatsApp number if different from phone")
    email: str | None = Field(default=None, description="Contact email")
    address: str | None = Field(default=None, description="Street address")
    website: str | None = Field(default=None, description="Website URL")
    hours: str | None = Field(default=None, description="Opening hours, free text")
