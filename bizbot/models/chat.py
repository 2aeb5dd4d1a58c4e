"""
Chat domain models.

Conversation turns passed to the response composer and the reply returned
to callers of the chat service.

Dependencies: pydantic
System role: Chat request/response contracts
"""

from typing import Literal

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """Single message of conversation history."""

    role: Literal["user", "assistant"] = Field(description="Who sent the message")
    content: str = Field(description="Message text")


class ChatReply(BaseModel):
    """Reply produced for a user message."""

    answer: str = Field(description="Assistant answer text")
    intent: str = Field(default="inquiry", description="Keyword-classified intent of the user message")
    sentiment: str = Field(default="neutral", description="positive, negative or neutral")
    show_contact_form: bool = Field(
        default=False,
        description="Whether the client should offer a human hand-off form",
    )
    retrieved_chunk_ids: list[str] = Field(
        default_factory=list,
        description="Chunks used as context, in prompt order",
    )
