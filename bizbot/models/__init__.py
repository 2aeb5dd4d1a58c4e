"""
Domain models shared across the application.

Exports: Business, StoredChunk, ScoredChunk, ChatTurn, ChatReply
"""

from bizbot.models.business import Business
from bizbot.models.chat import ChatReply, ChatTurn
from bizbot.models.chunk import ScoredChunk, StoredChunk

__all__ = [
    "Business",
    "StoredChunk",
    "ScoredChunk",
    "ChatTurn",
    "ChatReply",
]
