"""
Model provider interfaces.

The core depends only on these protocols so tests can substitute
deterministic fakes for the embedding and chat services.

Dependencies: typing.Protocol, bizbot.models
System role: Provider contracts consumed by pipeline, retriever and chat agent
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bizbot.models.chat import ChatTurn


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Turns text into a fixed-length vector."""

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Raises:
            EmbeddingError: On provider failure (auth, quota, rate limit, ...)
        """
        ...


@runtime_checkable
class ChatProvider(Protocol):
    """Produces a completion for a system prompt, history and user message."""

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ChatTurn],
        user_message: str,
    ) -> str:
        """
        Generate the assistant reply.

        Raises:
            ResponseGenerationError: On provider failure
        """
        ...
