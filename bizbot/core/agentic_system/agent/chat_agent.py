"""
Business chat agent.

Composes the grounded prompt from the business record, retrieved chunks and
recent history, and asks the chat provider for a reply. Provider failures
never reach the caller: they are logged and replaced by a fixed apology.

Dependencies: bizbot.boundary.llm.providers
System role: Response composition for chat replies
"""

import logging
from collections.abc import Sequence

from bizbot.boundary.llm.providers import ChatProvider
from bizbot.core.agentic_system.agent.chat_agent_prompt import (
    build_context,
    build_system_prompt,
    ensure_contact_in_context,
)
from bizbot.core.exceptions import ResponseGenerationError
from bizbot.models import Business, ChatTurn, ScoredChunk, StoredChunk

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_FALLBACK = "I apologize, but I had trouble generating a response. Please try again."
ERROR_RESPONSE_FALLBACK = (
    "I apologize, but I'm experiencing technical difficulties. Please try again in a moment."
)


class ChatAgent:
    """Grounded answer generation for one business."""

    def __init__(self, chat_provider: ChatProvider, history_window: int = 6) -> None:
        """
        Initialize agent.

        Args:
            chat_provider: Provider producing completions
            history_window: Number of most recent turns sent with the prompt
        """
        self._chat_provider = chat_provider
        self.history_window = history_window

    def compose(
        self,
        business: Business,
        query: str,
        chunks: Sequence[ScoredChunk | StoredChunk] = (),
    ) -> str:
        """Build the system prompt for a query and its retrieved chunks."""
        context = build_context([chunk.content for chunk in chunks])
        context = ensure_contact_in_context(context, business, query)
        return build_system_prompt(business, context)

    async def generate_response(
        self,
        business: Business,
        query: str,
        history: Sequence[ChatTurn] = (),
        chunks: Sequence[ScoredChunk | StoredChunk] = (),
    ) -> str:
        """
        Generate the reply to a user message.

        Args:
            business: Business record
            query: Current user message
            history: Conversation so far, oldest first
            chunks: Retrieved chunks in rank order

        Returns:
            str: Assistant reply, or a fixed apology when generation fails
        """
        system_prompt = self.compose(business, query, chunks)
        recent = list(history)[-self.history_window:] if self.history_window > 0 else []

        try:
            answer = await self._chat_provider.complete(system_prompt, recent, query)
        except ResponseGenerationError as e:
            logger.error(f"{__name__}:generate_response - {e.reason} failure: {e.message}")
            return ERROR_RESPONSE_FALLBACK
        except Exception as e:
            logger.error(f"{__name__}:generate_response - {type(e).__name__}: {e}")
            return ERROR_RESPONSE_FALLBACK

        if not answer or not answer.strip():
            logger.warning(f"{__name__}:generate_response - Empty completion")
            return EMPTY_RESPONSE_FALLBACK
        return answer
