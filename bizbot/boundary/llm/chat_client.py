"""
LangChain chat adapter.

Converts conversation turns into LangChain messages and calls the chat
model asynchronously. Sampling temperature and output-token limit are set
on the model when it is constructed.

Dependencies: langchain_core
System role: Chat completion adapter
"""

import logging
from collections.abc import Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from bizbot.core.exceptions import ResponseGenerationError
from bizbot.models.chat import ChatTurn

logger = logging.getLogger(__name__)


def to_messages(
    system_prompt: str,
    history: Sequence[ChatTurn],
    user_message: str,
) -> list[BaseMessage]:
    """Build the LangChain message list: system, history turns, current message."""
    messages: list[BaseMessage] = [SystemMessage(content=system_prompt)]
    for turn in history:
        if turn.role == "assistant":
            messages.append(AIMessage(content=turn.content))
        else:
            messages.append(HumanMessage(content=turn.content))
    messages.append(HumanMessage(content=user_message))
    return messages


def _message_text(content) -> str:
    # Gemini may return a list of content parts instead of a string
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class LangChainChatProvider:
    """ChatProvider backed by a LangChain chat model."""

    def __init__(self, model: BaseChatModel, model_name: str = "") -> None:
        """
        Initialize adapter.

        Args:
            model: LangChain chat model, constructed once and reused
            model_name: Model identifier used in log messages
        """
        self._model = model
        self._model_name = model_name

    async def complete(
        self,
        system_prompt: str,
        history: Sequence[ChatTurn],
        user_message: str,
    ) -> str:
        """
        Generate a completion.

        Args:
            system_prompt: Fully composed system prompt
            history: Previous turns, oldest first
            user_message: Current user message

        Returns:
            str: Completion text (may be empty)

        Raises:
            ResponseGenerationError: When the provider call fails
        """
        messages = to_messages(system_prompt, history, user_message)
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            error = ResponseGenerationError(
                f"Chat completion failed: {e}",
                details={"model": self._model_name},
            )
            logger.error(f"{__name__}:complete - {error.reason} failure: {type(e).__name__}: {e}")
            raise error from e
        return _message_text(response.content).strip()
