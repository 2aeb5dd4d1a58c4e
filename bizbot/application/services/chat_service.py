"""
Chat service for grounded business Q&A.

Orchestrates the chat flow: business lookup, retrieval, intent analysis and
response generation.

Dependencies: bizbot.core.retriever, bizbot.core.agentic_system, bizbot.core.intent
System role: Chat service orchestration layer
"""

import logging
from collections.abc import Sequence

from bizbot.boundary.db.knowledge_store import KnowledgeStore
from bizbot.core.agentic_system.agent.chat_agent import ChatAgent
from bizbot.core.exceptions import BizBotException, BusinessNotFoundError
from bizbot.core.intent import analyze_intent, analyze_sentiment, should_show_contact_form
from bizbot.core.retriever import Retriever
from bizbot.models import ChatReply, ChatTurn, ScoredChunk

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for business Q&A.

    Coordinates business validation, retrieval and the chat agent for one
    message at a time. Conversation history is owned by the caller.
    """

    def __init__(
        self,
        store: KnowledgeStore,
        retriever: Retriever,
        agent: ChatAgent,
        top_k: int = 6,
    ) -> None:
        """
        Initialize chat service.

        Args:
            store: Knowledge store for the business record
            retriever: Retrieval engine
            agent: Chat agent producing the answer
            top_k: Number of chunks retrieved per message
        """
        self.store = store
        self.retriever = retriever
        self.agent = agent
        self.top_k = top_k

    async def reply(
        self,
        business_id: str,
        message: str,
        history: Sequence[ChatTurn] = (),
    ) -> ChatReply:
        """
        Answer a user message.

        Flow:
        1. Validate business exists
        2. Retrieve relevant chunks (empty on retrieval failure)
        3. Label intent and sentiment
        4. Generate the grounded answer

        Args:
            business_id: Business the visitor is chatting with
            message: User message
            history: Previous turns, oldest first

        Returns:
            ChatReply: Answer with intent, sentiment and retrieved chunk ids

        Raises:
            BusinessNotFoundError: If the business does not exist
        """
        business = await self.store.get_business_by_id(business_id)
        if business is None:
            raise BusinessNotFoundError(business_id)

        chunks: list[ScoredChunk] = []
        try:
            chunks = await self.retriever.retrieve(business_id, message, top_k=self.top_k)
        except BizBotException as e:
            logger.error(f"{__name__}:reply - Retrieval failed, answering without context: {e}")

        intent = analyze_intent(message)
        answer = await self.agent.generate_response(business, message, history, chunks)

        return ChatReply(
            answer=answer,
            intent=intent,
            sentiment=analyze_sentiment(message),
            show_contact_form=should_show_contact_form(intent, message),
            retrieved_chunk_ids=[chunk.id for chunk in chunks],
        )
