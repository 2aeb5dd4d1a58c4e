"""
Dependency wiring.

Builds the services from settings with one shared store and one set of
provider clients.

Dependencies: bizbot.configs, bizbot.application.services, bizbot.boundary
System role: Construction of service instances
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from bizbot.application.services import ChatService, IngestionService
from bizbot.boundary.db.connection import create_tables, get_async_engine, get_async_session_factory
from bizbot.boundary.db.knowledge_store import KnowledgeStore, SqlAlchemyKnowledgeStore
from bizbot.boundary.llm.provider_factory import create_chat_provider, create_embedding_provider
from bizbot.boundary.llm.providers import ChatProvider, EmbeddingProvider
from bizbot.configs import Settings, get_settings
from bizbot.core.agentic_system.agent.chat_agent import ChatAgent
from bizbot.core.document_processing import DocumentPipeline
from bizbot.core.retriever import Retriever
from bizbot.observability import configure_logging


@dataclass
class Services:
    """Wired application services."""

    store: KnowledgeStore
    ingestion: IngestionService
    chat: ChatService


def build_services(
    store: KnowledgeStore,
    embedding_provider: EmbeddingProvider,
    chat_provider: ChatProvider,
    settings: Settings | None = None,
) -> Services:
    """
    Wire services around explicit collaborators.

    Args:
        store: Knowledge store shared by ingestion and chat
        embedding_provider: Provider for chunk and query embeddings
        chat_provider: Provider for completions
        settings: Application settings (cached settings if None)

    Returns:
        Services: Ingestion and chat services
    """
    settings = settings or get_settings()
    pipeline = DocumentPipeline(embedding_provider, store, settings.pipeline)
    retriever = Retriever(embedding_provider, store)
    agent = ChatAgent(chat_provider, history_window=settings.retrieval.history_window)
    return Services(
        store=store,
        ingestion=IngestionService(pipeline, store),
        chat=ChatService(store, retriever, agent, top_k=settings.retrieval.top_k),
    )


async def create_default_services(
    settings: Settings | None = None,
    engine: AsyncEngine | None = None,
) -> Services:
    """
    Build services backed by the configured database and model provider.

    Configures logging at the settings' log level and creates tables if
    missing.

    Args:
        settings: Application settings (cached settings if None)
        engine: Engine to use (created from settings if None)

    Returns:
        Services: Ingestion and chat services
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    engine = engine or get_async_engine(settings.database)
    await create_tables(engine)
    store = SqlAlchemyKnowledgeStore(get_async_session_factory(engine))
    return build_services(
        store,
        create_embedding_provider(settings.llm),
        create_chat_provider(settings.llm),
        settings,
    )
