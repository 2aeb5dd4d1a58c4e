"""
Database boundary layer: ORM models, CRUD operations, connection management
and the knowledge store adapters.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), create_tables(): Connection management
  - BusinessModel, DocumentModel, ChunkModel: ORM entities
  - KnowledgeStore, SqlAlchemyKnowledgeStore, InMemoryKnowledgeStore: Store adapters

Dependencies: sqlalchemy, bizbot.configs
System role: Persistent storage for businesses, documents and embedded chunks
"""

from bizbot.boundary.db.base import Base, TimestampMixin, UUIDMixin
from bizbot.boundary.db.connection import create_tables, get_async_engine, get_async_session_factory
from bizbot.boundary.db.knowledge_store import KnowledgeStore, SqlAlchemyKnowledgeStore
from bizbot.boundary.db.memory_store import InMemoryKnowledgeStore
from bizbot.boundary.db.models import BusinessModel, ChunkModel, DocumentModel

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_engine",
    "get_async_session_factory",
    "create_tables",
    "BusinessModel",
    "DocumentModel",
    "ChunkModel",
    "KnowledgeStore",
    "SqlAlchemyKnowledgeStore",
    "InMemoryKnowledgeStore",
]
