"""
Knowledge store.

The persistence collaborator of the pipeline and the retriever: save
businesses, documents and chunks, and read them back per business. Every
write runs in its own transaction.

Dependencies: sqlalchemy, bizbot.boundary.db.CRUD
System role: Persistence adapter between core and database
"""

import logging
import uuid
from typing import Protocol, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from bizbot.boundary.db.CRUD import business_crud, chunk_crud, document_crud
from bizbot.boundary.db.models import BusinessModel, ChunkModel
from bizbot.core.exceptions import PersistenceError
from bizbot.models import Business, StoredChunk

logger = logging.getLogger(__name__)


@runtime_checkable
class KnowledgeStore(Protocol):
    """Persistence operations used by ingestion and retrieval."""

    async def save_business(self, name: str, **fields: str | None) -> Business:
        ...

    async def get_business_by_id(self, business_id: str) -> Business | None:
        ...

    async def save_document(
        self,
        business_id: str,
        original_name: str,
        file_type: str,
        size_bytes: int,
        content: str,
        category: str,
    ) -> str:
        ...

    async def save_chunk(
        self,
        business_id: str,
        document_id: str,
        chunk_index: int,
        content: str,
        embedding: list[float] | None,
        category: str,
        keywords: str,
    ) -> str:
        ...

    async def get_chunks_for_business(self, business_id: str) -> list[StoredChunk]:
        ...


def _parse_id(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _require_id(value: str, operation: str, field: str) -> uuid.UUID:
    parsed = _parse_id(value)
    if parsed is None:
        raise PersistenceError(f"Invalid {field}: {value}", operation=operation)
    return parsed


def business_from_model(model: BusinessModel) -> Business:
    return Business(
        id=str(model.id),
        name=model.name,
        description=model.description,
        phone=model.phone,
        whatsapp=model.whatsapp,
        email=model.email,
        address=model.address,
        website=model.website,
        hours=model.hours,
    )


def chunk_from_model(model: ChunkModel) -> StoredChunk:
    return StoredChunk(
        id=str(model.id),
        business_id=str(model.business_id),
        document_id=str(model.document_id),
        chunk_index=model.chunk_index,
        content=model.content,
        embedding=model.embedding,
        category=model.category,
        keywords=model.keywords,
    )


class SqlAlchemyKnowledgeStore:
    """KnowledgeStore over async SQLAlchemy sessions."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize store.

        Args:
            session_factory: Factory producing AsyncSession instances
        """
        self._session_factory = session_factory

    async def save_business(self, name: str, **fields: str | None) -> Business:
        """
        Create a business record.

        Raises:
            PersistenceError: When the insert fails
        """
        try:
            async with self._session_factory() as session:
                model = await business_crud.create(session, name=name, **fields)
                await session.commit()
                return business_from_model(model)
        except SQLAlchemyError as e:
            raise self._wrap(e, "save_business") from e

    async def get_business_by_id(self, business_id: str) -> Business | None:
        """
        Load a business.

        Returns:
            Business | None: None when the id is unknown or malformed

        Raises:
            PersistenceError: When the query fails
        """
        parsed = _parse_id(business_id)
        if parsed is None:
            return None
        try:
            async with self._session_factory() as session:
                model = await business_crud.get_by_id(session, parsed)
                return business_from_model(model) if model else None
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_business_by_id") from e

    async def delete_business(self, business_id: str) -> bool:
        """
        Delete a business with its documents and chunks.

        Returns:
            bool: False when the business does not exist

        Raises:
            PersistenceError: When the delete fails
        """
        parsed = _parse_id(business_id)
        if parsed is None:
            return False
        try:
            async with self._session_factory() as session:
                deleted = await business_crud.delete_by_id(session, parsed)
                await session.commit()
                return deleted
        except SQLAlchemyError as e:
            raise self._wrap(e, "delete_business") from e

    async def save_document(
        self,
        business_id: str,
        original_name: str,
        file_type: str,
        size_bytes: int,
        content: str,
        category: str,
    ) -> str:
        """
        Save a processed document.

        Returns:
            str: Document ID

        Raises:
            PersistenceError: When the business id is malformed or the insert fails
        """
        owner = _require_id(business_id, "save_document", "business_id")
        try:
            async with self._session_factory() as session:
                model = await document_crud.create(
                    session,
                    business_id=owner,
                    original_name=original_name,
                    file_type=file_type,
                    size_bytes=size_bytes,
                    content=content,
                    category=category,
                )
                await session.commit()
                return str(model.id)
        except SQLAlchemyError as e:
            raise self._wrap(e, "save_document") from e

    async def save_chunk(
        self,
        business_id: str,
        document_id: str,
        chunk_index: int,
        content: str,
        embedding: list[float] | None,
        category: str,
        keywords: str,
    ) -> str:
        """
        Save an embedded chunk.

        Returns:
            str: Chunk ID

        Raises:
            PersistenceError: When an id is malformed, the document belongs to
                another business or the insert fails
        """
        owner = _require_id(business_id, "save_chunk", "business_id")
        parent = _require_id(document_id, "save_chunk", "document_id")
        try:
            async with self._session_factory() as session:
                document = await document_crud.get_by_id(session, parent)
                if document is None or document.business_id != owner:
                    logger.error(
                        f"{__name__}:save_chunk - Document {document_id} not owned by business {business_id}"
                    )
                    raise PersistenceError(f"Unknown document: {document_id}", operation="save_chunk")
                model = await chunk_crud.create(
                    session,
                    business_id=owner,
                    document_id=parent,
                    chunk_index=chunk_index,
                    content=content,
                    embedding=embedding,
                    category=category,
                    keywords=keywords,
                )
                await session.commit()
                return str(model.id)
        except SQLAlchemyError as e:
            raise self._wrap(e, "save_chunk") from e

    async def get_chunks_for_business(self, business_id: str) -> list[StoredChunk]:
        """
        Load every chunk of a business.

        Returns:
            list[StoredChunk]: Chunks in document order; empty for unknown ids

        Raises:
            PersistenceError: When the query fails
        """
        parsed = _parse_id(business_id)
        if parsed is None:
            return []
        try:
            async with self._session_factory() as session:
                models = await chunk_crud.get_by_business_id(session, parsed)
                return [chunk_from_model(model) for model in models]
        except SQLAlchemyError as e:
            raise self._wrap(e, "get_chunks_for_business") from e

    @staticmethod
    def _wrap(error: SQLAlchemyError, operation: str) -> PersistenceError:
        logger.error(f"{__name__}:{operation} - {type(error).__name__}: {error}")
        return PersistenceError(
            f"Knowledge store operation failed: {type(error).__name__}",
            operation=operation,
            details={"error": str(error)},
        )
