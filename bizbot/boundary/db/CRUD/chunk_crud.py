"""
Chunk CRUD operations.

Extends the base operations with the per-business scan used by retrieval.

Dependencies: sqlalchemy, bizbot.boundary.db.models.chunk_model
System role: Chunk persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizbot.boundary.db.CRUD.base_crud import BaseCRUD
from bizbot.boundary.db.models.chunk_model import ChunkModel
from bizbot.boundary.db.models.document_model import DocumentModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """CRUD operations for ChunkModel."""

    def __init__(self) -> None:
        super().__init__(ChunkModel)

    async def get_by_business_id(
        self,
        session: AsyncSession,
        business_id: UUID,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve every chunk of a business.

        Ordered by document upload time, then chunk index.

        Args:
            session: Async database session
            business_id: Owning business UUID

        Returns:
            Sequence of ChunkModels
        """
        stmt = (
            select(ChunkModel)
            .join(DocumentModel, ChunkModel.document_id == DocumentModel.id)
            .where(ChunkModel.business_id == business_id)
            .order_by(DocumentModel.created_at, ChunkModel.document_id, ChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


chunk_crud = ChunkCRUD()
