"""
Document CRUD operations.

Extends the base operations with per-business listing.

Dependencies: sqlalchemy, bizbot.boundary.db.models.document_model
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizbot.boundary.db.CRUD.base_crud import BaseCRUD
from bizbot.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def get_by_business_id(
        self,
        session: AsyncSession,
        business_id: UUID,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve all documents of a business in upload order.

        Args:
            session: Async database session
            business_id: Owning business UUID

        Returns:
            Sequence of DocumentModels
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.business_id == business_id)
            .order_by(DocumentModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


document_crud = DocumentCRUD()
