"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from bizbot.boundary.db.CRUD import business_crud, chunk_crud

    business = await business_crud.get_by_id(session, business_id)
"""

from bizbot.boundary.db.CRUD.base_crud import BaseCRUD
from bizbot.boundary.db.CRUD.business_crud import BusinessCRUD, business_crud
from bizbot.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from bizbot.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "BusinessCRUD",
    "DocumentCRUD",
    "ChunkCRUD",
    "business_crud",
    "document_crud",
    "chunk_crud",
]
