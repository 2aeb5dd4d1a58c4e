"""
ORM models for the knowledge store.

Exports: BusinessModel, DocumentModel, ChunkModel
"""

from bizbot.boundary.db.models.business_model import BusinessModel
from bizbot.boundary.db.models.chunk_model import ChunkModel
from bizbot.boundary.db.models.document_model import DocumentModel

__all__ = ["BusinessModel", "DocumentModel", "ChunkModel"]
