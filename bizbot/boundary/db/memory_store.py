"""
In-memory knowledge store.

Dict-backed KnowledgeStore for local runs and tests. Enforces the same
ownership rules as the database foreign keys.

Dependencies: None
System role: Lightweight persistence adapter
"""

import uuid

from bizbot.core.exceptions import PersistenceError
from bizbot.models import Business, StoredChunk


class InMemoryKnowledgeStore:
    """KnowledgeStore keeping everything in process memory."""

    def __init__(self) -> None:
        self._businesses: dict[str, Business] = {}
        self._documents: dict[str, dict] = {}
        self._chunks: dict[str, StoredChunk] = {}

    @property
    def documents(self) -> list[dict]:
        return list(self._documents.values())

    async def save_business(self, name: str, **fields: str | None) -> Business:
        business = Business(id=str(uuid.uuid4()), name=name, **fields)
        self._businesses[business.id] = business
        return business

    async def get_business_by_id(self, business_id: str) -> Business | None:
        return self._businesses.get(business_id)

    async def delete_business(self, business_id: str) -> bool:
        if self._businesses.pop(business_id, None) is None:
            return False
        self._documents = {
            key: doc for key, doc in self._documents.items() if doc["business_id"] != business_id
        }
        self._chunks = {
            key: chunk for key, chunk in self._chunks.items() if chunk.business_id != business_id
        }
        return True

    async def save_document(
        self,
        business_id: str,
        original_name: str,
        file_type: str,
        size_bytes: int,
        content: str,
        category: str,
    ) -> str:
        if business_id not in self._businesses:
            raise PersistenceError(f"Unknown business: {business_id}", operation="save_document")
        document_id = str(uuid.uuid4())
        self._documents[document_id] = {
            "id": document_id,
            "business_id": business_id,
            "original_name": original_name,
            "file_type": file_type,
            "size_bytes": size_bytes,
            "content": content,
            "category": category,
        }
        return document_id

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
        document = self._documents.get(document_id)
        if document is None or document["business_id"] != business_id:
            raise PersistenceError(f"Unknown document: {document_id}", operation="save_chunk")
        chunk = StoredChunk(
            id=str(uuid.uuid4()),
            business_id=business_id,
            document_id=document_id,
            chunk_index=chunk_index,
            content=content,
            embedding=embedding,
            category=category,
            keywords=keywords,
        )
        self._chunks[chunk.id] = chunk
        return chunk.id

    async def get_chunks_for_business(self, business_id: str) -> list[StoredChunk]:
        # dicts keep insertion order, which is document order
        return [chunk for chunk in self._chunks.values() if chunk.business_id == business_id]
