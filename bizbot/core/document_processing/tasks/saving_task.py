"""
Knowledge store persistence task.

Saves the processed document and its successfully embedded chunks.

Dependencies: bizbot.boundary.db.knowledge_store
System role: Final stage of document ingestion pipeline
"""

import logging

from bizbot.boundary.db.knowledge_store import KnowledgeStore

from ..models import ProcessedChunk, UploadedFile
from .extraction_task import normalize_file_type

logger = logging.getLogger(__name__)


class SavingTask:
    """Persist documents and chunks through the knowledge store."""

    def __init__(self, store: KnowledgeStore) -> None:
        self._store = store

    async def save_document(
        self,
        business_id: str,
        upload: UploadedFile,
        content: str,
        category: str,
    ) -> str:
        """
        Save the processed document text.

        Args:
            business_id: Owning business
            upload: Uploaded file descriptor
            content: Processed text (contact card included)
            category: Document-level category

        Returns:
            str: Document ID

        Raises:
            PersistenceError: When the store rejects the write
        """
        document_id = await self._store.save_document(
            business_id=business_id,
            original_name=upload.original_name,
            file_type=normalize_file_type(upload.file_type),
            size_bytes=upload.size_bytes,
            content=content,
            category=category,
        )
        logger.info(f"{__name__}:save_document - Saved {upload.original_name} as {document_id}")
        return document_id

    async def save_chunks(
        self,
        business_id: str,
        document_id: str,
        chunks: list[ProcessedChunk],
    ) -> list[str]:
        """
        Save embedded chunks; failed chunks are skipped.

        Chunks keep their production index, so a failed chunk leaves a gap.

        Args:
            business_id: Owning business
            document_id: Parent document
            chunks: Chunks after the embedding stage

        Returns:
            list[str]: IDs of saved chunks in document order

        Raises:
            PersistenceError: When the store rejects a write
        """
        chunk_ids = []
        for chunk in chunks:
            if not chunk.embedded:
                continue
            chunk_id = await self._store.save_chunk(
                business_id=business_id,
                document_id=document_id,
                chunk_index=chunk.index,
                content=chunk.content,
                embedding=chunk.embedding,
                category=chunk.category,
                keywords=chunk.keywords,
            )
            chunk_ids.append(chunk_id)

        logger.info(f"{__name__}:save_chunks - Saved {len(chunk_ids)} chunks for document {document_id}")
        return chunk_ids
