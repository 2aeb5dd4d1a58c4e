"""
Ingestion service.

Runs every file uploaded for a business through the document pipeline, one
file after another, and aggregates the per-file summaries.

Dependencies: bizbot.core.document_processing, bizbot.boundary.db
System role: Ingestion orchestration layer
"""

import logging

from bizbot.boundary.db.knowledge_store import KnowledgeStore
from bizbot.core.document_processing import DocumentPipeline
from bizbot.core.document_processing.models import IngestionReport, UploadedFile
from bizbot.core.exceptions import BusinessNotFoundError

logger = logging.getLogger(__name__)


class IngestionService:
    """Turn uploaded files into a business's searchable knowledge."""

    def __init__(self, pipeline: DocumentPipeline, store: KnowledgeStore) -> None:
        """
        Initialize ingestion service.

        Args:
            pipeline: Document pipeline bound to the same store
            store: Knowledge store used to validate the business
        """
        self.pipeline = pipeline
        self.store = store

    async def ingest_files(self, business_id: str, uploads: list[UploadedFile]) -> IngestionReport:
        """
        Ingest uploaded files sequentially.

        A file that cannot be extracted is reported as failed and the next
        file continues. Chunk embedding failures only show up in the counts.

        Args:
            business_id: Owning business
            uploads: Uploaded files in upload order

        Returns:
            IngestionReport: One summary per file

        Raises:
            BusinessNotFoundError: If the business does not exist
            PersistenceError: If the knowledge store rejects a write
        """
        business = await self.store.get_business_by_id(business_id)
        if business is None:
            raise BusinessNotFoundError(business_id)

        summaries = await self.pipeline.process_batch(business_id, uploads)
        report = IngestionReport(business_id=business_id, files=summaries)

        logger.info(
            f"{__name__}:ingest_files - Ingested {len(uploads)} files for {business.name}",
            extra={
                "business_id": business_id,
                "files_failed": report.files_failed,
                "chunks_succeeded": report.chunks_succeeded,
                "chunks_failed": report.chunks_failed,
            },
        )
        return report
