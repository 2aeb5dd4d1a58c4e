"""
Document pipeline orchestrator.

Coordinates extraction, contact card annotation, chunking, tagging,
embedding and saving for uploaded files of one business.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import sys
import time

from bizbot.boundary.db.knowledge_store import KnowledgeStore
from bizbot.boundary.llm.providers import EmbeddingProvider
from bizbot.core.exceptions import DocumentProcessingError
from bizbot.observability import configure_logging, log_exception_with_context

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .models import FileProcessingSummary, FileStatus, ProcessedChunk, UploadedFile
from .tasks import (
    ChunkingTask,
    EmbeddingTask,
    ExtractionTask,
    SavingTask,
    categorize_content,
    extract_keywords,
)
from .tasks.extraction_task import PDF_FILE_TYPE, normalize_file_type

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: extract -> annotate -> chunk -> tag -> embed -> save."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        store: KnowledgeStore,
        settings: DocumentPipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedding_provider: Provider used to embed every chunk
            store: Knowledge store receiving documents and chunks
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or get_pipeline_settings()

        self._extraction_task = ExtractionTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
            max_chunks=self._settings.max_chunks_per_file,
        )
        self._embedding_task = EmbeddingTask(
            provider=embedding_provider,
            batch_size=self._settings.embedding_batch_size,
            timeout_seconds=self._settings.embedding_timeout_seconds,
            batch_delay_seconds=self._settings.batch_delay_seconds,
        )
        self._saving_task = SavingTask(store)

    async def process(self, business_id: str, upload: UploadedFile) -> FileProcessingSummary:
        """
        Process one uploaded file through the full pipeline.

        Extraction failures mark the file failed. Embedding failures are
        counted per chunk and never fail the file.

        Args:
            business_id: Owning business
            upload: Uploaded file descriptor

        Returns:
            FileProcessingSummary: Outcome and counts for this file

        Raises:
            PersistenceError: When the knowledge store rejects a write
        """
        start_time = time.perf_counter()
        logger.info(f"{__name__}:process - Processing {upload.original_name} for business {business_id}")

        try:
            text = await asyncio.to_thread(
                self._extraction_task.process_file,
                upload.path,
                upload.file_type,
                upload.original_name,
            )
        except DocumentProcessingError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - Extraction failed for {upload.original_name}",
                e,
                business_id=business_id,
                file_type=upload.file_type,
            )
            return FileProcessingSummary(
                filename=upload.original_name,
                status=FileStatus.FAILED,
                error=e.message,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        category = categorize_content(text, upload.original_name)
        document_id = await self._saving_task.save_document(business_id, upload, text, category)

        chunks, truncated = self._chunking_task.chunk(text)
        if truncated:
            logger.warning(
                f"{__name__}:process - {upload.original_name} capped at {self._settings.max_chunks_per_file} chunks"
            )

        tagged = [self._tag(index, content, upload.original_name) for index, content in enumerate(chunks)]
        embedded = await self._embedding_task.embed(tagged)
        chunk_ids = await self._saving_task.save_chunks(business_id, document_id, embedded)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        summary = FileProcessingSummary(
            filename=upload.original_name,
            status=FileStatus.COMPLETED,
            document_id=document_id,
            category=category,
            total_chunks=len(embedded),
            succeeded=len(chunk_ids),
            failed=len(embedded) - len(chunk_ids),
            truncated=truncated,
            placeholder=normalize_file_type(upload.file_type) == PDF_FILE_TYPE,
            processing_time_ms=elapsed_ms,
        )
        logger.info(
            f"{__name__}:process - Completed {upload.original_name}",
            extra={
                "document_id": document_id,
                "category": category,
                "total_chunks": summary.total_chunks,
                "failed_chunks": summary.failed,
                "processing_time_ms": round(elapsed_ms, 1),
            },
        )
        return summary

    async def process_batch(self, business_id: str, uploads: list[UploadedFile]) -> list[FileProcessingSummary]:
        """
        Process several files sequentially.

        Args:
            business_id: Owning business
            uploads: Uploaded files in upload order

        Returns:
            list[FileProcessingSummary]: One summary per file
        """
        return [await self.process(business_id, upload) for upload in uploads]

    def _tag(self, index: int, content: str, original_name: str) -> ProcessedChunk:
        return ProcessedChunk(
            index=index,
            content=content,
            category=categorize_content(content, original_name),
            keywords=extract_keywords(content, self._settings.keyword_limit),
        )


if __name__ == "__main__":
    from pathlib import Path

    from bizbot.boundary.db.memory_store import InMemoryKnowledgeStore
    from bizbot.boundary.llm import create_embedding_provider
    from bizbot.configs import get_settings

    async def _main(file_path: str) -> None:
        configure_logging(get_settings().log_level)
        store = InMemoryKnowledgeStore()
        business = await store.save_business(name="Local Test Business")
        pipeline = DocumentPipeline(create_embedding_provider(), store)
        path = Path(file_path)
        summary = await pipeline.process(
            business.id,
            UploadedFile(
                path=str(path),
                file_type=path.suffix,
                original_name=path.name,
                size_bytes=path.stat().st_size if path.exists() else 0,
            ),
        )
        print(summary.model_dump_json(indent=2))

    asyncio.run(_main(sys.argv[1] if len(sys.argv) > 1 else "business_info.txt"))
