"""
Pipeline result models for document ingestion.

Per-file summaries and the aggregated report for one business.

Dependencies: pydantic
System role: Return types for DocumentPipeline and IngestionService
"""

from enum import Enum

from pydantic import BaseModel, Field


class FileStatus(str, Enum):
    """Outcome of processing one uploaded file."""

    COMPLETED = "completed"
    FAILED = "failed"


class FileProcessingSummary(BaseModel):
    """Result of processing one file through the pipeline."""

    filename: str = Field(description="Original filename")
    status: FileStatus = Field(description="completed or failed")
    document_id: str | None = Field(default=None, description="Saved document id, None if extraction failed")
    category: str | None = Field(default=None, description="Document-level category")
    total_chunks: int = Field(default=0, description="Chunks scheduled for embedding (after the cap)")
    succeeded: int = Field(default=0, description="Chunks embedded and saved")
    failed: int = Field(default=0, description="Chunks whose embedding failed")
    truncated: bool = Field(default=False, description="True when the chunk cap dropped chunks")
    placeholder: bool = Field(default=False, description="True when the content is the PDF placeholder")
    error: str | None = Field(default=None, description="Failure message for failed files")
    processing_time_ms: float = Field(default=0.0, description="Wall time for this file")


class IngestionReport(BaseModel):
    """Result of ingesting all files uploaded for one business."""

    business_id: str
    files: list[FileProcessingSummary] = Field(default_factory=list)

    @property
    def files_failed(self) -> int:
        return sum(1 for f in self.files if f.status == FileStatus.FAILED)

    @property
    def chunks_succeeded(self) -> int:
        return sum(f.succeeded for f in self.files)

    @property
    def chunks_failed(self) -> int:
        return sum(f.failed for f in self.files)
