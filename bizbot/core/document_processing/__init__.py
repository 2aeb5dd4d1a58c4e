"""
Document processing pipeline for ingestion.

Extraction, contact card annotation, chunking, tagging, embedding and saving
of business documents.

Dependencies: pydantic, python-docx, openpyxl, xlrd
System role: Document ingestion pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import DocumentPipeline
from .models import FileProcessingSummary, FileStatus, IngestionReport, UploadedFile

__all__ = [
    "DocumentPipeline",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "UploadedFile",
    "FileStatus",
    "FileProcessingSummary",
    "IngestionReport",
]
