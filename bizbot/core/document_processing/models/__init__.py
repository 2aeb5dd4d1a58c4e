"""
Models for document processing pipeline.

Exports: ContactInfo, UploadedFile, ProcessedChunk, FileStatus,
FileProcessingSummary, IngestionReport
"""

from .chunk import ProcessedChunk
from .contact_info import ContactInfo
from .pipeline_result import FileProcessingSummary, FileStatus, IngestionReport
from .upload import UploadedFile

__all__ = [
    "ContactInfo",
    "UploadedFile",
    "ProcessedChunk",
    "FileStatus",
    "FileProcessingSummary",
    "IngestionReport",
]
