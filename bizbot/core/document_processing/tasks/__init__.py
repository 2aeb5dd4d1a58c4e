"""
Task modules for document processing pipeline.

Exports: ExtractionTask, ChunkingTask, EmbeddingTask, SavingTask and the
contact card, tagging and cleaning helpers
"""

from .chunking_task import ChunkingTask, chunk_text
from .cleaning import clean_text
from .contact_card_task import append_contact_card, extract_contact_info, render_contact_card
from .embedding_task import EmbeddingTask
from .extraction_task import ExtractionTask
from .saving_task import SavingTask
from .tagging_task import categorize_content, extract_keywords

__all__ = [
    "ExtractionTask",
    "ChunkingTask",
    "EmbeddingTask",
    "SavingTask",
    "chunk_text",
    "clean_text",
    "append_contact_card",
    "extract_contact_info",
    "render_contact_card",
    "categorize_content",
    "extract_keywords",
]
