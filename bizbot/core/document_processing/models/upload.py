"""
Uploaded file descriptor.

Describes one file handed to the pipeline by the surrounding upload service.
Size and type allow-listing happen before the pipeline is invoked.

Dependencies: pydantic
System role: Pipeline input contract
"""

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """File already stored on local disk, ready for extraction."""

    path: str = Field(description="Local filesystem path of the upload")
    file_type: str = Field(description="Declared extension (pdf, csv, txt, docx, xlsx, xls)")
    original_name: str = Field(description="Filename as provided by the uploader")
    size_bytes: int = Field(default=0, ge=0, description="File size for document metadata")
