"""
Text extraction task.

Converts uploaded csv, txt, docx and xlsx/xls files into normalized plain
text annotated with a contact card. PDF extraction is deliberately not
implemented: a fixed placeholder asks the uploader to provide the content in
another format.

Dependencies: csv, python-docx, openpyxl, xlrd
System role: First stage of document ingestion pipeline
"""

import csv
import logging
import zipfile
from collections.abc import Callable
from pathlib import Path

import docx
import openpyxl
import xlrd
from docx.table import Table

from bizbot.core.exceptions import ExtractionError, UnsupportedFormatError

from .cleaning import clean_text
from .contact_card_task import append_contact_card

logger = logging.getLogger(__name__)

PDF_FILE_TYPE = "pdf"

PDF_PLACEHOLDER = (
    "PDF Content from {filename}\n\n"
    "This PDF file has been uploaded but text extraction is being processed. "
    "Please provide the key information from this PDF in the chat or upload "
    "as a text/word file for now."
)


def normalize_file_type(file_type: str) -> str:
    """Lowercase an extension and drop a leading dot (".XLSX" -> "xlsx")."""
    return (file_type or "").strip().lower().lstrip(".")


class ExtractionTask:
    """Extract plain text from uploaded files by declared extension."""

    def __init__(self) -> None:
        """Build the extension dispatch table."""
        self._extractors: dict[str, Callable[[Path, str], str]] = {
            "pdf": self._extract_pdf,
            "csv": self._extract_csv,
            "txt": self._extract_text,
            "plain": self._extract_text,
            "text": self._extract_text,
            "docx": self._extract_docx,
            "xlsx": self._extract_xlsx,
            "xls": self._extract_xls,
        }

    @property
    def supported_types(self) -> list[str]:
        return sorted(self._extractors)

    def supports(self, file_type: str) -> bool:
        return normalize_file_type(file_type) in self._extractors

    def extract(self, file_path: str, file_type: str, original_name: str) -> str:
        """
        Extract normalized text from a file.

        Args:
            file_path: Local path of the uploaded file
            file_type: Declared extension (with or without leading dot)
            original_name: Filename as provided by the uploader

        Returns:
            str: Cleaned text, without contact card

        Raises:
            UnsupportedFormatError: When no extractor handles the extension
            ExtractionError: When the file cannot be read
        """
        kind = normalize_file_type(file_type)
        extractor = self._extractors.get(kind)
        if extractor is None:
            logger.error(f"{__name__}:extract - Unsupported file type: {file_type}")
            raise UnsupportedFormatError(kind, original_name)

        path = Path(file_path)
        if kind != PDF_FILE_TYPE and not path.exists():
            raise ExtractionError(f"File not found: {file_path}", original_name, kind)

        logger.info(f"{__name__}:extract - Processing {original_name} as {kind}")
        try:
            raw = extractor(path, original_name)
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:extract - Failed to read {original_name}: {type(e).__name__}: {e}")
            raise ExtractionError(
                f"Failed to extract {kind} content: {e}", original_name, kind
            ) from e

        return clean_text(raw)

    def process_file(self, file_path: str, file_type: str, original_name: str) -> str:
        """
        Extract, clean and annotate a file with its contact card.

        Args:
            file_path: Local path of the uploaded file
            file_type: Declared extension
            original_name: Filename as provided by the uploader

        Returns:
            str: Processed document text

        Raises:
            UnsupportedFormatError: When no extractor handles the extension
            ExtractionError: When the file cannot be read
        """
        text = append_contact_card(self.extract(file_path, file_type, original_name))
        logger.info(f"{__name__}:process_file - {original_name} processed: {len(text)} characters")
        return text

    # ------------------------------------------------------------------
    # Extractors
    # ------------------------------------------------------------------

    def _extract_pdf(self, path: Path, original_name: str) -> str:
        # Real PDF parsing is not supported; the uploader re-sends as text/docx.
        logger.warning(f"{__name__}:_extract_pdf - Returning placeholder for {original_name}")
        return PDF_PLACEHOLDER.format(filename=original_name)

    # Undecodable bytes become U+FFFD instead of failing the upload
    def _extract_text(self, path: Path, original_name: str) -> str:
        return path.read_text(encoding="utf-8-sig", errors="replace")

    def _extract_csv(self, path: Path, original_name: str) -> str:
        with open(path, newline="", encoding="utf-8-sig", errors="replace") as f:
            reader = csv.DictReader(f)
            headers = [h for h in (reader.fieldnames or []) if h is not None]
            records = list(reader)

        lines = ["Data Summary:", "", f"Columns: {', '.join(headers)}", "", "Content:"]
        for index, row in enumerate(records, start=1):
            lines.append("")
            lines.append(f"Record {index}:")
            for key in headers:
                value = (row.get(key) or "").strip()
                if value:
                    lines.append(f"- {key}: {value}")

        logger.info(f"{__name__}:_extract_csv - {original_name}: {len(records)} records, {len(headers)} columns")
        return "\n".join(lines)

    def _extract_docx(self, path: Path, original_name: str) -> str:
        try:
            document = docx.Document(str(path))
        except (zipfile.BadZipFile, KeyError, ValueError) as e:
            raise ExtractionError(f"Invalid DOCX file: {e}", original_name, "docx") from e

        # Paragraphs and tables are emitted in body order
        parts = []
        for block in document.iter_inner_content():
            if isinstance(block, Table):
                for row in block.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        parts.append(" | ".join(cells))
            else:
                parts.append(block.text)
        return "\n".join(parts)

    def _extract_xlsx(self, path: Path, original_name: str) -> str:
        try:
            workbook = openpyxl.load_workbook(str(path), read_only=True, data_only=True)
        except (zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
            raise ExtractionError(f"Invalid XLSX file: {e}", original_name, "xlsx") from e

        try:
            sheets = [
                (sheet.title, sheet.iter_rows(values_only=True))
                for sheet in workbook.worksheets
            ]
            text = self._render_sheets(sheets)
        finally:
            workbook.close()

        logger.info(f"{__name__}:_extract_xlsx - {original_name}: {len(sheets)} sheets")
        return text

    def _extract_xls(self, path: Path, original_name: str) -> str:
        try:
            workbook = xlrd.open_workbook(str(path))
        except xlrd.XLRDError as e:
            raise ExtractionError(f"Invalid XLS file: {e}", original_name, "xls") from e

        sheets = []
        for sheet in workbook.sheets():
            rows = [sheet.row_values(index) for index in range(sheet.nrows)]
            sheets.append((sheet.name, rows))

        logger.info(f"{__name__}:_extract_xls - {original_name}: {len(sheets)} sheets")
        return self._render_sheets(sheets)

    @staticmethod
    def _render_sheets(sheets) -> str:
        """Render (sheet name, rows) pairs as banner + "Row N: a | b" lines."""
        lines = []
        for name, rows in sheets:
            lines.extend(["", "", f"Sheet: {name}", "=" * (len(name) + 7)])
            for index, row in enumerate(rows, start=1):
                cells = [
                    _format_cell(cell) for cell in row
                    if cell is not None and str(cell).strip()
                ]
                if cells:
                    lines.append(f"Row {index}: {' | '.join(cells)}")
        return "\n".join(lines)


def _format_cell(value) -> str:
    # xlrd returns every number as float
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
