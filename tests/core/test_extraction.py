"""
Tests for text extraction and cleaning.

Covers every supported format, the PDF placeholder, normalization of the
output and the error taxonomy for unsupported or malformed files.

Dependencies: pytest, python-docx, openpyxl
System role: Extractor verification
"""

from unittest.mock import MagicMock, patch

import docx
import openpyxl
import pytest

from bizbot.core.document_processing.tasks.cleaning import clean_text
from bizbot.core.document_processing.tasks.contact_card_task import CARD_START
from bizbot.core.document_processing.tasks.extraction_task import (
    ExtractionTask,
    normalize_file_type,
)
from bizbot.core.exceptions import ExtractionError, UnsupportedFormatError


@pytest.fixture
def extractor() -> ExtractionTask:
    return ExtractionTask()


def assert_normalized(text: str) -> None:
    assert "\r" not in text
    assert "\t" not in text
    assert "\n\n\n" not in text
    assert text == text.strip()


class TestCleanText:
    """Test suite for clean_text()."""

    def test_line_endings_become_newlines(self) -> None:
        """Should convert CRLF and CR to LF."""
        assert clean_text("a\r\nb\rc") == "a\nb\nc"

    def test_horizontal_whitespace_collapses(self) -> None:
        """Should collapse tabs, NBSP and space runs into one space."""
        assert clean_text("a\t\tb   c  d") == "a b c d"

    def test_trailing_spaces_and_blank_runs(self) -> None:
        """Should strip trailing spaces and collapse 3+ newlines to 2."""
        assert clean_text("  first   \n\n\n\n second  ") == "first\n\n second"

    def test_empty_input(self) -> None:
        """Should return empty string for None or empty text."""
        assert clean_text(None) == ""
        assert clean_text("") == ""


class TestNormalizeFileType:
    """Test suite for normalize_file_type()."""

    @pytest.mark.parametrize("raw,expected", [
        ("TXT", "txt"),
        (".docx", "docx"),
        (" .XLSX ", "xlsx"),
        ("csv", "csv"),
    ])
    def test_normalizes_extension(self, raw: str, expected: str) -> None:
        """Should lowercase and drop the leading dot."""
        assert normalize_file_type(raw) == expected


class TestTextExtraction:
    """Test suite for plain text files."""

    def test_txt_is_normalized(self, extractor, write_file) -> None:
        """Should return text without CR, tabs or 3+ blank lines."""
        path = write_file("notes.txt", "Welcome\r\n\r\n\r\n\r\nWe\tare   open\r\n")

        text = extractor.extract(str(path), "txt", "notes.txt")

        assert text == "Welcome\n\nWe are open"
        assert_normalized(text)

    def test_utf8_bom_is_ignored(self, extractor, write_file) -> None:
        """Should drop a UTF-8 byte order mark."""
        path = write_file("bom.txt", b"\xef\xbb\xbfHello")

        assert extractor.extract(str(path), "txt", "bom.txt") == "Hello"

    @pytest.mark.parametrize("alias", ["plain", "text", ".TXT"])
    def test_text_aliases(self, extractor, write_file, alias: str) -> None:
        """Should accept the plain/text aliases and any casing."""
        path = write_file("a.txt", "Hello")

        assert extractor.extract(str(path), alias, "a.txt") == "Hello"

    def test_invalid_utf8_is_replaced(self, extractor, write_file) -> None:
        """Should keep the readable text and replace undecodable bytes."""
        path = write_file("legacy.txt", b"Caf\xe9 open daily")

        text = extractor.extract(str(path), "txt", "legacy.txt")

        assert text == "Caf\ufffd open daily"

    def test_missing_file_raises_extraction_error(self, extractor, temp_dir) -> None:
        """Should raise ExtractionError when the path does not exist."""
        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(str(temp_dir / "missing.txt"), "txt", "missing.txt")

        assert exc_info.value.details["filename"] == "missing.txt"


class TestCsvExtraction:
    """Test suite for CSV files."""

    def test_csv_records_are_rendered(self, extractor, write_file) -> None:
        """Should render summary header, columns and one block per record."""
        path = write_file("menu.csv", "name,price\r\nBiryani,250\r\nNaan,\r\n")

        text = extractor.extract(str(path), "csv", "menu.csv")

        assert text.startswith("Data Summary:\n\nColumns: name, price\n\nContent:")
        assert "Record 1:\n- name: Biryani\n- price: 250" in text
        assert "Record 2:\n- name: Naan" in text
        assert text.count("- price:") == 1
        assert_normalized(text)

    def test_cp1252_csv_is_read(self, extractor, write_file) -> None:
        """Should not reject a CSV exported in a legacy encoding."""
        path = write_file("prices.csv", b"item,price\nCaf\xe9 latte,120\n")

        text = extractor.extract(str(path), "csv", "prices.csv")

        assert "- item: Caf\ufffd latte" in text
        assert "- price: 120" in text


class TestDocxExtraction:
    """Test suite for Word documents."""

    def test_paragraphs_and_tables(self, extractor, temp_dir) -> None:
        """Should keep paragraph text and join table cells with pipes."""
        document = docx.Document()
        document.add_paragraph("About Us")
        document.add_paragraph("We teach\tcoding.")
        table = document.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Course"
        table.rows[0].cells[1].text = "Fee"
        path = temp_dir / "about.docx"
        document.save(str(path))

        text = extractor.extract(str(path), "docx", "about.docx")

        assert "About Us\nWe teach coding." in text
        assert "Course | Fee" in text
        assert_normalized(text)

    def test_table_keeps_document_order(self, extractor, temp_dir) -> None:
        """Should emit a table between the paragraphs that surround it."""
        document = docx.Document()
        document.add_paragraph("PRICES")
        table = document.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Haircut"
        table.rows[0].cells[1].text = "Rs 300"
        document.add_paragraph("ABOUT US")
        document.add_paragraph("Family salon since 1990.")
        path = temp_dir / "salon.docx"
        document.save(str(path))

        text = extractor.extract(str(path), "docx", "salon.docx")

        assert text == "PRICES\nHaircut | Rs 300\nABOUT US\nFamily salon since 1990."

    def test_corrupt_docx_raises_extraction_error(self, extractor, write_file) -> None:
        """Should raise ExtractionError for a file that is not a DOCX package."""
        path = write_file("broken.docx", b"not a zip archive")

        with pytest.raises(ExtractionError):
            extractor.extract(str(path), "docx", "broken.docx")


class TestSpreadsheetExtraction:
    """Test suite for Excel workbooks."""

    def test_xlsx_sheets_and_rows(self, extractor, temp_dir) -> None:
        """Should render a banner per sheet and numbered non-empty rows."""
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.title = "Menu"
        sheet.append(["Item", "Price"])
        sheet.append(["Tea", 20])
        path = temp_dir / "menu.xlsx"
        workbook.save(str(path))

        text = extractor.extract(str(path), "xlsx", "menu.xlsx")

        assert text.startswith("Sheet: Menu\n" + "=" * 11)
        assert "Row 1: Item | Price" in text
        assert "Row 2: Tea | 20" in text
        assert_normalized(text)

    def test_xls_sheets_and_rows(self, extractor, write_file) -> None:
        """Should render legacy workbooks with whole numbers and no blank rows."""
        path = write_file("menu.xls", b"stub")
        rows = [["Item", "Price"], ["Tea", 20.0], ["", ""], ["Samosa", 12.5]]
        sheet = MagicMock()
        sheet.name = "Menu"
        sheet.nrows = len(rows)
        sheet.row_values.side_effect = lambda index: rows[index]
        book = MagicMock()
        book.sheets.return_value = [sheet]

        with patch(
            "bizbot.core.document_processing.tasks.extraction_task.xlrd.open_workbook",
            return_value=book,
        ) as mock_open:
            text = extractor.extract(str(path), "xls", "menu.xls")

        mock_open.assert_called_once_with(str(path))
        assert text.startswith("Sheet: Menu\n" + "=" * 11)
        assert "Row 1: Item | Price" in text
        assert "Row 2: Tea | 20" in text
        assert "Row 3" not in text
        assert "Row 4: Samosa | 12.5" in text
        assert_normalized(text)

    def test_corrupt_xls_raises_extraction_error(self, extractor, write_file) -> None:
        """Should raise ExtractionError for an unreadable workbook."""
        path = write_file("broken.xls", b"definitely not a workbook")

        with pytest.raises(ExtractionError):
            extractor.extract(str(path), "xls", "broken.xls")


class TestPdfPlaceholder:
    """Test suite for the PDF stub."""

    def test_pdf_returns_placeholder_naming_file(self, extractor, temp_dir) -> None:
        """Should return the placeholder even without reading the file."""
        text = extractor.extract(str(temp_dir / "brochure.pdf"), "pdf", "brochure.pdf")

        assert text.startswith("PDF Content from brochure.pdf")
        assert "upload as a text/word file" in text


class TestUnsupportedFormat:
    """Test suite for the dispatch default case."""

    def test_unknown_extension_raises(self, extractor, write_file) -> None:
        """Should raise UnsupportedFormatError carrying the file type."""
        path = write_file("tool.exe", b"MZ")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            extractor.extract(str(path), "exe", "tool.exe")

        assert exc_info.value.file_type == "exe"
        assert "Unsupported file type: exe" in str(exc_info.value)

    def test_supports(self, extractor) -> None:
        """Should report registered extensions only."""
        assert extractor.supports(".XLS")
        assert not extractor.supports("pptx")
        assert "pdf" in extractor.supported_types


class TestProcessFile:
    """Test suite for extract + contact card."""

    def test_contact_card_is_prepended(self, extractor, write_file) -> None:
        """Should prepend a contact card when contact details are present."""
        path = write_file("info.txt", "Contact\r\nPhone: 123-456-7890\r\nEmail: a@b.com\r\n")

        text = extractor.process_file(str(path), "txt", "info.txt")

        assert text.startswith(CARD_START)
        assert "Phone: 1234567890" in text
        assert "Email: a@b.com" in text
        assert_normalized(text)

    def test_text_without_contact_is_unchanged(self, extractor, write_file) -> None:
        """Should return the cleaned text when no contact details exist."""
        path = write_file("story.txt", "We bake bread every morning.")

        assert extractor.process_file(str(path), "txt", "story.txt") == "We bake bread every morning."
