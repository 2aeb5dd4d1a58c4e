"""
Tests for section scanning and contact card synthesis.

Dependencies: pytest
System role: Contact card heuristics verification
"""

import pytest

from bizbot.core.document_processing.models import ContactInfo
from bizbot.core.document_processing.tasks.contact_card_task import (
    CARD_END,
    CARD_START,
    append_contact_card,
    extract_contact_info,
    extract_phones,
    normalize_phone,
    render_contact_card,
)
from bizbot.core.document_processing.tasks.sections import (
    extract_section,
    find_header,
    is_all_caps_header,
    section_end,
)


class TestSectionScanning:
    """Test suite for the pure line functions."""

    @pytest.mark.parametrize("line,expected", [
        ("MENU", True),
        ("CONTACT & LOCATION:", True),
        ("  OPENING HOURS  ", True),
        ("Menu", False),
        ("2024", False),
        ("+91 98765 43210", False),
        ("", False),
    ])
    def test_is_all_caps_header(self, line: str, expected: bool) -> None:
        """Should accept upper-case header lines that contain a letter."""
        assert is_all_caps_header(line) is expected

    def test_find_header_prefers_earlier_variant(self) -> None:
        """Should try variants in order before scanning lines."""
        lines = ["Contact us anytime", "CONTACT DETAILS", "Phone: 1"]

        assert find_header(lines, ("CONTACT DETAILS", "CONTACT")) == (1, 0)
        assert find_header(lines, ("CONTACT", "CONTACT DETAILS")) == (0, 0)

    def test_find_header_returns_column(self) -> None:
        """Should report the column where the header starts."""
        assert find_header(["Our Business Hours"], ("HOURS",)) == (0, 13)

    def test_find_header_missing(self) -> None:
        """Should return None when no variant is present."""
        assert find_header(["nothing here"], ("CONTACT",)) is None

    def test_section_end_stops_at_blank_or_header(self) -> None:
        """Should end at the first blank line or ALL-CAPS header."""
        assert section_end(["HEAD", "a", "b", "", "c"], 0) == 3
        assert section_end(["HEAD", "a", "NEXT", "c"], 0) == 2
        assert section_end(["HEAD", "a", "b"], 0) == 3

    def test_extract_section_cuts_first_line_at_header(self) -> None:
        """Should start at the header column and keep following lines."""
        text = "Visit: CONTACT\nPhone: 1\n\nOther"

        assert extract_section(text, ("CONTACT",)) == "CONTACT\nPhone: 1"

    def test_extract_section_missing_header(self) -> None:
        """Should return empty string when no header exists."""
        assert extract_section("just text", ("CONTACT",)) == ""


class TestPhoneNormalization:
    """Test suite for phone helpers."""

    @pytest.mark.parametrize("raw,expected", [
        ("+91-98765-43210", "+919876543210"),
        ("(080) 4567 8901", "+8045678901"),
        ("0091 98765 43210", "+919876543210"),
        ("98765 43210", "9876543210"),
        ("+1 (555) 123-4567", "+15551234567"),
    ])
    def test_normalize_phone(self, raw: str, expected: str) -> None:
        """Should keep digits and a leading plus, folding leading zeros into it."""
        assert normalize_phone(raw) == expected

    def test_short_numbers_are_ignored(self) -> None:
        """Should skip prices and years."""
        assert extract_phones("Price 250, since 1998, call 12345") == []

    def test_phones_are_unique_in_order(self) -> None:
        """Should return each normalized number once."""
        text = "Call 98765 43210 or +1 555 123 4567 or 98765-43210"

        assert extract_phones(text) == ["9876543210", "+15551234567"]

    def test_candidates_do_not_cross_lines(self) -> None:
        """Should not join digit runs across a line break."""
        assert extract_phones("Room 12345\n67890 guests") == []


class TestExtractContactInfo:
    """Test suite for extract_contact_info()."""

    def test_phone_in_contact_section(self) -> None:
        """Should find the labeled phone inside a CONTACT section."""
        text = "ABOUT\nWe cook.\n\nCONTACT\nPhone: +91-98765-43210\nEmail: info@spice.in\n\nMENU\nDal"

        info = extract_contact_info(text)

        assert info is not None
        assert "+919876543210" in info.phones
        assert info.email == "info@spice.in"

    def test_no_contact_fields_returns_none(self) -> None:
        """Should return None for text without contact-like fields."""
        assert extract_contact_info("We serve fresh food every day.") is None
        assert extract_contact_info("") is None

    def test_whatsapp_label_sets_whatsapp(self) -> None:
        """Should record WhatsApp-labelled numbers as whatsapp too."""
        info = extract_contact_info("CONTACT\nPhone/WhatsApp: 98765 43210")

        assert info.phones == ["9876543210"]
        assert info.whatsapp == "9876543210"

    def test_labels_outside_section_fall_back_to_whole_text(self) -> None:
        """Should search the whole text when the section lacks a field."""
        text = "CONTACT\nPhone: 98765 43210\n\nWebsite: https://example.com\nAddress: 1 Main St"

        info = extract_contact_info(text)

        assert info.website == "https://example.com"
        assert info.address == "1 Main St"

    def test_unlabeled_phone_is_found_by_loose_scan(self) -> None:
        """Should scan for digit runs when no label matched."""
        info = extract_contact_info("Reach us on 98765 43210 any day")

        assert info.phones == ["9876543210"]

    def test_hours_section(self) -> None:
        """Should collect the lines under an hours header."""
        text = "BUSINESS HOURS\nMon-Fri: 9am - 6pm\nSat: 10am - 2pm\n\nMENU\nTea"

        info = extract_contact_info(text)

        assert info.hours == "Mon-Fri: 9am - 6pm\nSat: 10am - 2pm"

    def test_inline_hours_on_header_line(self) -> None:
        """Should keep the value written after the colon on the header line."""
        info = extract_contact_info("Hours: 9am to 6pm daily\n\nWelcome")

        assert info.hours == "9am to 6pm daily"


class TestContactCard:
    """Test suite for card rendering and annotation."""

    def test_render_contact_card(self) -> None:
        """Should render present fields only, phones comma-joined."""
        info = ContactInfo(
            phones=["+919876543210", "+15551234567"],
            email="a@b.com",
            hours="Mon 9-5\nTue 9-5",
        )

        assert render_contact_card(info) == (
            f"{CARD_START}\n"
            "Phone: +919876543210, +15551234567\n"
            "Email: a@b.com\n"
            "Hours:\nMon 9-5\nTue 9-5\n"
            f"{CARD_END}"
        )

    def test_card_is_prepended_with_blank_line(self) -> None:
        """Should put the card at the very top, followed by a blank line."""
        text = "Contact\nPhone: 123-456-7890\nEmail: a@b.com"

        annotated = append_contact_card(text)

        assert annotated.startswith(CARD_START)
        assert annotated.endswith(f"{CARD_END}\n\n{text}")
        assert annotated.count(CARD_START) == 1
        assert "Phone: 1234567890" in annotated
        assert "Email: a@b.com" in annotated

    def test_no_contact_is_noop(self) -> None:
        """Should return the input unchanged when nothing was found."""
        text = "Our story began in 1998."

        assert append_contact_card(text) == text

    def test_annotating_twice_is_idempotent(self) -> None:
        """Should not add a second card to annotated text."""
        once = append_contact_card("CONTACT\nEmail: a@b.com")

        assert append_contact_card(once) == once
