"""
Contact card synthesis.

Scans normalized document text for phone, WhatsApp, email, address, website
and opening hours, and prepends a fixed-format contact card so that short
queries such as "contact" retrieve the curated details from the first chunk.

Dependencies: re, tasks.sections
System role: Annotation stage between extraction and chunking
"""

import logging
import re

from ..models import ContactInfo
from .sections import extract_section, section_bounds

logger = logging.getLogger(__name__)

CARD_START = "=== CONTACT_CARD ==="
CARD_END = "=== END_CONTACT_CARD ==="

CONTACT_HEADERS = (
    "CONTACT & LOCATION",
    "CONTACT & HOURS",
    "CONTACTS & HOURS",
    "CONTACT/HOURS",
    "CONTACT DETAILS",
    "CONTACT",
    "CONTACTS",
)

HOURS_HEADERS = (
    "OPERATING HOURS",
    "HOURS",
    "WORKING HOURS",
    "BUSINESS HOURS",
    "TIMINGS",
)

# (pattern, is_whatsapp_label); each pattern contributes its first match
PHONE_LABELS = (
    (re.compile(r"Phone\s*/\s*WhatsApp\s*:\s*([^\n]+)", re.IGNORECASE), True),
    (re.compile(r"Phone\s*&\s*WhatsApp\s*:\s*([^\n]+)", re.IGNORECASE), True),
    (re.compile(r"WhatsApp\s*:\s*([^\n]+)", re.IGNORECASE), True),
    (re.compile(r"Phone\s*:\s*([^\n]+)", re.IGNORECASE), False),
    (re.compile(r"Tel(?:ephone)?\s*:\s*([^\n]+)", re.IGNORECASE), False),
)

EMAIL_LABEL = re.compile(r"Email\s*:\s*(\S+)", re.IGNORECASE)
ADDRESS_LABEL = re.compile(r"Address\s*:\s*([^\n]+)", re.IGNORECASE)
WEBSITE_LABEL = re.compile(r"Website\s*:\s*([^\n]+)", re.IGNORECASE)

# Digit runs with separators; never crosses a line break
PHONE_CANDIDATE = re.compile(r"(\+?\d[\d \-()]{8,})")
MIN_PHONE_DIGITS = 10


def normalize_phone(raw: str) -> str:
    """
    Normalize a phone number to digits with an optional leading "+".

    Every character other than digits is dropped, except a "+" in first
    position. Leading zeros (trunk or international prefixes such as "0091")
    collapse into a leading "+".

    Args:
        raw: Phone number as written in the document

    Returns:
        str: Normalized number, e.g. "+919876543210"
    """
    kept = re.sub(r"[^+\d]", "", raw or "")
    kept = kept[:1] + kept[1:].replace("+", "")
    return re.sub(r"^\+?0+(\d)", r"+\1", kept)


def _digit_count(value: str) -> int:
    return sum(1 for char in value if char.isdigit())


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def extract_phones(source: str) -> list[str]:
    """
    Find phone-like digit runs in text.

    A candidate is accepted only with at least ten digits after
    normalization, which keeps prices and years out.

    Args:
        source: Text to scan

    Returns:
        list[str]: Unique normalized numbers in order of appearance
    """
    found = []
    for match in PHONE_CANDIDATE.finditer(source or ""):
        normalized = normalize_phone(match.group(1).strip())
        if _digit_count(normalized) >= MIN_PHONE_DIGITS:
            found.append(normalized)
    return _unique(found)


def _take(source: str, pattern: re.Pattern) -> str | None:
    match = pattern.search(source)
    return match.group(1).strip() if match else None


def _extract_hours(text: str) -> str | None:
    lines = text.split("\n")
    bounds = section_bounds(lines, HOURS_HEADERS)
    if bounds is None:
        return None
    start, column, end = bounds

    hours_lines = [line.strip() for line in lines[start + 1:end]]
    # "Hours: 9am - 6pm" keeps the value written on the header line
    _, colon, inline = lines[start][column:].partition(":")
    if colon and inline.strip():
        hours_lines.insert(0, inline.strip())

    hours = "\n".join(hours_lines).strip()
    return hours or None


def extract_contact_info(text: str | None) -> ContactInfo | None:
    """
    Extract contact details from document text.

    Labeled fields are searched inside the contact section first (the whole
    text when there is no contact header) and then in the whole text.
    Unlabeled phone numbers are only used when no labeled number exists.
    Opening hours come from their own section.

    Args:
        text: Normalized document text

    Returns:
        ContactInfo | None: Found fields, None when nothing was found
    """
    text = text or ""
    contact_block = extract_section(text, CONTACT_HEADERS) or text

    phones: list[str] = []
    whatsapp = None
    for pattern, is_whatsapp in PHONE_LABELS:
        raw = _take(contact_block, pattern)
        if raw is None:
            continue
        labeled = extract_phones(raw)
        phones.extend(labeled)
        if is_whatsapp and labeled:
            whatsapp = labeled[0]

    if not phones:
        phones = extract_phones(contact_block)
    if not phones:
        phones = extract_phones(text)

    info = ContactInfo(
        phones=_unique(phones),
        whatsapp=whatsapp,
        email=_take(contact_block, EMAIL_LABEL) or _take(text, EMAIL_LABEL),
        address=_take(contact_block, ADDRESS_LABEL) or _take(text, ADDRESS_LABEL),
        website=_take(contact_block, WEBSITE_LABEL) or _take(text, WEBSITE_LABEL),
        hours=_extract_hours(text),
    )

    if info.is_empty:
        logger.info(f"{__name__}:extract_contact_info - No contact info found")
        return None

    logger.info(
        f"{__name__}:extract_contact_info - Extracted contact info",
        extra={
            "phones": len(info.phones),
            "has_whatsapp": info.whatsapp is not None,
            "has_email": info.email is not None,
            "has_address": info.address is not None,
            "has_website": info.website is not None,
            "has_hours": info.hours is not None,
        },
    )
    return info


def render_contact_card(info: ContactInfo) -> str:
    """
    Render contact info as a sentinel-delimited card.

    Args:
        info: Non-empty contact info

    Returns:
        str: Card text, one labeled line per present field
    """
    lines = [CARD_START]
    if info.phones:
        lines.append(f"Phone: {', '.join(info.phones)}")
    if info.whatsapp:
        lines.append(f"WhatsApp: {info.whatsapp}")
    if info.email:
        lines.append(f"Email: {info.email}")
    if info.address:
        lines.append(f"Address: {info.address}")
    if info.website:
        lines.append(f"Website: {info.website}")
    if info.hours:
        lines.append(f"Hours:\n{info.hours}")
    lines.append(CARD_END)
    return "\n".join(lines)


def append_contact_card(text: str) -> str:
    """
    Prepend a contact card to the text when contact details are found.

    The card goes at the very top because chunking favours early text.
    Text that already starts with a card is returned unchanged.

    Args:
        text: Cleaned document text

    Returns:
        str: Text with the card prepended, or the input unchanged
    """
    if text.startswith(CARD_START):
        return text

    info = extract_contact_info(text)
    if info is None:
        return text
    return f"{render_contact_card(info)}\n\n{text}"
