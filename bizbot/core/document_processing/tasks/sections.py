"""
Section scanning over line-split text.

A section starts at a header match and runs until the next blank line or
the next ALL-CAPS header line. All functions are pure and work on explicit
line indices so they can be tested without real documents.

Dependencies: re
System role: Header/section heuristics for contact-card synthesis
"""

import re
from collections.abc import Sequence

_ALL_CAPS_HEADER = re.compile(r"^[A-Z0-9][A-Z0-9 /&+\-’'“”\"–—:()]+$")
_HAS_LETTER = re.compile(r"[A-Z]")


def is_all_caps_header(line: str) -> bool:
    """
    Check whether a line looks like an ALL-CAPS section header.

    Lines made only of digits and separators (bare phone numbers, years)
    are not headers.

    Args:
        line: Single line of text

    Returns:
        bool: True for lines such as "OPENING HOURS" or "CONTACT & LOCATION:"
    """
    stripped = line.strip()
    return bool(_ALL_CAPS_HEADER.match(stripped)) and bool(_HAS_LETTER.search(stripped))


def find_header(lines: Sequence[str], headers: Sequence[str]) -> tuple[int, int] | None:
    """
    Locate the first header variant present in the text.

    Variants are tried in the given order and matched case-insensitively as
    substrings, so more specific variants must come first.

    Args:
        lines: Text split on "\\n"
        headers: Header variants in priority order

    Returns:
        tuple[int, int] | None: (line index, column) of the match, None if absent
    """
    lowered = [line.lower() for line in lines]
    for header in headers:
        needle = header.lower()
        for index, line in enumerate(lowered):
            column = line.find(needle)
            if column != -1:
                return index, column
    return None


def section_end(lines: Sequence[str], start: int) -> int:
    """
    Find the exclusive end index of the section starting at line `start`.

    Args:
        lines: Text split on "\\n"
        start: Index of the header line

    Returns:
        int: Index of the first blank or ALL-CAPS header line after `start`,
            or len(lines) when the section runs to the end
    """
    for index in range(start + 1, len(lines)):
        stripped = lines[index].strip()
        if not stripped or is_all_caps_header(stripped):
            return index
    return len(lines)


def section_bounds(lines: Sequence[str], headers: Sequence[str]) -> tuple[int, int, int] | None:
    """
    Locate a section by its header variants.

    Returns:
        tuple[int, int, int] | None: (start line, header column, exclusive end line)
    """
    found = find_header(lines, headers)
    if found is None:
        return None
    start, column = found
    return start, column, section_end(lines, start)


def extract_section(text: str, headers: Sequence[str]) -> str:
    """
    Return the text of the section introduced by one of `headers`.

    The first line is cut at the header match; following lines are kept
    until the section ends.

    Args:
        text: Normalized document text
        headers: Header variants in priority order

    Returns:
        str: Section text, empty string if no header was found
    """
    lines = text.split("\n")
    bounds = section_bounds(lines, headers)
    if bounds is None:
        return ""
    start, column, end = bounds
    return "\n".join([lines[start][column:], *lines[start + 1:end]])
