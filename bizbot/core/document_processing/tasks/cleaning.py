"""
Text normalization applied to every extractor's output.

Dependencies: re
System role: Cleaner stage shared by all extractors
"""

import re

_HORIZONTAL_WS = re.compile(r"[ \t\f\v\u00a0]+")
_TRAILING_WS = re.compile(r" +\n")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def clean_text(text: str | None) -> str:
    """
    Normalize extracted text.

    Line endings become "\\n", runs of horizontal whitespace (tabs and
    non-breaking spaces included) become one space, trailing spaces are
    dropped, three or more newlines collapse to two, and the result is trimmed.

    Args:
        text: Raw extracted text

    Returns:
        str: Normalized text
    """
    if not text:
        return ""

    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = _HORIZONTAL_WS.sub(" ", cleaned)
    cleaned = _TRAILING_WS.sub("\n", cleaned)
    cleaned = _EXCESS_NEWLINES.sub("\n\n", cleaned)
    return cleaned.strip()
