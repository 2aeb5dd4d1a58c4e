"""
Text chunking task.

Splits document text into overlapping windows that end on paragraph,
sentence or line boundaries where possible, so a fact split across a
boundary is still retrievable from at least one chunk.

Dependencies: None
System role: Second stage of document ingestion pipeline
"""

BREAK_MARKERS = ("\n\n", ".", "\n")


def _find_break(text: str, start: int, end: int) -> int:
    """Return the index of the latest break marker inside text[start:end], or -1."""
    return max(text.rfind(marker, start, end) for marker in BREAK_MARKERS)


def chunk_text(text: str, max_length: int = 1000, overlap: int = 200) -> list[str]:
    """
    Split text into overlapping chunks.

    Each window takes up to `max_length` characters. When the window stops
    short of the end of the text it is cut just after the latest paragraph
    break, full stop or newline inside it, unless that break lies in the
    first half of the window. The next window starts `overlap` characters
    before the cut and always at least one character after the previous start.

    Args:
        text: Text to split
        max_length: Maximum characters per chunk
        overlap: Characters shared between consecutive windows

    Returns:
        list[str]: Stripped, non-empty chunks in document order

    Raises:
        ValueError: When max_length is not positive or overlap is negative
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    if overlap < 0:
        raise ValueError("overlap cannot be negative")

    if not text:
        return []
    if len(text) <= max_length:
        return [text]

    chunks = []
    start = 0
    length = len(text)

    while start < length:
        end = min(start + max_length, length)

        if end < length:
            break_point = _find_break(text, start, end)
            if break_point > start + max_length * 0.5:
                end = break_point + 1

        chunk = text[start:end].strip()
        if chunk:
            chunks.append(chunk)

        if end >= length:
            break
        start = max(start + 1, end - overlap)

    return chunks


class ChunkingTask:
    """Split document text into chunks with configured size and overlap."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        max_chunks: int | None = None,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            max_chunks: Processing cap; chunks beyond it are dropped

        Raises:
            ValueError: When chunk_size is not positive or chunk_overlap is negative
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap cannot be negative")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.max_chunks = max_chunks

    def chunk(self, text: str) -> tuple[list[str], bool]:
        """
        Split text into chunks and apply the processing cap.

        Args:
            text: Processed document text

        Returns:
            tuple[list[str], bool]: Chunks in document order, and whether
                the cap dropped any
        """
        chunks = chunk_text(text, self.chunk_size, self.chunk_overlap)
        if self.max_chunks is not None and len(chunks) > self.max_chunks:
            return chunks[: self.max_chunks], True
        return chunks, False
