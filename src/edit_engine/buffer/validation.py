"""Validation helpers shared by documents and edit buffers."""

from __future__ import annotations

from .sync import InvalidOffsetError, InvalidRangeError


def ensure_range(start: int, end: int) -> tuple[int, int]:
    if start > end:
        raise InvalidRangeError(start, end)
    return start, end


def ensure_region(offset: int, length: int, document_length: int) -> tuple[int, int]:
    """Check that ``[offset, offset + length)`` lies within the document."""

    if offset < 0 or length < 0 or offset + length > document_length:
        raise InvalidOffsetError(
            f"Region {offset}+{length} outside document of length {document_length}",
            offset=offset,
            length=length,
            document_length=document_length,
        )
    return offset, length


def ensure_line(line: int, line_count: int) -> int:
    if line < 0 or line >= line_count:
        raise InvalidOffsetError(
            f"Line {line} out of range (document has {line_count} lines)",
            offset=line,
        )
    return line
