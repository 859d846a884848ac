"""In-memory host document with offset-based mutation."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List

from .sync import InvalidOffsetError, LineInfo
from .validation import ensure_line, ensure_region

_DELIMITER = re.compile(r"\r\n|\r|\n")


def _line_starts(text: str) -> List[int]:
    return [0] + [match.end() for match in _DELIMITER.finditer(text)]


@dataclass(slots=True)
class TextDocument:
    """Mutable text storage exposing the host document contract.

    Lines are split on ``\\r\\n``, ``\\r`` and ``\\n``. A trailing delimiter
    opens an empty last line, so an empty document has exactly one line.
    """

    _text: str = ""
    version: int = 0
    _starts: List[int] = field(default_factory=lambda: [0], init=False, repr=False)

    def __post_init__(self) -> None:
        self._starts = _line_starts(self._text)

    @classmethod
    def from_text(cls, text: str) -> "TextDocument":
        return cls(_text=text)

    def snapshot(self) -> "TextDocument":
        """Return an independent copy of the current contents."""

        return TextDocument(_text=self._text, version=self.version)

    def get(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    def get_number_of_lines(self) -> int:
        return len(self._starts)

    def get_line_information(self, line: int) -> LineInfo:
        ensure_line(line, len(self._starts))
        start = self._starts[line]
        if line + 1 < len(self._starts):
            end = self._starts[line + 1]
            delimiter = 2 if self._text[max(end - 2, 0) : end] == "\r\n" else 1
            end -= delimiter
        else:
            end = len(self._text)
        return LineInfo(offset=start, length=end - start)

    def get_line_of_offset(self, offset: int) -> int:
        if offset < 0 or offset > len(self._text):
            raise InvalidOffsetError(
                f"Offset {offset} outside document of length {len(self._text)}",
                offset=offset,
                document_length=len(self._text),
            )
        return bisect_right(self._starts, offset) - 1

    def replace(self, offset: int, length: int, text: str) -> None:
        ensure_region(offset, length, len(self._text))
        if length == 0 and not text:
            return
        self._text = self._text[:offset] + text + self._text[offset + length :]
        self._starts = _line_starts(self._text)
        self.version += 1

    def __str__(self) -> str:
        return self._text
