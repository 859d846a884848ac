"""Boundary types shared with host documents and proposal consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class LineInfo:
    """Offset and length of a line, excluding its delimiter."""

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@runtime_checkable
class HostDocument(Protocol):
    """Protocol for documents an edit buffer can read lines from and mutate."""

    @property
    def length(self) -> int:
        ...

    def get(self) -> str:
        """Return the full current text."""
        ...

    def get_line_information(self, line: int) -> LineInfo:
        ...

    def get_line_of_offset(self, offset: int) -> int:
        ...

    def get_number_of_lines(self) -> int:
        ...

    def replace(self, offset: int, length: int, text: str) -> None:
        """Replace ``length`` characters at ``offset`` with ``text``."""
        ...


@runtime_checkable
class ProposalApplier(Protocol):
    """Anything that can mutate a document and report the resulting caret."""

    def apply(self, document: HostDocument) -> Optional[int]:
        ...

    def get_selection(self, document: Optional[HostDocument] = None) -> Optional[int]:
        ...


class EditEngineError(RuntimeError):
    """Base class for errors raised by the edit engine."""


class InvalidRangeError(EditEngineError, ValueError):
    """Raised when a range is recorded with ``start > end``."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid range: start ({start}) > end ({end})")
        self.start = start
        self.end = end


class InvalidOffsetError(EditEngineError, IndexError):
    """Raised when an offset or line lies outside the current document."""

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        length: int | None = None,
        document_length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.length = length
        self.document_length = document_length
