"""Host document backed by a Textual ``TextArea`` or ``Document``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from textual.widgets.text_area import Selection

from edit_engine.buffer.sync import InvalidOffsetError, LineInfo
from edit_engine.buffer.validation import ensure_line, ensure_region
from edit_engine.runtime.telemetry import record_event

if TYPE_CHECKING:  # pragma: no cover
    from textual.widgets import TextArea
    from textual.widgets.text_area import DocumentBase

    from edit_engine.edits import EditBuffer

Location = Tuple[int, int]  # (row, column)


class TextualDocument:
    """Translates flat offsets into Textual ``(row, column)`` locations.

    Writes go through the ``TextArea`` when one is given so its undo history and
    rendering stay in sync, otherwise straight to the document.
    """

    def __init__(
        self, document: "DocumentBase", *, text_area: Optional["TextArea"] = None
    ) -> None:
        self._document = document
        self._text_area = text_area

    @classmethod
    def for_text_area(cls, text_area: "TextArea") -> "TextualDocument":
        return cls(text_area.document, text_area=text_area)

    @property
    def _newline_length(self) -> int:
        return len(self._document.newline)

    @property
    def length(self) -> int:
        lines = self._document.lines
        return sum(len(line) for line in lines) + self._newline_length * (
            len(lines) - 1
        )

    def get(self) -> str:
        return self._document.text

    def get_number_of_lines(self) -> int:
        return self._document.line_count

    def get_line_information(self, line: int) -> LineInfo:
        lines = self._document.lines
        ensure_line(line, len(lines))
        offset = sum(len(text) + self._newline_length for text in lines[:line])
        return LineInfo(offset=offset, length=len(lines[line]))

    def get_line_of_offset(self, offset: int) -> int:
        return self.location_of(offset)[0]

    def location_of(self, offset: int) -> Location:
        length = self.length
        if offset < 0 or offset > length:
            raise InvalidOffsetError(
                f"Offset {offset} outside document of length {length}",
                offset=offset,
                document_length=length,
            )
        running = 0
        lines = self._document.lines
        for row, line in enumerate(lines):
            end = running + len(line)
            if offset <= end:
                return (row, offset - running)
            if offset < end + self._newline_length:
                raise InvalidOffsetError(
                    f"Offset {offset} splits the line delimiter after line {row}",
                    offset=offset,
                    document_length=length,
                )
            running = end + self._newline_length
        return (len(lines) - 1, len(lines[-1]))

    def offset_of(self, location: Location) -> int:
        row, column = location
        info = self.get_line_information(row)
        if column < 0 or column > info.length:
            raise InvalidOffsetError(
                f"Column {column} out of range for line {row}", offset=column
            )
        return info.offset + column

    def replace(self, offset: int, length: int, text: str) -> None:
        ensure_region(offset, length, self.length)
        start = self.location_of(offset)
        end = self.location_of(offset + length)
        if self._text_area is not None:
            self._text_area.replace(text, start, end)
        else:
            self._document.replace_range(start, end, text)


def apply_to_text_area(
    buffer: "EditBuffer", text_area: "TextArea", *, strategy: str | None = None
) -> Optional[int]:
    """Apply ``buffer`` to ``text_area`` and move its cursor to the result."""

    host = TextualDocument.for_text_area(text_area)
    selection = buffer.apply(host, strategy=strategy)
    if selection is not None:
        location = host.location_of(selection)
        text_area.selection = Selection.cursor(location)
        record_event(
            "textual.cursor",
            level="debug",
            data={"offset": selection, "location": location},
        )
    return selection
