"""Composite document modifications expressed against an unmodified snapshot.

An :class:`EditBuffer` records insertions and deletions whose offsets all refer
to the original document, so a caller that derived them from one analysis pass
(an AST, a completion engine) never has to recompute positions between edits.

Order matters. Edits are applied in the order they were recorded and edits that
overlap get a well defined meaning from that order. Every edit also moves the
cursor to its own end, so the edit recorded last decides where the caret lands.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from edit_engine.buffer.sync import EditEngineError, HostDocument, InvalidRangeError
from edit_engine.runtime.config import STRATEGIES, get_settings
from edit_engine.runtime.telemetry import record_event, span

from .models import Deletion, Edit, Insertion
from .planner import apply_clustered
from .transform import ApplicationState


class EditBuffer:
    """Ordered batch of edits applied as one document mutation."""

    def __init__(
        self,
        document: Optional[HostDocument] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.document = document
        self._edits: List[Edit] = []
        self._logger_name = logger_name

    @classmethod
    def from_edits(
        cls, edits: Iterable[Edit], *, document: Optional[HostDocument] = None
    ) -> "EditBuffer":
        buffer = cls(document)
        buffer._edits.extend(edits)
        return buffer

    @property
    def edits(self) -> Tuple[Edit, ...]:
        return tuple(self._edits)

    @property
    def is_empty(self) -> bool:
        return not self._edits

    def __len__(self) -> int:
        return len(self._edits)

    def __iter__(self) -> Iterator[Edit]:
        return iter(self._edits)

    def __repr__(self) -> str:
        return f"EditBuffer([{', '.join(str(edit) for edit in self._edits)}])"

    # -- recording ---------------------------------------------------------

    def insert(self, offset: int, text: str) -> "EditBuffer":
        self._edits.append(Insertion(offset, text))
        return self

    def delete(self, start: int, end: int | str) -> "EditBuffer":
        """Record removal of ``[start, end)``.

        ``end`` may also be the text expected at ``start``; its length then
        determines the end of the range.
        """

        if isinstance(end, str):
            return self.delete_text(start, end)
        try:
            deletion = Deletion(start, end)
        except InvalidRangeError:
            record_event(
                "edit_buffer.rejected",
                level="debug",
                data={"start": start, "end": end},
                logger_name=self._logger_name,
            )
            raise
        self._edits.append(deletion)
        return self

    def delete_text(self, offset: int, text: str) -> "EditBuffer":
        return self.delete(offset, offset + len(text))

    def replace(self, start: int, end: int, new_text: str) -> "EditBuffer":
        """Replace ``[start, end)`` and leave the cursor after ``new_text``."""

        self.delete(start, end)
        return self.insert(start, new_text)

    def move_cursor_to(self, offset: int) -> "EditBuffer":
        return self.insert(offset, "")

    def delete_line_backward_at_offset(self, offset: int) -> "EditBuffer":
        line_number = self._line_document().get_line_of_offset(offset)
        return self.delete_line_backward(line_number)

    def delete_line_backward(self, line_number: int) -> "EditBuffer":
        """Delete a line together with one adjacent newline.

        The preceding newline is removed when there is one, which leaves the
        cursor at the end of the previous line.
        """

        document = self._line_document()
        line = document.get_line_information(line_number)
        if line_number > 0:
            previous = document.get_line_information(line_number - 1)
            return self.delete(previous.end, line.end)
        if line_number < document.get_number_of_lines() - 1:
            following = document.get_line_information(line_number + 1)
            return self.delete(line.offset, following.offset)
        return self.delete(line.offset, line.end)

    def delete_line_forward_at_offset(self, offset: int) -> "EditBuffer":
        line_number = self._line_document().get_line_of_offset(offset)
        return self.delete_line_forward(line_number)

    def delete_line_forward(self, line_number: int) -> "EditBuffer":
        """Like :meth:`delete_line_backward` but prefers the following newline.

        The cursor ends up at the start of the line that followed.
        """

        document = self._line_document()
        line = document.get_line_information(line_number)
        if line_number < document.get_number_of_lines() - 1:
            following = document.get_line_information(line_number + 1)
            return self.delete(line.offset, following.offset)
        if line_number > 0:
            previous = document.get_line_information(line_number - 1)
            return self.delete(previous.end, line.end)
        return self.delete(line.offset, line.end)

    def _line_document(self) -> HostDocument:
        if self.document is None:
            raise EditEngineError("Line based edits need the original document")
        return self.document

    # -- application -------------------------------------------------------

    def apply(
        self, document: HostDocument, *, strategy: str | None = None
    ) -> Optional[int]:
        """Apply every recorded edit to ``document``.

        Returns the resulting cursor offset, or ``None`` when nothing was
        recorded. Errors raised by the document propagate; edits already
        applied stay applied.
        """

        resolved = self._resolve_strategy(strategy)
        with span(
            "edit_buffer::apply",
            logger_name=self._logger_name,
            component="edit_buffer",
            metadata={"edits": len(self._edits), "strategy": resolved},
        ) as handle:
            selection, mutations = self._run(document, resolved)
            handle.add_metadata("mutations", mutations)
            handle.add_metadata("selection", selection)
        return selection

    def compute_resulting_selection(
        self, *, strategy: str | None = None
    ) -> Optional[int]:
        """Return where the cursor would land, without touching any document."""

        resolved = self._resolve_strategy(strategy)
        with span(
            "edit_buffer::preview",
            logger_name=self._logger_name,
            component="edit_buffer",
            metadata={"edits": len(self._edits), "strategy": resolved},
        ):
            selection, _ = self._run(None, resolved)
        return selection

    preview_selection = compute_resulting_selection

    def get_selection(self, document: Optional[HostDocument] = None) -> Optional[int]:
        return self.compute_resulting_selection()

    def _resolve_strategy(self, strategy: str | None) -> str:
        settings = get_settings()
        name = strategy or settings.strategy
        if name not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy '{name}', expected one of {STRATEGIES}"
            )
        if name == "auto":
            if len(self._edits) >= settings.cluster_threshold:
                return "clustered"
            return "sequential"
        return name

    def _run(
        self, sink: Optional[HostDocument], strategy: str
    ) -> Tuple[Optional[int], int]:
        if strategy == "clustered":
            outcome = apply_clustered(self._edits, sink)
            return outcome.selection, outcome.mutations
        state = ApplicationState(sink=sink)
        for edit in self._edits:
            edit.apply_to(state)
        return state.selection, state.mutations


__all__ = ["EditBuffer"]
