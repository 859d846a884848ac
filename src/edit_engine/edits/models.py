"""Edit records and offset transform steps.

Edit records always carry offsets in original-document coordinates. Transform
steps carry offsets in the coordinates of the document as it was when the step
was produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from edit_engine.buffer.validation import ensure_range

if TYPE_CHECKING:  # pragma: no cover
    from .transform import ApplicationState


@dataclass(frozen=True, slots=True)
class Insertion:
    offset: int
    text: str

    @property
    def start(self) -> int:
        return self.offset

    @property
    def end(self) -> int:
        return self.offset

    def apply_to(self, state: "ApplicationState") -> None:
        state.insert(self.offset, self.text)

    def __str__(self) -> str:
        return f"ins({self.text!r}@{self.offset})"


@dataclass(frozen=True, slots=True)
class Deletion:
    start: int
    end: int

    def __post_init__(self) -> None:
        ensure_range(self.start, self.end)

    def apply_to(self, state: "ApplicationState") -> None:
        state.delete(self.start, self.end)

    def __str__(self) -> str:
        return f"del({self.start}->{self.end})"


Edit = Union[Insertion, Deletion]


@dataclass(frozen=True, slots=True)
class Shift:
    """Text of length ``delta`` was inserted at ``at``.

    Offsets at or after ``at`` move forward.
    """

    at: int
    delta: int

    def map(self, offset: int) -> int:
        if offset < self.at:
            return offset
        return offset + self.delta


@dataclass(frozen=True, slots=True)
class Collapse:
    """The range ``[start, end)`` was removed.

    Offsets inside the removed range collapse onto ``start``.
    """

    start: int
    end: int

    @property
    def delta(self) -> int:
        return self.start - self.end

    def map(self, offset: int) -> int:
        if offset <= self.start:
            return offset
        if offset >= self.end:
            return offset + self.delta
        return self.start


Step = Union[Shift, Collapse]

__all__ = ["Collapse", "Deletion", "Edit", "Insertion", "Shift", "Step"]
