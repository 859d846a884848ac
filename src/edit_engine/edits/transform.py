"""Offset transformer and the per-pass application state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from edit_engine.buffer.sync import HostDocument

from .models import Collapse, Shift, Step


class OffsetTransformer:
    """Maps original-document offsets to offsets in the mutated document.

    Steps are folded left to right, so resolving one offset costs one pass over
    every step recorded so far.
    """

    __slots__ = ("_steps",)

    def __init__(self) -> None:
        self._steps: List[Step] = []

    def transform(self, offset: int) -> int:
        for step in self._steps:
            offset = step.map(offset)
        return offset

    __call__ = transform

    def extend(self, step: Step) -> None:
        self._steps.append(step)

    @property
    def net_delta(self) -> int:
        """Total change in document length caused by all steps."""

        return sum(step.delta for step in self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"OffsetTransformer({self._steps!r})"


@dataclass(slots=True)
class ApplicationState:
    """Transient state of one apply or preview pass.

    ``sink`` is the live document. Without one, only the transformer and the
    selection are updated.
    """

    transformer: OffsetTransformer = field(default_factory=OffsetTransformer)
    selection: Optional[int] = None
    sink: Optional[HostDocument] = None
    mutations: int = 0

    def insert(self, start: int, text: str) -> None:
        t_start = self.transformer.transform(start)
        if text:
            if self.sink is not None:
                self.sink.replace(t_start, 0, text)
                self.mutations += 1
            self.transformer.extend(Shift(at=t_start, delta=len(text)))
        self.selection = t_start + len(text)

    def delete(self, start: int, end: int) -> None:
        t_start = self.transformer.transform(start)
        if end > start:
            t_end = self.transformer.transform(end)
            if t_end > t_start:
                if self.sink is not None:
                    self.sink.replace(t_start, t_end - t_start, "")
                    self.mutations += 1
                self.transformer.extend(Collapse(start=t_start, end=t_end))
        self.selection = t_start


__all__ = ["ApplicationState", "OffsetTransformer"]
