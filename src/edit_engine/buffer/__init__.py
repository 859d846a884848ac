"""Host document abstractions, the in-memory document and error types."""

from .document import TextDocument
from .sync import (
    EditEngineError,
    HostDocument,
    InvalidOffsetError,
    InvalidRangeError,
    LineInfo,
    ProposalApplier,
)
from .validation import ensure_line, ensure_range, ensure_region

__all__ = [
    "TextDocument",
    "HostDocument",
    "LineInfo",
    "ProposalApplier",
    "EditEngineError",
    "InvalidOffsetError",
    "InvalidRangeError",
    "ensure_line",
    "ensure_range",
    "ensure_region",
]
