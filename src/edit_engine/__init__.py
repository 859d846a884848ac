"""UI-agnostic engine for composing batches of document edits."""

from .buffer import (
    EditEngineError,
    HostDocument,
    InvalidOffsetError,
    InvalidRangeError,
    LineInfo,
    ProposalApplier,
    TextDocument,
)
from .edits import Deletion, EditBuffer, Insertion

__all__ = [
    "adapters",
    "buffer",
    "edits",
    "runtime",
    "EditBuffer",
    "Insertion",
    "Deletion",
    "TextDocument",
    "HostDocument",
    "LineInfo",
    "ProposalApplier",
    "EditEngineError",
    "InvalidOffsetError",
    "InvalidRangeError",
]

__version__ = "0.1.0"
