"""Textual adapter exposing ``TextArea`` documents to edit buffers."""

from .document import TextualDocument, apply_to_text_area

__all__ = ["TextualDocument", "apply_to_text_area"]
