"""
Data models for confirmation document extraction.
"""

from .character_event import CharacterEvent, PageBox
from .layout_cursor import LayoutCursor
from .document import DocumentKind, Section, Document, FieldMap

__all__ = [
    "CharacterEvent",
    "PageBox",
    "LayoutCursor",
    "DocumentKind",
    "Section",
    "Document",
    "FieldMap",
]
