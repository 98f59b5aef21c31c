"""
Character event sources and text reconstruction.
"""

from .base import BaseEventSource, BaseOutputDevice
from .char_events import PyMuPDFEventSource
from .layout_reconstructor import (
    LayoutReconstructor,
    effective_font_size,
    reconstruct_events,
    reconstruct_text,
)

__all__ = [
    "BaseEventSource",
    "BaseOutputDevice",
    "PyMuPDFEventSource",
    "LayoutReconstructor",
    "effective_font_size",
    "reconstruct_events",
    "reconstruct_text",
]
