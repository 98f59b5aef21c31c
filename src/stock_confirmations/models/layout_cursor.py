"""
Mutable state of the layout reconstructor.
"""

from dataclasses import dataclass, field

import fitz  # PyMuPDF


@dataclass
class LayoutCursor:
    """
    Cursor tracking the previously written glyph.

    Attributes:
        last_end: Right edge x of the last glyph
        last_y: Baseline y of the last glyph
        first_char: Whether the next glyph starts a word
        has_output: Whether any glyph has been written yet
        flip: Vertical flip for the active page
    """
    last_end: float = 100000.0
    last_y: float = 0.0
    first_char: bool = False
    has_output: bool = False
    flip: fitz.Matrix = field(default_factory=lambda: fitz.Matrix(1, 0, 0, 1, 0, 0))

    def reset_page(self, flip: fitz.Matrix) -> None:
        self.flip = flip

    def reset_word(self) -> None:
        self.first_char = True

    def advance(self, x: float, y: float, width: float) -> None:
        """Record a written glyph ending at ``x + width``."""
        self.first_char = False
        self.has_output = True
        self.last_y = y
        self.last_end = x + width
