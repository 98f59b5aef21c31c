"""
Glyph draw events emitted by a character event source.
"""

from dataclasses import dataclass

import fitz  # PyMuPDF


@dataclass(frozen=True)
class PageBox:
    """
    Bounding box of a page in PDF user space.

    Attributes:
        x0: Lower-left x
        y0: Lower-left y
        x1: Upper-right x
        y1: Upper-right y
    """
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def flip_matrix(self) -> fitz.Matrix:
        """Matrix mapping PDF space (y up) to page space where y grows downwards."""
        return fitz.Matrix(1, 0, 0, -1, 0, self.height)

    @classmethod
    def from_rect(cls, rect: fitz.Rect) -> "PageBox":
        """Create a PageBox from a PyMuPDF rectangle."""
        return cls(x0=rect.x0, y0=rect.y0, x1=rect.x1, y1=rect.y1)


@dataclass(frozen=True)
class CharacterEvent:
    """
    One rendered glyph.

    Attributes:
        text: Glyph text (usually a single character)
        transform: Text rendering matrix; its translation is the glyph origin
            in PDF user space
        font_size: Nominal font size
        advance_width: Glyph advance in font-size units
        begins_word: True for the first glyph of a word
        begins_page: True for the first glyph of a page
    """
    text: str
    transform: fitz.Matrix
    font_size: float
    advance_width: float
    begins_word: bool = False
    begins_page: bool = False

    @property
    def origin(self) -> fitz.Point:
        return fitz.Point(self.transform.e, self.transform.f)

    def __repr__(self) -> str:
        return (f"CharacterEvent(text={self.text!r}, x={self.transform.e:.2f}, "
                f"y={self.transform.f:.2f}, size={self.font_size})")
