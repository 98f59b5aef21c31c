"""
Plain-text layout reconstruction from positioned glyphs.

The reconstructor only sees one glyph at a time. It decides whether the
glyph continues the current row, starts a new column on the same row
(tab) or starts a new row (newline) by comparing its position with the
previous glyph. Separators are only considered at word boundaries.
"""

import io
import math
from typing import Iterable, Optional, TextIO

import fitz  # PyMuPDF

from .base import BaseOutputDevice, BaseEventSource
from ..config import LayoutConfig
from ..exceptions import LayoutWriteError
from ..logging_config import get_logger
from ..models import CharacterEvent, LayoutCursor, PageBox

logger = get_logger(__name__)


def effective_font_size(transform: fitz.Matrix, font_size: float) -> float:
    """
    Font size after applying the glyph transform.

    The vector (font_size, font_size) is transformed (ignoring translation)
    and the side of the square with the same area as the resulting
    rectangle is returned. This copes with rotated and scaled text.
    """
    vx = font_size * transform.a + font_size * transform.c
    vy = font_size * transform.b + font_size * transform.d
    return math.sqrt(abs(vx * vy))


class LayoutReconstructor(BaseOutputDevice):
    """
    Output device writing reconstructed text.

    Rows are separated by newlines and columns by tabs. A vertical gap
    that also returns to the left (or starts a new column block) is a
    paragraph break and is written as a blank line.

    Example:
        reconstructor = LayoutReconstructor()
        source.run(reconstructor)
        text = reconstructor.getvalue()
    """

    def __init__(self, writer: Optional[TextIO] = None, config: Optional[LayoutConfig] = None):
        """
        Initialize the reconstructor.

        Args:
            writer: Text stream to write into (default: in-memory buffer)
            config: Separator thresholds
        """
        self.writer = writer if writer is not None else io.StringIO()
        self.config = config or LayoutConfig()
        self.cursor = LayoutCursor()

    def begin_page(self, page_number: int, page_box: PageBox) -> None:
        self.cursor.reset_page(page_box.flip_matrix())

    def begin_word(self) -> None:
        self.cursor.reset_word()

    def output_character(self, event: CharacterEvent) -> None:
        position = fitz.Point(0, 0) * event.transform * self.cursor.flip
        font_size = effective_font_size(event.transform, event.font_size)
        x, y = position.x, position.y

        if self.cursor.first_char and self.cursor.has_output:
            self._write(self.separator(x, y, font_size))

        self._write(event.text)
        self.cursor.advance(x, y, event.advance_width * font_size)

    def separator(self, x: float, y: float, font_size: float) -> str:
        """
        Separator to write before a word starting at (x, y).

        Args:
            x: Word origin x in page space
            y: Word origin y in page space (grows downwards)
            font_size: Effective font size of the first glyph

        Returns:
            "", a column separator, or one or two newlines
        """
        cfg = self.config
        last_end = self.cursor.last_end
        dy = abs(y - self.cursor.last_y)

        breaks = 0
        if dy > font_size * cfg.paragraph_gap:
            breaks += 1
        # moved to the left and down
        if x < last_end and dy > font_size * cfg.wrap_back_gap:
            breaks += 1
        # moved right but up: next column block
        elif x > last_end and y < self.cursor.last_y:
            breaks += 1

        if breaks:
            return cfg.newline * breaks
        if x > last_end + font_size * cfg.column_gap:
            return cfg.column_separator
        return ""

    def getvalue(self) -> str:
        """Reconstructed text (only for in-memory writers)."""
        return self.writer.getvalue()

    def _write(self, text: str) -> None:
        if not text:
            return
        try:
            self.writer.write(text)
        except (OSError, ValueError) as e:
            raise LayoutWriteError(e) from e


def reconstruct_text(source: BaseEventSource, config: Optional[LayoutConfig] = None) -> str:
    """
    Run an event source through a fresh reconstructor.

    Args:
        source: Character event source for one document
        config: Separator thresholds

    Returns:
        Reconstructed text
    """
    reconstructor = LayoutReconstructor(config=config)
    source.run(reconstructor)
    text = reconstructor.getvalue()
    logger.debug("Reconstructed %d lines", text.count("\n") + 1 if text else 0)
    return text


def reconstruct_events(pages: Iterable[tuple], config: Optional[LayoutConfig] = None) -> str:
    """
    Reconstruct text from pre-built ``(page_box, events)`` pages.

    Args:
        pages: Iterable of ``(PageBox, [CharacterEvent, ...])``
        config: Separator thresholds

    Returns:
        Reconstructed text
    """
    reconstructor = LayoutReconstructor(config=config)
    reconstructor.replay(pages)
    return reconstructor.getvalue()
