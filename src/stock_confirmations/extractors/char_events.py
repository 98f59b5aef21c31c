"""
Character event source backed by PyMuPDF.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import fitz  # PyMuPDF

from .base import BaseEventSource, BaseOutputDevice
from ..config import ExtractionConfig
from ..exceptions import DecodeError
from ..logging_config import get_logger
from ..models import CharacterEvent, PageBox

logger = get_logger(__name__)


class PyMuPDFEventSource(BaseEventSource):
    """
    Emits per-glyph events from the raw text dictionary of each page.

    Blocks, lines, spans and characters are visited in content order.
    Glyph origins are mapped back to PDF user space (y up) so that the
    receiving device applies the page flip itself.

    A word starts at every span, after every whitespace glyph and after
    a horizontal gap wider than ``word_gap`` times the font size.
    The first glyph of each page carries ``begins_page``.

    Documents that cannot be opened, that need a password or whose pages
    fail to load raise ``DecodeError``.
    """

    def __init__(self, data: bytes, name: Optional[str] = None,
                 config: Optional[ExtractionConfig] = None):
        """
        Initialize the event source.

        Args:
            data: Raw PDF bytes
            name: Document name used in error messages
            config: Extraction settings
        """
        self.data = data
        self.name = name
        self.config = config or ExtractionConfig()

    @classmethod
    def from_path(cls, path: Union[str, Path],
                  config: Optional[ExtractionConfig] = None) -> "PyMuPDFEventSource":
        path = Path(path)
        return cls(path.read_bytes(), name=str(path), config=config)

    def run(self, device: BaseOutputDevice) -> None:
        try:
            doc = fitz.open(stream=self.data, filetype="pdf")
        except Exception as e:
            raise DecodeError(self.name, e) from e

        try:
            if doc.needs_pass:
                raise DecodeError(self.name, ValueError("document is encrypted"))
            if doc.page_count == 0:
                raise DecodeError(self.name, ValueError("document has no pages"))

            logger.debug("Decoding %s (%d pages)", self.name or "<bytes>", doc.page_count)
            for page_number in range(doc.page_count):
                try:
                    page = doc.load_page(page_number)
                    page_box = PageBox.from_rect(page.rect)
                    raw = page.get_text("rawdict")
                except Exception as e:
                    raise DecodeError(self.name, e) from e

                device.begin_page(page_number, page_box)
                page_start = True
                for block in raw.get("blocks", []):
                    # Skip non-text blocks (type 0 is text)
                    if block.get("type") != 0:
                        continue
                    for line in block.get("lines", []):
                        direction = line.get("dir", (1.0, 0.0))
                        for span in line.get("spans", []):
                            if self._emit_span(device, span, direction, page_box, page_start):
                                page_start = False
                device.end_page()
        finally:
            doc.close()

    def _emit_span(self, device: BaseOutputDevice, span: Dict[str, Any],
                   direction: tuple, page_box: PageBox, page_start: bool = False) -> bool:
        """Emit the glyphs of one span; returns True if any glyph was emitted."""
        chars = span.get("chars", [])
        if not chars:
            return False

        size = span.get("size", 12.0) or 12.0
        cos, sin = direction
        # PyMuPDF y grows downwards; flip the direction into PDF space
        rotation = (cos, -sin, sin, cos)

        in_word = False
        word_break = True
        prev_end = None

        for char in chars:
            text = char.get("c", "")
            if not text:
                continue

            ox, oy = char.get("origin", (0.0, 0.0))
            x0, y0, x1, y1 = char.get("bbox", (ox, oy, ox, oy))
            advance_pts = abs(x1 - x0) * abs(cos) + abs(y1 - y0) * abs(sin)
            along = ox * cos + oy * sin

            if prev_end is not None and along - prev_end > self.config.word_gap * size:
                word_break = True

            begins_word = word_break
            if word_break:
                if in_word:
                    device.end_word()
                device.begin_word()
                in_word = True
                word_break = False

            transform = fitz.Matrix(*rotation, ox, page_box.height - oy)
            device.output_character(CharacterEvent(
                text=text,
                transform=transform,
                font_size=size,
                advance_width=advance_pts / size,
                begins_word=begins_word,
                begins_page=page_start,
            ))
            page_start = False

            prev_end = along + advance_pts
            if text.isspace():
                word_break = True

        if in_word:
            device.end_word()
        return in_word

