"""
Base classes for character event sources and output devices.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from ..models import CharacterEvent, PageBox


class BaseOutputDevice(ABC):
    """
    Receiver of a character event stream.

    An event source calls ``begin_page`` once per page, then for every
    word ``begin_word``, one ``output_character`` per glyph and
    ``end_word``, and finally ``end_page``.
    """

    def begin_page(self, page_number: int, page_box: PageBox) -> None:
        """
        Start a new page.

        Args:
            page_number: Zero-based page index
            page_box: Page bounding box in PDF user space
        """
        pass

    def end_page(self) -> None:
        pass

    def begin_word(self) -> None:
        pass

    def end_word(self) -> None:
        pass

    @abstractmethod
    def output_character(self, event: CharacterEvent) -> None:
        """
        Handle one rendered glyph.

        Args:
            event: The glyph with its transform and metrics
        """
        pass

    def replay(self, pages: Iterable[tuple]) -> None:
        """
        Feed pre-built events to this device.

        Args:
            pages: Iterable of ``(page_box, events)`` tuples; an event with
                ``begins_word`` set opens a new word
        """
        for page_number, (page_box, events) in enumerate(pages):
            self.begin_page(page_number, page_box)
            in_word = False
            for event in events:
                if event.begins_word or not in_word:
                    if in_word:
                        self.end_word()
                    self.begin_word()
                    in_word = True
                self.output_character(event)
            if in_word:
                self.end_word()
            self.end_page()


class BaseEventSource(ABC):
    """
    Abstract producer of character events for one document.

    Subclasses decode a specific document format and drive an
    output device with the glyphs they find.
    """

    @abstractmethod
    def run(self, device: BaseOutputDevice) -> None:
        """
        Emit every page and glyph of the document to ``device``.

        Args:
            device: Receiver of the event stream
        """
        pass
