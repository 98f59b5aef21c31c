"""
Line-oriented section parser for reconstructed confirmation text.

The parser is a two-state machine. While scanning for a section it
classifies the document from its header line and skips boilerplate;
the first other non-blank line names a section. Inside a section body
every line is a tab-separated key/value row until a blank line that is
not followed by another row closes the section.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..config import ParserConfig
from ..logging_config import get_logger
from ..models import Document, DocumentKind, Section

logger = get_logger(__name__)


class ParserState(Enum):
    SCANNING_FOR_SECTION = "scanning_for_section"
    IN_SECTION_BODY = "in_section_body"


@dataclass(frozen=True)
class ScanOutcome:
    """Result of feeding one line to a state handler."""
    next_state: ParserState
    kind: Optional[DocumentKind] = None


@dataclass
class _ParseRun:
    """Line cursor and section accumulator for a single parse."""
    lines: List[str]
    pos: int = 0
    current_name: str = ""
    current_body: List[Tuple[str, str]] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)

    def next(self) -> Optional[str]:
        if self.pos >= len(self.lines):
            return None
        line = self.lines[self.pos]
        self.pos += 1
        return line

    def peek(self) -> Optional[str]:
        if self.pos >= len(self.lines):
            return None
        return self.lines[self.pos]

    def skip_blank(self) -> None:
        while self.pos < len(self.lines) and not self.lines[self.pos]:
            self.pos += 1

    def open_section(self, name: str) -> None:
        self.current_name = name
        self.current_body = []

    def close_section(self) -> Section:
        section = Section(name=self.current_name, body=tuple(self.current_body))
        self.sections.append(section)
        self.current_name = ""
        self.current_body = []
        return section


class SectionParser:
    """
    Parses reconstructed text into a Document.

    Example:
        parser = SectionParser()
        document = parser.parse(text)
        document.kind, document.sections
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the parser.

        Args:
            config: Header strings, boilerplate lines and column separator
        """
        self.config = config or ParserConfig()
        self._handlers: Dict[ParserState, Callable[[_ParseRun, str], ScanOutcome]] = {
            ParserState.SCANNING_FOR_SECTION: self._scan_for_section,
            ParserState.IN_SECTION_BODY: self._scan_section_body,
        }

    def parse(self, text: str) -> Document:
        """
        Parse reconstructed text.

        Args:
            text: Newline-separated lines with tab-separated columns

        Returns:
            Document with its sections in order and its classified kind
        """
        run = _ParseRun(lines=[line.strip() for line in text.split("\n")])
        state = ParserState.SCANNING_FOR_SECTION
        kind = DocumentKind.UNKNOWN

        line = run.next()
        while line is not None:
            outcome = self._handlers[state](run, line)
            if outcome.kind is not None and kind is DocumentKind.UNKNOWN:
                kind = outcome.kind
            state = outcome.next_state
            line = run.next()

        if state is ParserState.IN_SECTION_BODY:
            # Reconstructed text has no trailing blank line; only an empty
            # section left open is suspect
            level = logging.INFO if run.current_body else logging.WARNING
            logger.log(level, "Input ended inside section %r; keeping its %d rows",
                       run.current_name, len(run.current_body))
            run.close_section()

        logger.debug("Parsed %d sections (kind=%s)", len(run.sections), kind.value)
        return Document(sections=run.sections, kind=kind)

    def classify(self, line: str) -> Optional[DocumentKind]:
        """Document kind announced by a header line, if any."""
        return self.config.kind_headers.get(line.strip())

    def split_row(self, line: str) -> Tuple[str, str]:
        """
        Split a body line into key and value.

        Columns beyond the second are ignored.
        """
        parts = [part.strip() for part in line.split(self.config.column_separator)]
        if len(parts) > 2:
            logger.debug("Ignoring extra columns in row %r", line)
        return parts[0], parts[1] if len(parts) > 1 else ""

    def _scan_for_section(self, run: _ParseRun, line: str) -> ScanOutcome:
        kind = self.classify(line)
        if kind is not None:
            return ScanOutcome(ParserState.SCANNING_FOR_SECTION, kind)

        if not line or line in self.config.boilerplate:
            return ScanOutcome(ParserState.SCANNING_FOR_SECTION)

        run.skip_blank()
        run.open_section(line)
        return ScanOutcome(ParserState.IN_SECTION_BODY)

    def _scan_section_body(self, run: _ParseRun, line: str) -> ScanOutcome:
        if line:
            run.current_body.append(self.split_row(line))
            return ScanOutcome(ParserState.IN_SECTION_BODY)

        # Some layouts leave gaps inside a section
        following = run.peek()
        if following is not None and self.config.column_separator in following:
            return ScanOutcome(ParserState.IN_SECTION_BODY)

        run.close_section()
        return ScanOutcome(ParserState.SCANNING_FOR_SECTION)
