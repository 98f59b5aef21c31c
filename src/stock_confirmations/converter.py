"""
Batch converter from confirmation PDFs to CSV tables.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO, Union

from .assemblers import RecordAssembler
from .config import ConverterConfig
from .exceptions import ConversionError, DiscoveryError
from .extractors import BaseEventSource, PyMuPDFEventSource, reconstruct_text
from .generators import CsvTableGenerator
from .logging_config import get_logger
from .models import Document, DocumentKind, FieldMap
from .parsers import SectionParser

logger = get_logger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one document."""
    path: Path
    kind: DocumentKind = DocumentKind.UNKNOWN
    text: str = ""
    document: Optional[Document] = None
    field_map: FieldMap = field(default_factory=dict)
    row: Optional[List[str]] = None
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Outcomes of a batch, in input order."""
    results: List[ConversionResult] = field(default_factory=list)

    @property
    def failed(self) -> List[ConversionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def unrecognized(self) -> List[ConversionResult]:
        return [r for r in self.results if r.ok and not r.kind.recognized]

    def rows_by_kind(self) -> Dict[DocumentKind, List[List[str]]]:
        rows: Dict[DocumentKind, List[List[str]]] = {}
        for result in self.results:
            if result.row is not None:
                rows.setdefault(result.kind, []).append(result.row)
        return rows

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


class ConfirmationConverter:
    """
    Converts confirmation PDFs into one CSV table per document kind.

    Each document runs through event extraction, layout reconstruction,
    section parsing, record assembly and row rendering before the next
    one starts. A failing document is logged and left out; the rest of
    the batch continues.

    Example:
        converter = ConfirmationConverter()
        batch = converter.convert_batch(converter.discover())
        converter.write(batch, sys.stdout)
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Pipeline configuration (default: ConverterConfig())
        """
        self.config = config or ConverterConfig()

        # Initialize components
        self.parser = SectionParser(self.config.parser)
        self.assembler = RecordAssembler()
        self.generator = CsvTableGenerator()

        if self.config.dump_text_dir is not None:
            self.config.dump_text_dir.mkdir(parents=True, exist_ok=True)

    def discover(self, input_dir: Union[str, Path, None] = None,
                 pattern: Optional[str] = None) -> List[Path]:
        """
        List input documents.

        Args:
            input_dir: Directory to search (default: config.input_dir)
            pattern: Glob pattern (default: config.pattern)

        Returns:
            Sorted readable file paths; unreadable entries are logged and skipped
        """
        input_dir = Path(input_dir) if input_dir is not None else self.config.input_dir
        pattern = pattern or self.config.pattern

        try:
            candidates = sorted(input_dir.glob(pattern))
        except OSError as e:
            logger.error("%s", DiscoveryError(str(input_dir), e))
            return []

        paths = []
        for path in candidates:
            try:
                if not path.is_file():
                    continue
            except OSError as e:
                logger.error("%s", DiscoveryError(str(path), e))
                continue
            paths.append(path)

        logger.info("Found %d documents in %s", len(paths), input_dir)
        return paths

    def convert_file(self, path: Union[str, Path]) -> ConversionResult:
        """
        Convert one document.

        Args:
            path: PDF file path

        Returns:
            ConversionResult; ``error`` is set if the document failed
        """
        path = Path(path)
        result = ConversionResult(path=path)

        try:
            data = path.read_bytes()
        except OSError as e:
            result.error = DiscoveryError(str(path), e)
            logger.error("%s", result.error)
            return result

        return self.convert_source(PyMuPDFEventSource(data, str(path), self.config.extraction), result)

    def convert_source(self, source: BaseEventSource, result: ConversionResult) -> ConversionResult:
        """Run the pipeline for an already opened event source."""
        try:
            result.text = reconstruct_text(source, self.config.layout)
            self._dump_text(result)

            result.document = self.parser.parse(result.text)
            result.kind = result.document.kind
            result.field_map = self.assembler.assemble_document(result.document)

            schema = self.generator.schema_for(result.kind)
            if schema is None:
                logger.warning("Skipping %s: unrecognized document kind", result.path)
                return result

            result.row = self.generator.render_row(schema, result.field_map, str(result.path))
            logger.debug("Converted %s as %s", result.path, result.kind.name)
        except ConversionError as e:
            result.error = e
            logger.error("Failed to convert %s: %s", result.path, e)

        return result

    def convert_batch(self, paths: Iterable[Union[str, Path]]) -> BatchResult:
        """
        Convert documents in order.

        Args:
            paths: Input files

        Returns:
            BatchResult with one result per path, in the same order
        """
        batch = BatchResult()
        for path in paths:
            batch.results.append(self.convert_file(path))

        if batch.failed:
            logger.warning("%d of %d documents failed", len(batch.failed), len(batch.results))
        return batch

    def write(self, batch: BatchResult, stream: TextIO) -> None:
        """Write the batch's tables to ``stream``."""
        self.generator.write_tables(batch.rows_by_kind(), stream)

    def run(self, stream: TextIO) -> BatchResult:
        """Discover, convert and write using the configured paths."""
        batch = self.convert_batch(self.discover())
        self.write(batch, stream)
        return batch

    def _dump_text(self, result: ConversionResult) -> None:
        if self.config.dump_text_dir is None:
            return
        dump_path = self.config.dump_text_dir / f"{result.path.stem}.txt"
        try:
            with open(dump_path, "w", encoding="utf-8") as f:
                f.write(result.text)
        except OSError as e:
            logger.warning("Could not save reconstructed text to %s: %s", dump_path, e)
            return
        logger.debug("Saved reconstructed text to %s", dump_path)
