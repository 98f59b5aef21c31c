"""
Stock Confirmations - turn stock plan confirmation PDFs into CSV tables.

Reconstructs the visual rows and columns of each PDF from its glyph
positions, parses the resulting text into named sections of key/value
rows and exports one CSV table per known confirmation layout.

Quick Start:
    from stock_confirmations import ConfirmationConverter

    converter = ConfirmationConverter()
    batch = converter.convert_batch(converter.discover("statements"))
    converter.write(batch, sys.stdout)

Modular Components:
    - models: CharacterEvent, Section, Document data classes
    - extractors: PyMuPDF event source and layout reconstruction
    - parsers: Section state machine
    - assemblers: Field map assembly with continuation merging
    - generators: Schemas and CSV output
"""

__version__ = "0.1.0"

# Main converter
from .converter import ConfirmationConverter, ConversionResult, BatchResult

# Models
from .models import CharacterEvent, PageBox, Section, Document, DocumentKind

# Components
from .extractors import LayoutReconstructor, PyMuPDFEventSource
from .parsers import SectionParser
from .assemblers import RecordAssembler
from .generators import CsvTableGenerator, SCHEMAS

__all__ = [
    # Main classes
    "ConfirmationConverter",
    "ConversionResult",
    "BatchResult",

    # Models
    "CharacterEvent",
    "PageBox",
    "Section",
    "Document",
    "DocumentKind",

    # Components
    "LayoutReconstructor",
    "PyMuPDFEventSource",
    "SectionParser",
    "RecordAssembler",
    "CsvTableGenerator",
    "SCHEMAS",
]
