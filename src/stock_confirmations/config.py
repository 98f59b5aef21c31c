"""
Configuration for the confirmation extraction pipeline.

This module provides:
- Layout reconstruction thresholds
- Character event source settings
- Section parser vocabulary (kind headers, boilerplate lines)
- Batch converter settings with environment overrides
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from dotenv import load_dotenv

from .models import DocumentKind


ENV_PREFIX = "STOCK_CONFIRMATIONS_"


# ============================================================================
# Pipeline Stages
# ============================================================================

@dataclass
class LayoutConfig:
    """Separator thresholds, as multiples of the effective font size."""
    paragraph_gap: float = 1.5   # vertical jump => newline
    wrap_back_gap: float = 0.5   # moved left and down => newline
    column_gap: float = 0.1      # moved right on the same row => tab
    newline: str = "\n"
    column_separator: str = "\t"


@dataclass
class ExtractionConfig:
    """Character event source configuration."""
    # Horizontal gap (in font-size units) that starts a new word inside a span
    word_gap: float = 1.0


@dataclass
class ParserConfig:
    """Section parser vocabulary."""
    kind_headers: Dict[str, DocumentKind] = field(default_factory=lambda: {
        "EMPLOYEE STOCK PLAN RELEASE CONFIRMATION": DocumentKind.RSU,
        "EMPLOYEE STOCK PLAN PURCHASE CONFIRMATION": DocumentKind.ESPP,
    })
    boilerplate: FrozenSet[str] = frozenset({
        "Release Details",
        "Registration:",
        "Purchase Details",
    })
    column_separator: str = "\t"


@dataclass
class ConverterConfig:
    """Main batch configuration."""
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    input_dir: Path = Path("./input")
    pattern: str = "*.pdf"
    output: Optional[Path] = None       # None = stdout
    dump_text_dir: Optional[Path] = None
    log_level: int = logging.INFO


# ============================================================================
# Default Configuration Instance
# ============================================================================

def get_config() -> ConverterConfig:
    """Get the default configuration with environment (and .env) overrides."""
    load_dotenv()
    config = ConverterConfig()

    input_dir = os.environ.get(f"{ENV_PREFIX}INPUT_DIR")
    if input_dir:
        config.input_dir = Path(input_dir)

    pattern = os.environ.get(f"{ENV_PREFIX}PATTERN")
    if pattern:
        config.pattern = pattern

    dump_dir = os.environ.get(f"{ENV_PREFIX}DUMP_TEXT")
    if dump_dir:
        config.dump_text_dir = Path(dump_dir)

    level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "")
    if level:
        config.log_level = parse_log_level(level)

    return config


def parse_log_level(value: str) -> int:
    """Translate a level name ("debug", "WARNING") or number into a logging level."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level
