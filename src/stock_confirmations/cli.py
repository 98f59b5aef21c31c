"""
Command line entry point.

Usage:
    stock-confirmations
    stock-confirmations statements/ -o confirmations.csv
    stock-confirmations statements/ --dump-text debug/ --log-level debug
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_config, parse_log_level
from .converter import ConfirmationConverter
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stock-confirmations",
        description="Stock plan confirmation PDFs → CSV tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stock-confirmations
  stock-confirmations statements/ -o confirmations.csv
  stock-confirmations statements/ --pattern "*RSU*.pdf"
        """,
    )
    parser.add_argument("input_dir", nargs="?", default=None,
                        help="directory containing the PDFs (default: ./input)")
    parser.add_argument("-p", "--pattern", default=None, help='glob pattern (default: "*.pdf")')
    parser.add_argument("-o", "--output", default=None, help="CSV output file (default: stdout)")
    parser.add_argument("--dump-text", default=None, metavar="DIR",
                        help="save reconstructed text of every document to DIR")
    parser.add_argument("--log-level", default=None, help="debug, info, warning or error")
    parser.add_argument("--log-file", default=None, help="also write diagnostics to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()

    if args.input_dir:
        config.input_dir = Path(args.input_dir)
    if args.pattern:
        config.pattern = args.pattern
    if args.output:
        config.output = Path(args.output)
    if args.dump_text:
        config.dump_text_dir = Path(args.dump_text)
    if args.log_level:
        try:
            config.log_level = parse_log_level(args.log_level)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    setup_logging(config.log_level, Path(args.log_file) if args.log_file else None)

    if not config.input_dir.is_dir():
        logger.error("Input directory not found: %s", config.input_dir)
        return 1

    converter = ConfirmationConverter(config)
    if config.output is None:
        batch = converter.run(sys.stdout)
    else:
        config.output.parent.mkdir(parents=True, exist_ok=True)
        with open(config.output, "w", encoding="utf-8", newline="") as f:
            batch = converter.run(f)
        logger.info("Saved tables to %s", config.output)

    return batch.exit_code


if __name__ == "__main__":
    sys.exit(main())
