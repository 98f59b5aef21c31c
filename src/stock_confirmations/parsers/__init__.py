"""
Text parsing components.
"""

from .section_parser import ParserState, ScanOutcome, SectionParser

__all__ = ["ParserState", "ScanOutcome", "SectionParser"]
