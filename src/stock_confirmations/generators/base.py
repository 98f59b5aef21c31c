"""
Base class for output generators.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, TextIO

from ..models import DocumentKind


class BaseGenerator(ABC):
    """Abstract base class for tabular output generation."""

    @abstractmethod
    def write_tables(self, rows_by_kind: Dict[DocumentKind, List[List[str]]], stream: TextIO) -> None:
        """Write one table per document kind to ``stream``."""
        pass
