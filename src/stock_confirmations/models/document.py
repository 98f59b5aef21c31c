"""
Document, section and field map models.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


FieldMap = Dict[str, Dict[str, str]]


class DocumentKind(Enum):
    """Known confirmation layouts."""
    RSU = "rsu"
    ESPP = "espp"
    UNKNOWN = "unknown"

    @property
    def recognized(self) -> bool:
        return self is not DocumentKind.UNKNOWN


@dataclass(frozen=True)
class Section:
    """
    A named block of key/value rows.

    A pair with an empty value marks a continuation: the logical field
    carries on in the next pair.
    """
    name: str
    body: Tuple[Tuple[str, str], ...] = ()


@dataclass
class Document:
    """Sections of one parsed confirmation plus its classified kind."""
    sections: List[Section] = field(default_factory=list)
    kind: DocumentKind = DocumentKind.UNKNOWN

    def section_names(self) -> List[str]:
        return [s.name for s in self.sections]

    def find(self, name: str) -> List[Section]:
        """All sections called ``name``, in document order."""
        return [s for s in self.sections if s.name == name]
