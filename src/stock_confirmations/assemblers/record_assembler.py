"""
Flattening of parsed sections into a field map.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from ..logging_config import get_logger
from ..models import Document, FieldMap, Section

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldLookup:
    """Outcome of looking up one field in a field map."""
    section: str
    field: str
    value: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.value is not None


class RecordAssembler:
    """
    Builds section name -> field name -> value mappings.

    Sections sharing a name are merged in document order and later
    values win. A row with an empty value continues on the next row:
    a parenthetical follow-up (e.g. "(estimated)") only supplies the
    value, any other follow-up also extends the field name.
    """

    def assemble(self, sections: Iterable[Section]) -> FieldMap:
        """
        Assemble a field map.

        Args:
            sections: Sections in document order

        Returns:
            Mapping from section name to field name to value
        """
        field_map: FieldMap = {}
        for section in sections:
            fields = field_map.setdefault(section.name, {})
            self._merge_body(section, fields)
        return field_map

    def assemble_document(self, document: Document) -> FieldMap:
        return self.assemble(document.sections)

    def _merge_body(self, section: Section, fields: Dict[str, str]) -> None:
        body = section.body
        i = 0
        while i < len(body):
            key, value = body[i]
            i += 1

            if value:
                fields[key] = value
                continue

            if i >= len(body):
                logger.debug("Dropping %r in %r: no continuation row", key, section.name)
                continue

            next_key, next_value = body[i]
            i += 1
            if next_key.startswith("("):
                fields[key] = next_value
            else:
                fields[f"{key} {next_key}"] = next_value

    @staticmethod
    def lookup(field_map: FieldMap, section: str, field: str) -> FieldLookup:
        """
        Look up a field without raising.

        Args:
            field_map: Assembled field map
            section: Section name
            field: Field name inside the section

        Returns:
            FieldLookup whose ``found`` is False when either level is absent
        """
        return FieldLookup(section, field, field_map.get(section, {}).get(field))
