"""
CSV table generation from assembled field maps.
"""

import csv
from typing import Dict, List, Mapping, Optional, TextIO

from .base import BaseGenerator
from .schemas import SCHEMAS, DocumentSchema
from ..assemblers import RecordAssembler
from ..exceptions import IncompleteRecordError
from ..logging_config import get_logger
from ..models import DocumentKind, FieldMap

logger = get_logger(__name__)


class CsvTableGenerator(BaseGenerator):
    """
    Renders field maps against a fixed schema and writes CSV tables.

    Every recognized kind gets its own table with a header row, followed
    by a blank line. Kinds without rows are skipped.
    """

    def __init__(self, schemas: Optional[Mapping[DocumentKind, DocumentSchema]] = None):
        self.schemas = dict(schemas) if schemas is not None else dict(SCHEMAS)

    def schema_for(self, kind: DocumentKind) -> Optional[DocumentSchema]:
        return self.schemas.get(kind)

    def render_row(self, schema: DocumentSchema, field_map: FieldMap,
                   path: Optional[str] = None) -> List[str]:
        """
        Build one output row.

        Args:
            schema: Schema of the document's kind
            field_map: Assembled fields of the document
            path: Document path for error reporting

        Returns:
            Values in schema column order

        Raises:
            IncompleteRecordError: If any schema field is absent
        """
        row = []
        missing = []
        for spec in schema.columns:
            found = RecordAssembler.lookup(field_map, spec.section, spec.field)
            if found.found:
                row.append(found.value)
            else:
                missing.append((spec.section, spec.field))

        if missing:
            raise IncompleteRecordError(schema.kind.name, missing, path)
        return row

    def write_tables(self, rows_by_kind: Dict[DocumentKind, List[List[str]]], stream: TextIO) -> None:
        for kind, schema in self.schemas.items():
            rows = rows_by_kind.get(kind, [])
            if not rows:
                continue

            writer = csv.writer(stream, lineterminator="\n")
            writer.writerow(schema.header)
            writer.writerows(rows)
            stream.write("\n")
            logger.info("Wrote %d %s rows", len(rows), kind.name)
