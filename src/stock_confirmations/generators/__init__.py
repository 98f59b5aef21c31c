"""
Tabular output generation.
"""

from .base import BaseGenerator
from .csv_generator import CsvTableGenerator
from .schemas import ColumnSpec, DocumentSchema, ESPP_SCHEMA, RSU_SCHEMA, SCHEMAS

__all__ = [
    "BaseGenerator",
    "CsvTableGenerator",
    "ColumnSpec",
    "DocumentSchema",
    "ESPP_SCHEMA",
    "RSU_SCHEMA",
    "SCHEMAS",
]
