"""
Record assembly components.
"""

from .record_assembler import FieldLookup, RecordAssembler

__all__ = ["FieldLookup", "RecordAssembler"]
