"""
Exceptions for confirmation conversion.

Exception Hierarchy:
    ConversionError (base)
    ├── DiscoveryError
    ├── PDFError
    │   └── DecodeError
    ├── LayoutWriteError
    └── IncompleteRecordError

Everything except DiscoveryError is fatal to a single document only;
the batch converter records it and moves on.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


class ConversionError(Exception):
    """
    Base exception for all conversion errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A conversion error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class DiscoveryError(ConversionError):
    """Raised when an input entry cannot be listed or read."""

    def __init__(self, path: str, original_error: Optional[Exception] = None):
        self.path = path
        self.original_error = original_error
        super().__init__(
            message=f"Cannot read input entry: {path}",
            details=str(original_error) if original_error else None,
        )


class PDFError(ConversionError):
    """Base class for PDF-related errors."""

    def __init__(
        self,
        message: str = "PDF error",
        path: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.path = path
        if path:
            message = f"{message} [{path}]"
        super().__init__(message, details)


class DecodeError(PDFError):
    """
    Raised when the PDF structure cannot be decoded into character events.

    Attributes:
        path: Path to the document (if known)
        original_error: The underlying error from the PDF library
    """

    def __init__(
        self,
        path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.original_error = original_error
        super().__init__(
            message="PDF document could not be decoded",
            path=path,
            details=str(original_error) if original_error else None,
        )


class LayoutWriteError(ConversionError):
    """Raised when the reconstructed text cannot be written to its buffer."""

    def __init__(self, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(
            message="Failed to write reconstructed text",
            details=str(original_error) if original_error else None,
        )


class IncompleteRecordError(ConversionError):
    """
    Raised when a document lacks fields required by its schema.

    Attributes:
        kind: Document kind name
        missing: (section, field) pairs that were not found
        path: Path to the document (if known)
    """

    def __init__(
        self,
        kind: str,
        missing: Sequence[Tuple[str, str]],
        path: Optional[str] = None,
    ):
        self.kind = kind
        self.missing: List[Tuple[str, str]] = list(missing)
        self.path = path
        fields = ", ".join(f"{section}/{name}" for section, name in self.missing)
        message = f"Incomplete {kind} record"
        if path:
            message = f"{message} [{path}]"
        super().__init__(message, details=f"missing {fields}")
