"""
Custom exceptions for pdfeditx.

This module defines all custom exceptions used throughout the library.
"""

from __future__ import annotations

from typing import Iterable, Optional


class PDFEditError(Exception):
    """Base exception for all pdfeditx errors."""

    code = "PDF_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF editing error occurred."


class InvalidSelectionError(PDFEditError):
    """Raised when a selection cannot be applied to the document.

    ``values`` holds every offending value so the caller can report all of
    them at once.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "", values: Iterable[object] = ()) -> None:
        super().__init__(message)
        self.values = list(values)

    @property
    def default_message(self) -> str:
        return "Invalid selection."


class InvalidDocumentError(PDFEditError):
    """Raised when an input file is rejected before or right after decoding."""

    code = "INVALID_DOCUMENT"

    @property
    def default_message(self) -> str:
        return "Invalid or unsupported PDF file."


class ProcessingFailure(PDFEditError):
    """Raised when the underlying PDF library fails during an operation."""

    code = "PROCESSING_ERROR"

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        message: str = "",
    ) -> None:
        self.operation = operation
        self.cause = cause
        if not message:
            message = f"Failed to {operation} PDF"
            if cause is not None:
                message = f"{message}: {cause}"
        super().__init__(message)
