"""
pdfeditx - Page-level editing for PDF documents.

This library loads a PDF once and applies structural edits to it: extracting
pages, splitting at chosen points, reordering or deleting pages, painting
redaction boxes, compressing and merging. Every edit produces a new working
document and is recorded in an operation history that can be rolled back to
the original.

Quick Start:
    >>> from pdfeditx import EditorSession
    >>> session = EditorSession.open('input.pdf')
    >>> session.selection.toggle_page_selection(0)
    >>> output = session.extract()

Main Classes:
    - EditorSession: One loaded PDF with its history and selections
    - Workspace: Several sessions that can be merged into one PDF
    - DocumentChain: Source, working document and operation history
    - SelectionState: Tool mode, page selections, redactions and page order

Exceptions:
    - PDFEditError: Base exception
    - InvalidSelectionError: Selection or parameters rejected
    - InvalidDocumentError: Upload rejected at the input boundary
    - ProcessingFailure: The PDF library failed during an operation

For CLI usage, use the 'pdfeditx' command after installation.
"""

__version__ = "1.0.0"

# Core classes
from pdfeditx.chain import DocumentChain
from pdfeditx.document import Document
from pdfeditx.selection import SelectionState
from pdfeditx.session import EditorSession
from pdfeditx.workspace import Workspace

# Loading
from pdfeditx.config import DEFAULT_SETTINGS, EditorSettings
from pdfeditx.loader import LoadedDocument, aload_document, load_document, load_file

# Operations
from pdfeditx.operations import (
    apply_redactions,
    arrange_pages,
    compress_document,
    extract_pages,
    keep_pages,
    merge_documents,
    reorder_pages,
    split_document,
)
from pdfeditx.pipeline import registry

# Data types
from pdfeditx.types import (
    CompressionResult,
    KeepOnly,
    OutputFile,
    PageInfo,
    RedactionBox,
    Reorder,
    ToolMode,
)

# Exceptions
from pdfeditx.exceptions import (
    InvalidDocumentError,
    InvalidSelectionError,
    PDFEditError,
    ProcessingFailure,
)

__all__ = [
    # Main classes
    "EditorSession",
    "Workspace",
    "DocumentChain",
    "Document",
    "SelectionState",
    # Loading
    "EditorSettings",
    "DEFAULT_SETTINGS",
    "LoadedDocument",
    "load_document",
    "load_file",
    "aload_document",
    # Operations
    "extract_pages",
    "split_document",
    "reorder_pages",
    "keep_pages",
    "arrange_pages",
    "apply_redactions",
    "compress_document",
    "merge_documents",
    "registry",
    # Data types
    "ToolMode",
    "RedactionBox",
    "PageInfo",
    "Reorder",
    "KeepOnly",
    "OutputFile",
    "CompressionResult",
    # Exceptions
    "PDFEditError",
    "InvalidSelectionError",
    "InvalidDocumentError",
    "ProcessingFailure",
    # Version info
    "__version__",
]
