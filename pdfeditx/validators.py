"""Validation helpers gating every structural operation.

All checks collect every offending value before raising so a caller can
report the complete problem in one message.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import PurePath
from typing import Iterable, Optional, Sequence

from .config import DEFAULT_SETTINGS, PDF_EXTENSION, EditorSettings
from .document import Document
from .exceptions import InvalidDocumentError, InvalidSelectionError
from .geometry import exceeds_page
from .types import RedactionBox
from .utils import format_file_size

LOGGER = logging.getLogger("pdfeditx.validators")


def _format_values(values: Iterable[object]) -> str:
    return ", ".join(str(value) for value in values)


def validate_page_indices(indices: Sequence[int], total_pages: int) -> None:
    """Validate 0-based page indices against ``total_pages``."""

    if not indices:
        raise InvalidSelectionError("No pages selected.")

    invalid = [index for index in indices if index < 0 or index >= total_pages]
    if invalid:
        raise InvalidSelectionError(
            f"Invalid page indices: {_format_values(invalid)}. PDF has {total_pages} pages.",
            values=invalid,
        )


def validate_split_points(points: Sequence[int], total_pages: int) -> None:
    """Validate split points; both document edges are rejected."""

    if not points:
        raise InvalidSelectionError("No split points provided.")

    invalid = [point for point in points if point <= 0 or point >= total_pages]
    if invalid:
        raise InvalidSelectionError(
            f"Invalid split points: {_format_values(invalid)}. PDF has {total_pages} pages.",
            values=invalid,
        )


def validate_page_order(order: Sequence[int], total_pages: int) -> None:
    """Validate a full page permutation used for reordering."""

    if not order:
        raise InvalidSelectionError("No pages to reorder.")

    invalid = [index for index in order if index < 0 or index >= total_pages]
    if invalid:
        raise InvalidSelectionError(
            f"Invalid page indices: {_format_values(invalid)}. PDF has {total_pages} pages.",
            values=invalid,
        )

    if len(order) != total_pages:
        raise InvalidSelectionError(
            f"Page order length ({len(order)}) must match the total page count ({total_pages}).",
            values=[len(order)],
        )

    duplicates = sorted(index for index, count in Counter(order).items() if count > 1)
    if duplicates:
        raise InvalidSelectionError(
            f"Duplicate page indices: {_format_values(duplicates)}. Each page must appear exactly once.",
            values=duplicates,
        )


def validate_redaction(
    box: RedactionBox,
    total_pages: int,
    page_width: float,
    page_height: float,
) -> bool:
    """Check a redaction box.

    Returns ``False`` when the box has no area and should be skipped. Boxes
    reaching past the page edge are kept; drawing clips them.

    Raises:
        InvalidSelectionError: If the box targets a page that does not exist.
    """

    if box.page_index < 0 or box.page_index >= total_pages:
        raise InvalidSelectionError(
            f"Invalid page index {box.page_index}. PDF has {total_pages} pages.",
            values=[box.page_index],
        )

    if box.is_degenerate:
        return False

    if exceeds_page(box, page_width, page_height):
        LOGGER.warning("Redaction on page %s extends beyond page bounds", box.page_index)

    return True


def validate_redaction_pages(boxes: Sequence[RedactionBox], total_pages: int) -> None:
    """Reject a batch when any box targets a missing page."""

    if not boxes:
        raise InvalidSelectionError("No redactions provided.")

    invalid = [box.page_index for box in boxes if box.page_index < 0 or box.page_index >= total_pages]
    if invalid:
        raise InvalidSelectionError(
            f"Invalid redaction page indices: {_format_values(invalid)}. PDF has {total_pages} pages.",
            values=invalid,
        )


def validate_document(document: Document) -> None:
    """Ensure ``document`` has at least one page."""

    if document.page_count == 0:
        raise InvalidDocumentError("PDF appears to be empty or corrupted.")


def validate_upload(
    size: int,
    *,
    content_type: Optional[str] = None,
    filename: Optional[str] = None,
    settings: EditorSettings = DEFAULT_SETTINGS,
) -> None:
    """Check an incoming file before any parsing is attempted.

    The declared ``content_type`` wins when given; otherwise the ``filename``
    extension must be ``.pdf``.
    """

    if content_type is not None:
        if content_type != settings.accepted_content_type:
            raise InvalidDocumentError(
                f"Invalid file type '{content_type}'. Please select a PDF file."
            )
    elif filename is None or PurePath(filename).suffix.lower() != PDF_EXTENSION:
        raise InvalidDocumentError(
            f"File does not have .pdf extension: {filename}"
        )

    if size > settings.max_file_size:
        raise InvalidDocumentError(
            f"File too large ({format_file_size(size)}). "
            f"Please select a PDF under {format_file_size(settings.max_file_size)}."
        )


__all__ = [
    "validate_page_indices",
    "validate_split_points",
    "validate_page_order",
    "validate_redaction",
    "validate_redaction_pages",
    "validate_document",
    "validate_upload",
]
