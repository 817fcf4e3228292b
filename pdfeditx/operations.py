"""Structural operations on :class:`~pdfeditx.document.Document` snapshots.

Every executor takes a document plus parameters and returns a new document
(or a list of documents for :func:`split_document`). Inputs are never
modified.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from pypdf import PageObject
from pypdf.generic import ContentStream, NameObject, RectangleObject

from .config import Color
from .document import Document
from .exceptions import InvalidSelectionError, PDFEditError, ProcessingFailure
from .geometry import display_to_page
from .pipeline import BaseOperation, register_operation
from .types import KeepOnly, PageArrangement, Rect, RedactionBox, Reorder
from .utils import pluralize
from .validators import (
    validate_page_indices,
    validate_page_order,
    validate_redaction,
    validate_redaction_pages,
    validate_split_points,
)

LOGGER = logging.getLogger("pdfeditx.operations")

BLACK: Color = (0.0, 0.0, 0.0)


def _copy_pages(document: Document, indices: Sequence[int], operation: str) -> Document:
    try:
        return Document.from_pages(document, indices)
    except PDFEditError:
        raise
    except Exception as exc:
        raise ProcessingFailure(operation, exc) from exc


def extract_pages(document: Document, indices: Sequence[int]) -> Document:
    """Copy the pages at ``indices`` into a new document, in ascending order."""

    validate_page_indices(indices, document.page_count)
    ordered = sorted(set(indices))
    LOGGER.debug("Extracting pages %s", ordered)
    return _copy_pages(document, ordered, "extract")


def split_document(document: Document, points: Sequence[int]) -> List[Document]:
    """Cut ``document`` at every split point.

    A point ``k`` cuts between page ``k - 1`` and page ``k``. Duplicate points
    produce empty segments, which are skipped.
    """

    total_pages = document.page_count
    validate_split_points(points, total_pages)

    boundaries = [0, *sorted(points), total_pages]
    parts: List[Document] = []
    for start, end in zip(boundaries, boundaries[1:]):
        if start >= end:
            LOGGER.warning("Skipping empty split from %s to %s", start, end)
            continue
        LOGGER.debug("Writing split part with pages %s-%s", start, end - 1)
        parts.append(_copy_pages(document, range(start, end), "split"))

    if not parts:
        raise ProcessingFailure("split", message="Could not create any valid split parts")

    return parts


def reorder_pages(document: Document, order: Sequence[int]) -> Document:
    """Return a document whose pages follow the permutation ``order``."""

    validate_page_order(order, document.page_count)
    return _copy_pages(document, list(order), "reorder")


def keep_pages(document: Document, keep: Sequence[int]) -> Document:
    """Return a document with only the pages in ``keep``, in keep-list order."""

    if not keep:
        raise InvalidSelectionError("Cannot delete all pages.")
    validate_page_indices(keep, document.page_count)
    LOGGER.debug("Keeping pages %s of %s", list(keep), document.page_count)
    return _copy_pages(document, list(keep), "delete")


def arrange_pages(document: Document, arrangement: PageArrangement) -> Document:
    """Apply an explicit :class:`Reorder` or :class:`KeepOnly` arrangement."""

    if isinstance(arrangement, Reorder):
        return reorder_pages(document, arrangement.order)
    if isinstance(arrangement, KeepOnly):
        return keep_pages(document, arrangement.indices)
    raise TypeError(f"Unsupported page arrangement: {arrangement!r}")


def _format_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text if text not in {"", "-0"} else "0"


def _fill_operations(rects: Sequence[Rect], color: Color) -> bytes:
    red, green, blue = color
    lines = [f"{_format_number(red)} {_format_number(green)} {_format_number(blue)} rg"]
    for rect in rects:
        lines.append(
            f"{_format_number(rect.x)} {_format_number(rect.y)} "
            f"{_format_number(rect.width)} {_format_number(rect.height)} re f"
        )
    return ("\n".join(lines) + "\n").encode("ascii")


def _paint_rectangles(page: PageObject, rects: Sequence[Rect], color: Color) -> None:
    media_box = page.mediabox
    overlay = PageObject.create_blank_page(width=media_box.width, height=media_box.height)
    overlay[NameObject("/MediaBox")] = RectangleObject(
        [media_box.left, media_box.bottom, media_box.right, media_box.top]
    )
    origin_x = float(media_box.left)
    origin_y = float(media_box.bottom)
    shifted = [
        Rect(x=rect.x + origin_x, y=rect.y + origin_y, width=rect.width, height=rect.height)
        for rect in rects
    ]
    content = ContentStream(None, None)
    content.set_data(_fill_operations(shifted, color))
    overlay[NameObject("/Contents")] = content
    page.merge_page(overlay)


def apply_redactions(
    document: Document,
    boxes: Sequence[RedactionBox],
    *,
    color: Color = BLACK,
) -> Document:
    """Paint opaque rectangles over every box and return the result.

    Boxes are in display space (top-left origin); they are flipped into page
    space before drawing. Boxes without area are skipped.
    """

    total_pages = document.page_count
    validate_redaction_pages(boxes, total_pages)

    by_page: Dict[int, List[Rect]] = defaultdict(list)
    for box in boxes:
        page = document.page(box.page_index)
        if not validate_redaction(box, total_pages, page.width, page.height):
            LOGGER.warning(
                "Skipping invalid redaction with dimensions %sx%s", box.width, box.height
            )
            continue
        by_page[box.page_index].append(display_to_page(box, page.height))

    try:
        writer = document.new_writer()
        for index in range(total_pages):
            added = writer.add_page(document.page_object(index))
            rects = by_page.get(index)
            if rects:
                _paint_rectangles(added, rects, color)
        redacted = Document.from_writer(writer)
    except PDFEditError:
        raise
    except Exception as exc:
        raise ProcessingFailure("redact", exc) from exc

    LOGGER.debug(
        "Applied %s redactions across %s pages",
        sum(len(rects) for rects in by_page.values()),
        len(by_page),
    )
    return redacted


def compress_document(document: Document) -> Document:
    """Structural no-op; compression happens in :meth:`Document.to_bytes`."""

    return document


def merge_documents(documents: Sequence[Document]) -> Document:
    """Concatenate ``documents`` in order into one document."""

    if len(documents) < 2:
        raise InvalidSelectionError("Need at least 2 PDFs to merge.", values=[len(documents)])

    try:
        writer = documents[0].new_writer()
        for document in documents:
            for index in range(document.page_count):
                writer.add_page(document.page_object(index))
        return Document.from_writer(writer)
    except PDFEditError:
        raise
    except Exception as exc:
        raise ProcessingFailure("merge", exc) from exc


# ----------------------------------------------------------------------
# Registered executors
# ----------------------------------------------------------------------
@register_operation("extract")
class ExtractOperation(BaseOperation):
    @property
    def label(self) -> str:
        return f"Extract {pluralize(len(set(self.config['indices'])), 'page')}"

    def run(self, document: Document) -> Document:
        return extract_pages(document, self.config["indices"])


@register_operation("split")
class SplitOperation(BaseOperation):
    @property
    def label(self) -> str:
        return f"Split at {pluralize(len(self.config['points']), 'point')}"

    def run(self, document: Document) -> List[Document]:
        return split_document(document, self.config["points"])


@register_operation("arrange")
class ArrangeOperation(BaseOperation):
    """Reorder or delete pages depending on the arrangement variant."""

    @property
    def label(self) -> str:
        arrangement = self.config["arrangement"]
        if isinstance(arrangement, KeepOnly):
            total_pages = self.config.get("total_pages")
            if total_pages is None:
                return "Delete pages"
            return f"Delete {pluralize(total_pages - len(arrangement.indices), 'page')}"
        return "Reorder pages"

    def run(self, document: Document) -> Document:
        return arrange_pages(document, self.config["arrangement"])


@register_operation("redact")
class RedactOperation(BaseOperation):
    @property
    def label(self) -> str:
        return f"Apply {pluralize(len(self.config['boxes']), 'redaction')}"

    def run(self, document: Document) -> Document:
        return apply_redactions(
            document,
            self.config["boxes"],
            color=self.config.get("color", BLACK),
        )


@register_operation("compress")
class CompressOperation(BaseOperation):
    def run(self, document: Document) -> Document:
        return compress_document(document)


@register_operation("merge")
class MergeOperation(BaseOperation):
    """Append ``config['others']`` after the document it is called with."""

    @property
    def label(self) -> str:
        return f"Merge {pluralize(len(self.config['others']) + 1, 'document')}"

    def run(self, document: Document) -> Document:
        return merge_documents([document, *self.config["others"]])


__all__ = [
    "extract_pages",
    "split_document",
    "reorder_pages",
    "keep_pages",
    "arrange_pages",
    "apply_redactions",
    "compress_document",
    "merge_documents",
    "ExtractOperation",
    "SplitOperation",
    "ArrangeOperation",
    "RedactOperation",
    "CompressOperation",
    "MergeOperation",
]
