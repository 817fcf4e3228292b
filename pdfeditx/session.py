"""Editing session wiring the transformation core to session state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .chain import DocumentChain
from .config import DEFAULT_SETTINGS, EditorSettings
from .document import Document
from .exceptions import InvalidDocumentError, ProcessingFailure
from .geometry import box_from_drag, unscale_box
from .loader import LoadedDocument, default_renderer, describe_pages, load_file
from .naming import compressed_filename, extract_filename, part_filename, processed_filename
from . import operations  # noqa: F401  # register built-in executors
from .pipeline import BaseOperation, registry
from .renderer import NullRenderer, ThumbnailRenderer
from .selection import SelectionState
from .types import CompressionResult, KeepOnly, OutputFile, PageInfo, RedactionBox
from .utils import pluralize

LOGGER = logging.getLogger("pdfeditx.session")


class EditorSession:
    """One loaded PDF, its version chain and the user's selection state.

    Page indices held by :attr:`selection` always refer to the current
    working document.
    """

    def __init__(
        self,
        loaded: LoadedDocument,
        *,
        settings: EditorSettings = DEFAULT_SETTINGS,
        renderer: Optional[ThumbnailRenderer] = None,
    ) -> None:
        self.loaded = loaded
        self.settings = settings
        self._renderer = renderer or default_renderer(settings)
        self.chain = DocumentChain(loaded.document)
        self.selection = SelectionState(loaded.page_count)
        self._page_infos: Tuple[PageInfo, ...] = loaded.pages

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        *,
        settings: EditorSettings = DEFAULT_SETTINGS,
        renderer: Optional[ThumbnailRenderer] = None,
    ) -> "EditorSession":
        renderer = renderer or default_renderer(settings)
        return cls(load_file(path, settings=settings, renderer=renderer), settings=settings, renderer=renderer)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self.loaded.name

    @property
    def working_document(self) -> Document:
        working = self.chain.working
        if working is None:
            raise InvalidDocumentError("No document loaded.")
        return working

    @property
    def page_count(self) -> int:
        return self.working_document.page_count

    @property
    def page_infos(self) -> Tuple[PageInfo, ...]:
        return self._page_infos

    @property
    def history(self) -> Tuple[str, ...]:
        return self.chain.history

    @property
    def busy(self) -> bool:
        return self.chain.busy

    def status_message(self) -> str:
        if self.chain.has_operations:
            return f"Applied {pluralize(self.chain.operation_count, 'operation')}"
        return "Original PDF"

    # ------------------------------------------------------------------
    # Selection helpers
    # ------------------------------------------------------------------
    def add_redaction_from_drag(
        self,
        page_index: int,
        start: Tuple[float, float],
        end: Tuple[float, float],
        *,
        scale: float = 1.0,
    ) -> Optional[RedactionBox]:
        """Record the box drawn by a pointer drag at zoom ``scale``."""

        box = box_from_drag(page_index, start, end, min_size=self.settings.min_redaction_size)
        if box is None:
            return None
        box = unscale_box(box, scale)
        return box if self.selection.add_redaction(box) else None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def _commit(self, operation: BaseOperation) -> Document:
        result = self.chain.apply(operation, operation.label)
        if result is None:
            raise InvalidDocumentError("No document loaded.")
        return result

    def _follow_pages(self, order: Sequence[int]) -> None:
        """Point selections at the pages of a new working document.

        ``order[new]`` is the old index of the page now at position ``new``.
        """

        positions: Dict[int, int] = {old: new for new, old in enumerate(order)}
        self.selection.remap_pages(positions)

    def _refresh_pages(self, document: Document) -> None:
        try:
            self._page_infos = describe_pages(document, self._renderer)
        except ProcessingFailure as exc:
            LOGGER.warning("Could not render thumbnails for the working document: %s", exc)
            self._page_infos = describe_pages(document, NullRenderer())
        if self.selection.current_page >= document.page_count:
            self.selection.set_current_page(0)

    def extract(self, *, commit: bool = False) -> OutputFile:
        """Export the selected pages as one file.

        With ``commit`` the extraction also becomes the new working document.
        """

        indices = sorted(self.selection.selected_pages)
        operation = registry.create("extract", indices=indices)
        if commit:
            extracted = self._commit(operation)
            self.selection.initialize_page_order(extracted.page_count)
            self._refresh_pages(extracted)
        else:
            with self.chain.in_flight():
                extracted = operation(self.working_document)

        output = OutputFile(extract_filename(self.name, indices), extracted.to_bytes())
        self.selection.clear_selections()
        LOGGER.info("Extracted %s", pluralize(len(indices), "page"))
        return output

    def split(self) -> List[OutputFile]:
        """Export one file per split segment."""

        points = sorted(self.selection.split_points)
        operation = registry.create("split", points=points)
        with self.chain.in_flight():
            parts = operation(self.working_document)
            outputs = [
                OutputFile(part_filename(self.name, number), part.to_bytes())
                for number, part in enumerate(parts, start=1)
            ]
        self.selection.clear_selections()
        LOGGER.info("PDF split into %s", pluralize(len(outputs), "document"))
        return outputs

    def apply_redactions(self) -> Document:
        """Commit the recorded redaction boxes to the working document."""

        boxes = list(self.selection.redactions)
        operation = registry.create("redact", boxes=boxes, color=self.settings.redaction_color)
        redacted = self._commit(operation)
        self._refresh_pages(redacted)
        self.selection.clear_selections()
        return redacted

    def apply_page_order(self) -> Document:
        """Commit the current page order (reorder or delete)."""

        arrangement = self.selection.pending_arrangement()
        operation = registry.create(
            "arrange",
            arrangement=arrangement,
            total_pages=self.page_count,
        )
        arranged = self._commit(operation)
        order = arrangement.indices if isinstance(arrangement, KeepOnly) else arrangement.order
        self._follow_pages(order)
        self.selection.initialize_page_order(arranged.page_count)
        self._refresh_pages(arranged)
        return arranged

    def compress(self) -> CompressionResult:
        """Encode the working document with compression enabled."""

        operation = registry.create("compress")
        with self.chain.in_flight():
            document = operation(self.working_document)
            data = document.to_bytes(compress=True)
        result = CompressionResult(
            output=OutputFile(compressed_filename(self.name), data),
            original_size=self.working_document.size,
        )
        LOGGER.info("Size reduced by %.1f%%", result.reduction_percent)
        return result

    def download(self) -> OutputFile:
        """Encode the working document under its output name."""

        with self.chain.in_flight():
            data = self.working_document.to_bytes(compress=self.settings.compress_on_download)
        return OutputFile(processed_filename(self.name, self.history), data)

    def reset_to_original(self) -> None:
        self.chain.reset_to_original()
        self.selection.reset(self.loaded.page_count)
        self._page_infos = self.loaded.pages


__all__ = ["EditorSession"]
