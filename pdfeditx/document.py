"""Immutable document snapshots built on top of :mod:`pypdf`."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from .exceptions import InvalidDocumentError, ProcessingFailure

LOGGER = logging.getLogger("pdfeditx.document")


@dataclass(frozen=True)
class Page:
    """Geometry of one page inside a :class:`Document`."""

    index: int
    width: float
    height: float


class Document:
    """Read-only snapshot of an ordered page sequence.

    Every document owns the bytes it was decoded from; operations never edit a
    document, they build a fresh one with :meth:`from_writer`.
    """

    def __init__(self, reader: PdfReader, data: bytes) -> None:
        self._reader = reader
        self._data = data
        self._pages: Tuple[Page, ...] | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "Document":
        """Decode ``data`` into a document."""

        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise ProcessingFailure("load", exc, f"Corrupted or invalid PDF data: {exc}") from exc
        except Exception as exc:
            raise ProcessingFailure("load", exc) from exc

        if reader.is_encrypted:
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:
                raise InvalidDocumentError("PDF is encrypted and cannot be edited.") from exc
            if not decrypted:
                raise InvalidDocumentError("PDF is encrypted and cannot be edited.")

        return cls(reader, data)

    @classmethod
    def from_writer(cls, writer: PdfWriter) -> "Document":
        """Serialize ``writer`` and decode the result into a new snapshot."""

        buffer = io.BytesIO()
        writer.write(buffer)
        return cls.from_bytes(buffer.getvalue())

    @classmethod
    def from_pages(cls, source: "Document", indices: Iterable[int]) -> "Document":
        """Build a document containing copies of ``source`` pages at ``indices``."""

        writer = source.new_writer()
        for index in indices:
            writer.add_page(source.page_object(index))
        return cls.from_writer(writer)

    # ------------------------------------------------------------------
    # Page access
    # ------------------------------------------------------------------
    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    @property
    def pages(self) -> Tuple[Page, ...]:
        if self._pages is None:
            self._pages = tuple(
                Page(index=index, width=float(page.mediabox.width), height=float(page.mediabox.height))
                for index, page in enumerate(self._reader.pages)
            )
        return self._pages

    def page(self, index: int) -> Page:
        return self.pages[index]

    def page_object(self, index: int) -> PageObject:
        """Return the underlying :class:`pypdf.PageObject` (treat as read-only)."""
        return self._reader.pages[index]

    @property
    def metadata(self) -> dict[str, str]:
        metadata = self._reader.metadata or {}
        return {str(key): str(value) for key, value in metadata.items() if value is not None}

    @property
    def size(self) -> int:
        return len(self._data)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------
    def new_writer(self) -> PdfWriter:
        """Return an empty writer carrying this document's metadata."""

        writer = PdfWriter()
        metadata = self.metadata
        if metadata:
            writer.add_metadata(metadata)
        return writer

    def to_bytes(self, *, compress: bool = False) -> bytes:
        """Encode the document.

        With ``compress`` the page content streams are flate-compressed and
        identical objects are merged before writing.
        """

        if not compress:
            return self._data

        try:
            writer = self.new_writer()
            for page in self._reader.pages:
                added = writer.add_page(page)
                try:
                    added.compress_content_streams()
                except Exception as exc:  # pragma: no cover - depends on page content
                    LOGGER.warning("Failed to compress content streams: %s", exc)
            writer.compress_identical_objects()
            buffer = io.BytesIO()
            writer.write(buffer)
        except Exception as exc:
            raise ProcessingFailure("compress", exc) from exc

        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Document(pages={self.page_count}, size={self.size})"


__all__ = ["Document", "Page"]
