"""Input boundary: checking, decoding and describing uploaded PDFs."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import DEFAULT_SETTINGS, EditorSettings
from .document import Document
from .exceptions import InvalidDocumentError
from .renderer import NullRenderer, PdfiumRenderer, ThumbnailRenderer
from .types import PageInfo
from .validators import validate_document, validate_upload

LOGGER = logging.getLogger("pdfeditx.loader")


@dataclass(frozen=True)
class LoadedDocument:
    """
    A decoded upload together with its display metadata.

    Attributes:
        name: Original file name
        document: Decoded source document
        pages: Per-page display metadata
        file_size: Size of the uploaded bytes
    """
    name: str
    document: Document
    pages: Tuple[PageInfo, ...]
    file_size: int

    @property
    def page_count(self) -> int:
        return self.document.page_count


def default_renderer(settings: EditorSettings = DEFAULT_SETTINGS) -> ThumbnailRenderer:
    if not settings.render_thumbnails:
        return NullRenderer()
    return PdfiumRenderer(scale=settings.thumbnail_scale)


def describe_pages(
    document: Document,
    renderer: ThumbnailRenderer,
) -> Tuple[PageInfo, ...]:
    """Build :class:`PageInfo` entries for every page of ``document``."""

    thumbnails: List[bytes] = renderer.render(document.to_bytes(), document.page_count)
    return tuple(
        PageInfo(
            page_number=page.index + 1,
            width=page.width,
            height=page.height,
            thumbnail=thumbnails[page.index],
        )
        for page in document.pages
    )


def load_document(
    data: bytes,
    name: str,
    *,
    content_type: Optional[str] = None,
    settings: EditorSettings = DEFAULT_SETTINGS,
    renderer: Optional[ThumbnailRenderer] = None,
) -> LoadedDocument:
    """Validate and decode ``data``.

    Raises:
        InvalidDocumentError: Wrong type, too large, encrypted or without pages.
        ProcessingFailure: The bytes could not be decoded or rendered.
    """

    validate_upload(len(data), content_type=content_type, filename=name, settings=settings)

    document = Document.from_bytes(data)
    validate_document(document)

    pages = describe_pages(document, renderer or default_renderer(settings))
    LOGGER.info("Loaded %s (%s pages, %s bytes)", name, document.page_count, len(data))
    return LoadedDocument(name=name, document=document, pages=pages, file_size=len(data))


def load_file(
    path: Union[str, Path],
    *,
    settings: EditorSettings = DEFAULT_SETTINGS,
    renderer: Optional[ThumbnailRenderer] = None,
) -> LoadedDocument:
    """Read ``path`` from disk and load it with :func:`load_document`."""

    pdf_path = Path(path)
    if not pdf_path.exists() or not pdf_path.is_file():
        raise InvalidDocumentError(f"PDF file not found: {pdf_path}")

    size = pdf_path.stat().st_size
    validate_upload(size, filename=pdf_path.name, settings=settings)

    try:
        data = pdf_path.read_bytes()
    except OSError as exc:
        raise InvalidDocumentError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

    return load_document(data, pdf_path.name, settings=settings, renderer=renderer)


async def aload_document(
    data: bytes,
    name: str,
    *,
    content_type: Optional[str] = None,
    settings: EditorSettings = DEFAULT_SETTINGS,
    renderer: Optional[ThumbnailRenderer] = None,
) -> LoadedDocument:
    """Run :func:`load_document` in a worker thread."""

    return await asyncio.to_thread(
        load_document,
        data,
        name,
        content_type=content_type,
        settings=settings,
        renderer=renderer,
    )


__all__ = [
    "LoadedDocument",
    "load_document",
    "load_file",
    "aload_document",
    "describe_pages",
    "default_renderer",
]
