"""Page thumbnails rendered with pypdfium2."""

from __future__ import annotations

import io
import logging
from typing import List, Protocol

import pypdfium2 as pdfium

from .config import THUMBNAIL_SCALE
from .exceptions import ProcessingFailure
from .types import EMPTY_THUMBNAIL

LOGGER = logging.getLogger("pdfeditx.renderer")


class ThumbnailRenderer(Protocol):
    """Anything able to turn PDF bytes into one PNG per page."""

    def render(self, data: bytes, page_count: int) -> List[bytes]:
        """Return ``page_count`` thumbnails; failed pages get ``EMPTY_THUMBNAIL``."""


class PdfiumRenderer:
    """Render thumbnails through PDFium."""

    def __init__(self, scale: float = THUMBNAIL_SCALE) -> None:
        self.scale = scale

    def render(self, data: bytes, page_count: int) -> List[bytes]:
        try:
            document = pdfium.PdfDocument(data)
        except Exception as exc:
            raise ProcessingFailure("render", exc) from exc

        thumbnails: List[bytes] = []
        try:
            for index in range(page_count):
                thumbnails.append(self._render_page(document, index))
        finally:
            document.close()
        return thumbnails

    def _render_page(self, document: "pdfium.PdfDocument", index: int) -> bytes:
        try:
            page = document[index]
            try:
                image = page.render(scale=self.scale).to_pil()
            finally:
                page.close()
            buffer = io.BytesIO()
            image.convert("RGB").save(buffer, format="PNG")
            return buffer.getvalue()
        except Exception as exc:
            LOGGER.warning("Failed to render thumbnail for page %s: %s", index + 1, exc)
            return EMPTY_THUMBNAIL


class NullRenderer:
    """Renderer used when thumbnails are disabled."""

    def render(self, data: bytes, page_count: int) -> List[bytes]:
        return [EMPTY_THUMBNAIL] * page_count


__all__ = ["ThumbnailRenderer", "PdfiumRenderer", "NullRenderer"]
