"""Runtime settings for pdfeditx."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

MAX_FILE_SIZE = 50 * 1024 * 1024
PDF_CONTENT_TYPE = "application/pdf"
PDF_EXTENSION = ".pdf"
THUMBNAIL_SCALE = 1.5
MIN_REDACTION_SIZE = 10.0

ENV_PREFIX = "PDFEDITX_"

Color = Tuple[float, float, float]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_color(value: str) -> Color:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 3:
        raise ValueError(f"Expected three comma separated components, got: {value!r}")
    red, green, blue = (float(part) for part in parts)
    for component in (red, green, blue):
        if not 0.0 <= component <= 1.0:
            raise ValueError(f"Color components must be within 0..1, got: {value!r}")
    return red, green, blue


@dataclass(frozen=True)
class EditorSettings:
    """Behavioural toggles for an editing session.

    Attributes:
        max_file_size: Largest accepted upload in bytes.
        accepted_content_type: The only MIME type accepted at the input boundary.
        thumbnail_scale: Render scale for page thumbnails.
        render_thumbnails: Whether thumbnails are rendered at all.
        redaction_color: RGB fill (0..1 components) for redaction boxes.
        min_redaction_size: Smallest drag, in display pixels, kept as a box.
        compress_on_download: Encode downloads with compression enabled.
    """

    max_file_size: int = MAX_FILE_SIZE
    accepted_content_type: str = PDF_CONTENT_TYPE
    thumbnail_scale: float = THUMBNAIL_SCALE
    render_thumbnails: bool = True
    redaction_color: Color = (0.0, 0.0, 0.0)
    min_redaction_size: float = MIN_REDACTION_SIZE
    compress_on_download: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        """Build settings from ``PDFEDITX_*`` environment variables."""

        env = os.environ if environ is None else environ
        settings = cls()
        updates: dict[str, object] = {}

        raw = env.get(f"{ENV_PREFIX}MAX_FILE_SIZE")
        if raw:
            updates["max_file_size"] = int(raw)
        raw = env.get(f"{ENV_PREFIX}THUMBNAIL_SCALE")
        if raw:
            updates["thumbnail_scale"] = float(raw)
        raw = env.get(f"{ENV_PREFIX}RENDER_THUMBNAILS")
        if raw:
            updates["render_thumbnails"] = _parse_bool(raw)
        raw = env.get(f"{ENV_PREFIX}REDACTION_COLOR")
        if raw:
            updates["redaction_color"] = _parse_color(raw)
        raw = env.get(f"{ENV_PREFIX}MIN_REDACTION_SIZE")
        if raw:
            updates["min_redaction_size"] = float(raw)
        raw = env.get(f"{ENV_PREFIX}COMPRESS_ON_DOWNLOAD")
        if raw:
            updates["compress_on_download"] = _parse_bool(raw)

        return replace(settings, **updates) if updates else settings


DEFAULT_SETTINGS = EditorSettings()

__all__ = [
    "EditorSettings",
    "DEFAULT_SETTINGS",
    "MAX_FILE_SIZE",
    "PDF_CONTENT_TYPE",
    "PDF_EXTENSION",
    "THUMBNAIL_SCALE",
    "MIN_REDACTION_SIZE",
]
