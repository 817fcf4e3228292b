"""Output file names for generated documents."""

from __future__ import annotations

from pathlib import PurePath
from typing import Sequence, Tuple

from .config import PDF_EXTENSION


def split_name(filename: str) -> Tuple[str, str]:
    """Return ``(stem, extension)``; the extension defaults to ``.pdf``."""

    path = PurePath(filename)
    suffix = path.suffix or PDF_EXTENSION
    stem = path.stem if path.suffix else path.name
    return stem, suffix


def processed_filename(filename: str, history: Sequence[str]) -> str:
    """Name for the working document; unchanged while nothing was applied."""

    if not history:
        return filename
    stem, suffix = split_name(filename)
    return f"{stem}-processed{suffix}"


def part_filename(filename: str, part: int) -> str:
    """Name for the 1-based ``part`` of a split."""

    stem, suffix = split_name(filename)
    return f"{stem}-part{part}{suffix}"


def extract_filename(filename: str, indices: Sequence[int]) -> str:
    """Name for an extraction of 0-based ``indices``.

    Only the first and last sorted index are used; gaps are not reflected.
    """

    if not indices:
        raise ValueError("indices must not be empty")
    stem, suffix = split_name(filename)
    ordered = sorted(indices)
    if len(ordered) == 1:
        label = f"page-{ordered[0] + 1}"
    else:
        label = f"pages-{ordered[0] + 1}-{ordered[-1] + 1}"
    return f"{stem}-{label}{suffix}"


def compressed_filename(filename: str) -> str:
    stem, suffix = split_name(filename)
    return f"{stem}-compressed{suffix}"


MERGED_FILENAME = "merged-document.pdf"

__all__ = [
    "split_name",
    "processed_filename",
    "part_filename",
    "extract_filename",
    "compressed_filename",
    "MERGED_FILENAME",
]
