"""
Type definitions and dataclasses for pdfeditx.

This module defines data structures shared by the editing core, the
session layer and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

EMPTY_THUMBNAIL = b""


class ToolMode(str, Enum):
    """Editing tool currently active in a session."""

    VIEW = "view"
    EXTRACT = "extract"
    SPLIT = "split"
    REDACT = "redact"
    REORDER = "reorder"


@dataclass(frozen=True)
class RedactionBox:
    """
    Rectangle to occlude on one page.

    Coordinates are in display space: origin at the top-left corner of the
    page, y growing downwards.

    Attributes:
        page_index: 0-based index of the target page
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height
    """
    page_index: int
    x: float
    y: float
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rect:
    """Rectangle in page space (origin at the bottom-left corner)."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PageInfo:
    """
    Display metadata for one page.

    Attributes:
        page_number: 1-based page number
        width: Page width in points
        height: Page height in points
        thumbnail: PNG bytes, or ``EMPTY_THUMBNAIL`` when none is available
    """
    page_number: int
    width: float
    height: float
    thumbnail: bytes = EMPTY_THUMBNAIL

    @property
    def has_thumbnail(self) -> bool:
        return bool(self.thumbnail)


@dataclass(frozen=True)
class Reorder:
    """Full permutation of original page indices."""

    order: Tuple[int, ...]

    @property
    def kind(self) -> str:
        return "reorder"


@dataclass(frozen=True)
class KeepOnly:
    """Original page indices to retain, in output order."""

    indices: Tuple[int, ...]

    @property
    def kind(self) -> str:
        return "delete"


PageArrangement = Union[Reorder, KeepOnly]


@dataclass(frozen=True)
class OutputFile:
    """A generated file handed back to the caller."""

    filename: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return f"OutputFile(filename='{self.filename}', size={self.size})"


@dataclass(frozen=True)
class CompressionResult:
    """
    Outcome of a compression run.

    Attributes:
        output: The compressed file
        original_size: Size of the source file in bytes
    """
    output: OutputFile
    original_size: int

    @property
    def compressed_size(self) -> int:
        return self.output.size

    @property
    def bytes_saved(self) -> int:
        return max(self.original_size - self.compressed_size, 0)

    @property
    def reduction_percent(self) -> float:
        if self.original_size == 0:
            return 0.0
        return (self.original_size - self.compressed_size) / self.original_size * 100


__all__ = [
    "EMPTY_THUMBNAIL",
    "ToolMode",
    "RedactionBox",
    "Rect",
    "PageInfo",
    "Reorder",
    "KeepOnly",
    "PageArrangement",
    "OutputFile",
    "CompressionResult",
]
