"""Conversions between display space and page space.

Display space is what a pointer draws on: origin at the top-left corner,
y growing downwards, optionally scaled by a zoom factor. Page space is the
PDF user space: origin at the bottom-left corner, y growing upwards.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .config import MIN_REDACTION_SIZE
from .types import Rect, RedactionBox

Point = Tuple[float, float]


def display_to_page(box: RedactionBox, page_height: float, scale: float = 1.0) -> Rect:
    """Map a display-space box onto the page, flipping the vertical axis."""

    if scale <= 0:
        raise ValueError("scale must be positive")
    x = box.x / scale
    y = box.y / scale
    width = box.width / scale
    height = box.height / scale
    return Rect(x=x, y=page_height - y - height, width=width, height=height)


def page_to_display(
    rect: Rect,
    page_height: float,
    page_index: int,
    scale: float = 1.0,
) -> RedactionBox:
    """Inverse of :func:`display_to_page`."""

    if scale <= 0:
        raise ValueError("scale must be positive")
    top = page_height - rect.y - rect.height
    return RedactionBox(
        page_index=page_index,
        x=rect.x * scale,
        y=top * scale,
        width=rect.width * scale,
        height=rect.height * scale,
    )


def box_from_drag(
    page_index: int,
    start: Point,
    end: Point,
    min_size: float = MIN_REDACTION_SIZE,
) -> Optional[RedactionBox]:
    """Normalize a pointer drag into a box, or ``None`` for tiny drags."""

    x = min(start[0], end[0])
    y = min(start[1], end[1])
    width = abs(end[0] - start[0])
    height = abs(end[1] - start[1])
    if width <= min_size or height <= min_size:
        return None
    return RedactionBox(page_index=page_index, x=x, y=y, width=width, height=height)


def unscale_box(box: RedactionBox, scale: float) -> RedactionBox:
    """Convert a box drawn at zoom ``scale`` back to unzoomed display units."""

    if scale <= 0:
        raise ValueError("scale must be positive")
    if scale == 1.0:
        return box
    return RedactionBox(
        page_index=box.page_index,
        x=box.x / scale,
        y=box.y / scale,
        width=box.width / scale,
        height=box.height / scale,
    )


def exceeds_page(box: RedactionBox, page_width: float, page_height: float) -> bool:
    """Return ``True`` when ``box`` reaches past any edge of the page."""

    return (
        box.x < 0
        or box.y < 0
        or box.x + box.width > page_width
        or box.y + box.height > page_height
    )


__all__ = ["display_to_page", "page_to_display", "box_from_drag", "unscale_box", "exceeds_page"]
