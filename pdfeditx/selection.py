"""Selection state machine for the editing tools.

State is split into two lifetimes:

* :class:`TransientSelection` - intent for the active tool only
  (selected pages, split points). Cleared on every mode switch.
* :class:`DurableEdits` - accumulated edits (redaction boxes, page order)
  that survive mode switches and are cleared only by an explicit reset or
  by the operation that consumes them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Mapping, Sequence, Set, Tuple

from .types import KeepOnly, PageArrangement, RedactionBox, Reorder, ToolMode

LOGGER = logging.getLogger("pdfeditx.selection")


@dataclass
class TransientSelection:
    selected_pages: Set[int] = field(default_factory=set)
    split_points: Set[int] = field(default_factory=set)

    def clear(self) -> None:
        self.selected_pages.clear()
        self.split_points.clear()


@dataclass
class DurableEdits:
    redactions: List[RedactionBox] = field(default_factory=list)
    page_order: List[int] = field(default_factory=list)
    removed_pages: List[int] = field(default_factory=list)

    def reset_page_order(self, page_count: int) -> None:
        self.page_order = list(range(page_count))
        self.removed_pages = []


class SelectionState:
    """Tool mode plus the selections an operation will consume."""

    def __init__(self, page_count: int = 0) -> None:
        self.mode = ToolMode.VIEW
        self.current_page = 0
        self._transient = TransientSelection()
        self._durable = DurableEdits()
        self._durable.reset_page_order(page_count)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def selected_pages(self) -> FrozenSet[int]:
        return frozenset(self._transient.selected_pages)

    @property
    def split_points(self) -> FrozenSet[int]:
        return frozenset(self._transient.split_points)

    @property
    def redactions(self) -> Tuple[RedactionBox, ...]:
        return tuple(self._durable.redactions)

    @property
    def page_order(self) -> Tuple[int, ...]:
        return tuple(self._durable.page_order)

    @property
    def removed_pages(self) -> Tuple[int, ...]:
        return tuple(self._durable.removed_pages)

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------
    def set_mode(self, mode: ToolMode | str) -> None:
        """Switch tools, dropping the previous tool's transient selection."""

        next_mode = ToolMode(mode)
        if ToolMode.REDACT not in (self.mode, next_mode):
            self.current_page = 0
        self._transient.clear()
        LOGGER.debug("Mode changed from %s to %s", self.mode.value, next_mode.value)
        self.mode = next_mode

    def set_current_page(self, page_index: int) -> None:
        self.current_page = page_index

    # ------------------------------------------------------------------
    # Transient selection
    # ------------------------------------------------------------------
    def toggle_page_selection(self, page_index: int) -> None:
        pages = self._transient.selected_pages
        if page_index in pages:
            pages.remove(page_index)
        else:
            pages.add(page_index)

    def toggle_split_point(self, point: int) -> None:
        points = self._transient.split_points
        if point in points:
            points.remove(point)
        else:
            points.add(point)

    # ------------------------------------------------------------------
    # Redactions
    # ------------------------------------------------------------------
    def add_redaction(self, box: RedactionBox) -> bool:
        """Record ``box``; boxes without area are dropped."""

        if box.is_degenerate:
            LOGGER.debug("Ignoring redaction without area: %r", box)
            return False
        self._durable.redactions.append(box)
        return True

    def remove_redaction(self, index: int) -> None:
        if 0 <= index < len(self._durable.redactions):
            del self._durable.redactions[index]

    def redactions_for_page(self, page_index: int) -> List[Tuple[int, RedactionBox]]:
        """Return ``(global_index, box)`` pairs for one page."""

        return [
            (index, box)
            for index, box in enumerate(self._durable.redactions)
            if box.page_index == page_index
        ]

    # ------------------------------------------------------------------
    # Page order
    # ------------------------------------------------------------------
    def initialize_page_order(self, page_count: int) -> None:
        self._durable.reset_page_order(page_count)

    def set_page_order(self, order: Sequence[int]) -> None:
        """Replace the pending order wholesale; checked when committed."""

        self._durable.page_order = list(order)
        self._durable.removed_pages = []

    def move_page_up(self, index: int) -> None:
        order = self._durable.page_order
        if index <= 0 or index >= len(order):
            return
        order[index - 1], order[index] = order[index], order[index - 1]

    def move_page_down(self, index: int) -> None:
        order = self._durable.page_order
        if index < 0 or index >= len(order) - 1:
            return
        order[index], order[index + 1] = order[index + 1], order[index]

    def delete_page(self, index: int) -> None:
        """Remove display position ``index``; the last page cannot be removed."""

        order = self._durable.page_order
        if len(order) <= 1:
            LOGGER.debug("Refusing to delete the last remaining page")
            return
        if index < 0 or index >= len(order):
            return
        self._durable.removed_pages.append(order.pop(index))

    def remap_pages(self, positions: Mapping[int, int]) -> None:
        """Move page references to new positions after the document changed.

        ``positions`` maps old page indices to new ones. Redactions and
        selected pages on pages missing from the map are dropped. Split
        points describe gaps between pages and do not survive a rearrangement.
        """

        kept = []
        for box in self._durable.redactions:
            if box.page_index in positions:
                kept.append(replace(box, page_index=positions[box.page_index]))
            else:
                LOGGER.debug("Dropping redaction on removed page %s", box.page_index)
        self._durable.redactions = kept
        self._transient.selected_pages = {
            positions[index] for index in self._transient.selected_pages if index in positions
        }
        self._transient.split_points.clear()

    def pending_arrangement(self) -> PageArrangement:
        """Describe what committing the page order would do."""

        order = tuple(self._durable.page_order)
        if self._durable.removed_pages:
            return KeepOnly(order)
        return Reorder(order)

    # ------------------------------------------------------------------
    # Resets
    # ------------------------------------------------------------------
    def clear_selections(self) -> None:
        """Drop consumed selections; page order and mode stay."""

        self._transient.clear()
        self._durable.redactions.clear()

    def reset(self, page_count: int) -> None:
        self._transient.clear()
        self._durable.redactions.clear()
        self._durable.reset_page_order(page_count)
        self.current_page = 0
        self.mode = ToolMode.VIEW


__all__ = ["SelectionState", "TransientSelection", "DurableEdits"]
