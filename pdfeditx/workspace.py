"""Multi-document workspace."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .exceptions import InvalidSelectionError
from .naming import MERGED_FILENAME
from .pipeline import registry
from .session import EditorSession
from .types import OutputFile
from .utils import pluralize

LOGGER = logging.getLogger("pdfeditx.workspace")


class Workspace:
    """Ordered collection of editing sessions with one current document."""

    def __init__(self) -> None:
        self._sessions: List[EditorSession] = []
        self._current: Optional[EditorSession] = None

    @property
    def documents(self) -> List[EditorSession]:
        return list(self._sessions)

    @property
    def current(self) -> Optional[EditorSession]:
        return self._current

    def __len__(self) -> int:
        return len(self._sessions)

    def add_document(self, session: EditorSession) -> None:
        """Append ``session`` and make it the current document."""

        self._sessions.append(session)
        self._current = session
        LOGGER.debug("Added %s to the workspace", session.name)

    def set_current(self, index: int) -> EditorSession:
        if index < 0 or index >= len(self._sessions):
            raise InvalidSelectionError(
                f"Invalid document index: {index}. Workspace has {len(self._sessions)} documents.",
                values=[index],
            )
        self._current = self._sessions[index]
        return self._current

    def remove_document(self, index: int) -> None:
        """Drop the document at ``index``.

        Removing the current document selects the first remaining one.
        """

        if index < 0 or index >= len(self._sessions):
            return
        removed = self._sessions.pop(index)
        if removed is self._current:
            self._current = self._sessions[0] if self._sessions else None

    def reorder_documents(self, order: Sequence[int]) -> None:
        """Rearrange documents so that position ``i`` holds ``order[i]``."""

        total = len(self._sessions)
        if sorted(order) != list(range(total)):
            raise InvalidSelectionError(
                f"Invalid document order. Expected a permutation of {total} documents.",
                values=list(order),
            )
        self._sessions = [self._sessions[index] for index in order]

    def merge(self) -> OutputFile:
        """Concatenate every working document in workspace order."""

        if len(self._sessions) < 2:
            raise InvalidSelectionError("Need at least 2 PDFs to merge.", values=[len(self._sessions)])

        first, *rest = [session.working_document for session in self._sessions]
        operation = registry.create("merge", others=rest)
        merged = operation(first)
        LOGGER.info("Merged %s into %s", pluralize(len(self._sessions), "document"), MERGED_FILENAME)
        return OutputFile(MERGED_FILENAME, merged.to_bytes())

    def clear(self) -> None:
        self._sessions.clear()
        self._current = None


__all__ = ["Workspace"]
