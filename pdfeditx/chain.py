"""Version chain of working documents."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

from .document import Document
from .validators import validate_document

LOGGER = logging.getLogger("pdfeditx.chain")

Executor = Callable[[Document], Document]


class DocumentChain:
    """Owns the source document, the current working document and the history.

    Each successful :meth:`apply` replaces the working document with the
    executor's result and appends a label. Failures leave both untouched.
    """

    def __init__(self, source: Optional[Document] = None) -> None:
        self._source: Optional[Document] = None
        self._working: Optional[Document] = None
        self._history: List[str] = []
        self.busy = False
        if source is not None:
            self.load(source)

    @property
    def source(self) -> Optional[Document]:
        return self._source

    @property
    def working(self) -> Optional[Document]:
        return self._working

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    @property
    def operation_count(self) -> int:
        return len(self._history)

    @property
    def has_operations(self) -> bool:
        return bool(self._history)

    @contextmanager
    def in_flight(self) -> Iterator[None]:
        """Mark the chain busy for the duration of the block.

        Callers are expected to check :attr:`busy` before starting another
        operation; the chain itself does not queue or reject calls.
        """

        self.busy = True
        try:
            yield
        finally:
            self.busy = False

    def load(self, source: Document) -> None:
        """Start a new chain from ``source``."""

        self._source = source
        self._working = source
        self._history.clear()

    def apply(self, executor: Executor, label: str) -> Optional[Document]:
        """Run ``executor`` on the working document and commit its result.

        Returns ``None`` when there is nothing loaded. Any exception raised by
        the executor propagates and nothing is committed.
        """

        if self._working is None:
            return None

        LOGGER.debug("Applying '%s' to %r", label, self._working)
        with self.in_flight():
            result = executor(self._working)
            validate_document(result)

        self._working = result
        self._history.append(label)
        LOGGER.info("%s applied (%s operations in history)", label, len(self._history))
        return result

    def reset_to_original(self) -> None:
        """Drop every applied operation and return to the source document."""

        self._working = self._source
        self._history.clear()

    def clear(self) -> None:
        self._source = None
        self._working = None
        self._history.clear()


__all__ = ["DocumentChain", "Executor"]
