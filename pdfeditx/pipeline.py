"""Operation registry and base class for pdfeditx executors."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from .document import Document


class BaseOperation:
    """Base class for all registered document operations.

    An operation is configured once and then called with the document it
    transforms, which makes instances usable as executors for
    :meth:`pdfeditx.chain.DocumentChain.apply`.
    """

    name: str

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.config: Dict[str, Any] = dict(config or {})

    @property
    def label(self) -> str:
        """Human-readable history label."""
        return self.name.capitalize()

    def run(self, document: Document) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    def __call__(self, document: Document) -> Any:
        return self.run(document)


class OperationRegistry:
    """Registry storing available operations by name."""

    def __init__(self) -> None:
        self._operations: Dict[str, type[BaseOperation]] = {}

    def register(self, name: str, operation_class: type[BaseOperation]) -> None:
        if name in self._operations:
            raise ValueError(f"Operation '{name}' is already registered")
        self._operations[name] = operation_class

    def create(self, name: str, **config: Any) -> BaseOperation:
        try:
            operation_class = self._operations[name]
        except KeyError as exc:
            available = ", ".join(self.names())
            raise KeyError(f"Operation '{name}' is not registered (available: {available})") from exc
        return operation_class(config)

    def names(self) -> Iterable[str]:
        return sorted(self._operations.keys())


registry = OperationRegistry()


def register_operation(name: str):
    def decorator(cls: type[BaseOperation]) -> type[BaseOperation]:
        cls.name = name
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["BaseOperation", "OperationRegistry", "registry", "register_operation"]
