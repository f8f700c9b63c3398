"""The top-level document object."""

from __future__ import annotations

from typing import Any

from .diagnostics import DiagnosticHandler

__all__ = ["Document"]


class Document:
    """A document: its version, root object and diagnostic handler."""

    def __init__(self) -> None:
        self._version = 0
        self._root: Any = None
        self._objects: dict[Any, Any] = {}
        self.diagnostic_handler: DiagnosticHandler | None = None

    @property
    def version(self) -> int:
        """The document version, 0 until one is known."""
        return self._version

    @property
    def root(self) -> Any:
        """The root object, or None."""
        return self._root

    def get_object(self, obj_id: Any) -> Any:
        """Look up an object by its identifier, or None if it is not known."""
        return self._objects.get(obj_id)