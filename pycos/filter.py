"""Readable filter streams layered over a source stream."""

from __future__ import annotations

import io
from typing import Any

from .errors import CosError, ErrorCode

__all__ = ["Filter"]


class Filter(io.RawIOBase):
    """A read-only stream that draws its input from a source stream.

    The source is any object with ``read(n)`` and ``close()``. The base
    filter passes the source's bytes through unchanged; decoders override
    ``readinto``. Closing the filter closes the attached source.
    """

    def __init__(self, source: Any = None) -> None:
        super().__init__()
        self._source = source

    @property
    def source(self) -> Any:
        """The attached source stream, or None."""
        return self._source

    def attach_source(self, source: Any) -> None:
        """Use ``source`` as the stream to read input from."""
        if source is None:
            raise CosError(ErrorCode.INVALID_ARGUMENT, "Source must not be None")
        self._source = source

    def detach_source(self) -> None:
        """Forget the source stream without closing it."""
        self._source = None

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        """Copy bytes from the source into ``buffer`` and return how many."""
        self._check_open()
        view = memoryview(buffer).cast("B")
        data = self._require_source().read(len(view))
        if not data:
            return 0
        data = bytes(data[: len(view)])
        view[: len(data)] = data
        return len(data)

    def close(self) -> None:
        """Close the filter and its source stream."""
        if self.closed:
            return
        try:
            if self._source is not None:
                self._source.close()
        finally:
            super().close()

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def _require_source(self) -> Any:
        if self._source is None:
            raise CosError(ErrorCode.INVALID_ARGUMENT, "No source stream")
        return self._source

    def _read_source_byte(self) -> int | None:
        """Read one byte from the source, or None at its end."""
        chunk = self._require_source().read(1)
        if not chunk:
            return None
        return chunk[0]