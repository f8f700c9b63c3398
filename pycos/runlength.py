"""Decoding of run-length encoded streams."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .filter import Filter

__all__ = ["RunLengthDecoder"]

_BUFFER_SIZE = 256
_EOD = 128
_MAX_LITERAL_INDICATOR = 127


class _RunType(Enum):
    NONE = 0
    LITERAL = 1
    COPY = 2


class RunLengthDecoder(Filter):
    """A filter that decodes run-length encoded data read from its source.

    A length byte of 0 to 127 is followed by that many plus one bytes that
    are copied as they are; a length byte of 129 to 255 is followed by one
    byte that is repeated 257 minus the length times; 128 ends the data.
    """

    def __init__(self, source: Any = None) -> None:
        super().__init__(source)
        self._decoded = bytearray()
        self._index = 0
        self._run_type = _RunType.NONE
        self._remaining = 0
        self._repeated = 0
        self._eod = False

    def readinto(self, buffer: Any) -> int:
        """Decode into ``buffer`` and return the number of bytes written."""
        self._check_open()
        view = memoryview(buffer).cast("B")
        total = 0
        while total < len(view):
            if self._index >= len(self._decoded):
                if self._eod:
                    break
                if self._fill(len(view) - total) == 0:
                    break
            count = min(len(self._decoded) - self._index, len(view) - total)
            view[total:total + count] = self._decoded[self._index:self._index + count]
            self._index += count
            total += count
        return total

    def _fill(self, count: int) -> int:
        """Decode at least ``count`` bytes (capped at 256) into the internal buffer."""
        self._decoded = bytearray()
        self._index = 0
        self._require_source()

        limit = min(count, _BUFFER_SIZE)
        while len(self._decoded) < limit:
            if self._decode_run() == 0:
                break
        return len(self._decoded)

    def _decode_run(self) -> int:
        """Decode as much of the current run as fits; return the bytes added."""
        if self._run_type is _RunType.NONE or self._remaining == 0:
            indicator = self._read_source_byte()
            if indicator is None:
                self._eod = True
                return 0
            if indicator == _EOD:
                self._run_type = _RunType.NONE
                self._remaining = 0
                self._eod = True
                return 0
            if indicator <= _MAX_LITERAL_INDICATOR:
                self._run_type = _RunType.LITERAL
                self._remaining = indicator + 1
            else:
                self._run_type = _RunType.COPY
                self._remaining = 257 - indicator
                repeated = self._read_source_byte()
                if repeated is None:
                    self._eod = True
                    return 0
                self._repeated = repeated

        space = _BUFFER_SIZE - len(self._decoded)
        if self._remaining == 0 or space <= 0:
            return 0

        wanted = min(self._remaining, space)
        if self._run_type is _RunType.LITERAL:
            chunk = self._require_source().read(wanted)
            if not chunk:
                return 0
            chunk = bytes(chunk[:wanted])
        else:
            chunk = bytes((self._repeated,)) * wanted

        self._decoded.extend(chunk)
        self._remaining -= len(chunk)
        return len(chunk)