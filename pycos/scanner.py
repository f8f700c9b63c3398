"""A simple forward scanner over a byte buffer."""

from __future__ import annotations

from .charset import is_decimal_digit, is_whitespace
from .errors import CosError, ErrorCode

__all__ = ["Scanner"]

_ULONG_MAX = (1 << 64) - 1

BufferLike = "bytes | bytearray | memoryview | str | None"


def _as_bytes(buffer: bytes | bytearray | memoryview | str | None) -> bytes:
    if buffer is None:
        return b""
    if isinstance(buffer, str):
        return buffer.encode("latin-1")
    return bytes(buffer)


def _as_byte_value(expected: int | str | bytes) -> int:
    if isinstance(expected, (str, bytes, bytearray)):
        if len(expected) != 1:
            raise ValueError("expected a single character")
        return ord(expected)
    return int(expected)


class Scanner:
    """Reads characters and numbers from a buffer, tracking a position."""

    def __init__(self, buffer: bytes | bytearray | memoryview | str | None = None) -> None:
        self._buffer = _as_bytes(buffer)
        self._position = 0

    @property
    def position(self) -> int:
        """The index of the next byte to read."""
        return self._position

    @property
    def at_end(self) -> bool:
        """True when every byte of the buffer has been consumed."""
        return self._position >= len(self._buffer)

    def set_input(self, buffer: bytes | bytearray | memoryview | str | None) -> None:
        """Replace the buffer and rewind to its start."""
        self._buffer = _as_bytes(buffer)
        self._position = 0

    def reset(self) -> None:
        """Rewind to the start of the buffer."""
        self._position = 0

    def read_char(self) -> int | None:
        """Consume and return the next byte, or None at the end."""
        if self.at_end:
            return None
        value = self._buffer[self._position]
        self._position += 1
        return value

    def match_char(self, expected: int | str | bytes) -> bool:
        """Consume the next byte only if it equals ``expected``."""
        if self.at_end:
            return False
        if self._buffer[self._position] != _as_byte_value(expected):
            return False
        self._position += 1
        return True

    def read_unsigned(self, max_digits: int) -> int | None:
        """Read up to ``max_digits`` decimal digits as an unsigned value.

        Returns None, consuming nothing, when no digit is at the position.
        Raises CosError with OUT_OF_RANGE if the value exceeds 64 bits.
        """
        start = self._position
        end = start
        limit = len(self._buffer)
        while end < limit and end - start < max_digits and is_decimal_digit(self._buffer[end]):
            end += 1
        if end == start:
            return None

        self._position = end
        value = int(self._buffer[start:end])
        if value > _ULONG_MAX:
            raise CosError(
                ErrorCode.OUT_OF_RANGE,
                "Failed to convert string to unsigned long.",
            )
        return value

    def skip_whitespace(self) -> int:
        """Consume whitespace and return how many bytes were skipped."""
        start = self._position
        limit = len(self._buffer)
        while self._position < limit and is_whitespace(self._buffer[self._position]):
            self._position += 1
        return self._position - start