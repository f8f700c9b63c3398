"""A growable byte buffer."""

from __future__ import annotations

from .errors import CosError, ErrorCode

__all__ = ["ByteData"]


class ByteData:
    """A byte buffer with an explicit capacity.

    The capacity grows to exactly the size required when bytes are
    appended beyond it, or to the amount asked for by ``reserve``.
    """

    def __init__(self, capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise ValueError("capacity_hint must be non-negative")
        self._bytes = bytearray()
        self._capacity = capacity_hint

    @property
    def capacity(self) -> int:
        """The number of bytes the buffer can hold before it grows."""
        return self._capacity

    @property
    def ref(self) -> bytes:
        """The whole contents."""
        return bytes(self._bytes)

    def __len__(self) -> int:
        return len(self._bytes)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteData):
            return self._bytes == other._bytes
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._bytes == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ByteData({bytes(self._bytes)!r})"

    def copy(self) -> ByteData:
        """Return an independent copy of the contents."""
        duplicate = ByteData(len(self._bytes))
        duplicate.append(self._bytes)
        return duplicate

    def get_range(self, offset: int, length: int) -> bytes:
        """Return up to ``length`` bytes starting at ``offset``.

        An empty result is returned when ``length`` is 0. Raises CosError
        with OUT_OF_RANGE when ``offset`` is past the end.
        """
        if length <= 0:
            return b""
        if not 0 <= offset < len(self._bytes):
            raise CosError(ErrorCode.OUT_OF_RANGE, "Offset is out of range")
        return bytes(self._bytes[offset:offset + length])

    def reserve(self, capacity: int) -> None:
        """Make room for at least ``capacity`` bytes."""
        if capacity > self._capacity:
            self._capacity = capacity

    def reset(self) -> None:
        """Discard the contents, keeping the capacity."""
        self._bytes.clear()

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Append bytes to the end."""
        chunk = bytes(data)
        if not chunk:
            return
        self.reserve(len(self._bytes) + len(chunk))
        self._bytes.extend(chunk)

    def push_back(self, byte: int) -> None:
        """Append a single byte value."""
        if not 0 <= byte <= 0xFF:
            raise ValueError("byte must be in range 0..255")
        self.append(bytes((byte,)))