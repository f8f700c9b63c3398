"""A growable text buffer with an explicit capacity and FNV-1a hashing."""

from __future__ import annotations

__all__ = ["TextBuffer", "fnv1a_64", "string_ref_compare"]

_DEFAULT_CAPACITY = 32

_FNV64_OFFSET_BASIS = 14695981039346656037
_FNV64_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


def fnv1a_64(data: bytes | bytearray | memoryview | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (text is hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    value = _FNV64_OFFSET_BASIS
    for byte in bytes(data):
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


def _until_nul(text: str) -> str:
    """Return ``text`` cut at its first NUL character, if any."""
    head, _, _ = text.partition("\0")
    return head


def string_ref_compare(lhs: str | TextBuffer, rhs: str | TextBuffer) -> int:
    """Order two strings by length first, then by content.

    Returns -1, 0 or 1.
    """
    left, right = str(lhs), str(rhs)
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    if left == right:
        return 0
    return -1 if left < right else 1


class TextBuffer:
    """A mutable string that tracks a capacity.

    The capacity always leaves room for one terminator past the text. An
    empty buffer starts with a capacity of 32 unless a hint is given; a
    buffer made from text starts with exactly enough room for it. When it
    grows, the capacity doubles until the new text fits.
    """

    def __init__(self, text: str | None = None, capacity_hint: int = 0) -> None:
        if text is None:
            if capacity_hint < 0:
                raise ValueError("capacity_hint must be non-negative")
            self._text = ""
            self._capacity = capacity_hint or _DEFAULT_CAPACITY
        else:
            self._text = _until_nul(text)
            self._capacity = len(self._text) + 1

    @property
    def capacity(self) -> int:
        """The number of characters, terminator included, that fit without growing."""
        return self._capacity

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> TextBuffer:
        """Return an independent buffer holding the same text."""
        return TextBuffer(self._text)

    def append(self, text: str) -> None:
        """Append ``text``, up to its first NUL character."""
        chunk = _until_nul(text)
        if not chunk:
            return
        self._ensure_capacity(len(self._text) + len(chunk) + 1)
        self._text += chunk

    def push_back(self, char: str) -> None:
        """Append one character; a NUL character is ignored."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if char == "\0":
            return
        self.append(char)

    def fnv_hash(self) -> int:
        """Return the 64-bit FNV-1a hash of the text."""
        return fnv1a_64(self._text)

    def _ensure_capacity(self, required: int) -> None:
        if self._capacity >= required:
            return
        new_capacity = self._capacity if self._capacity > 0 else 1
        while new_capacity < required:
            new_capacity *= 2
        self._capacity = new_capacity