"""Decoding of ASCII base-85 encoded streams."""

from __future__ import annotations

from typing import Any

from .charset import is_whitespace
from .filter import Filter

__all__ = ["ASCII85Decoder", "decode_ascii85_block"]

_BASE = ord("!")
_ZERO_CHAR = ord("z")
_PAD_DIGIT = ord("u") - _BASE
_END_MARKER = ord("~")
_BLOCK_SIZE = 5
_BYTES_PER_BLOCK = 4
_RADIX = 85
_MASK32 = 0xFFFFFFFF


def decode_ascii85_block(block: bytes | bytearray | memoryview | str) -> bytes:
    """Decode one block of 1 to 5 base-85 characters.

    A block of n characters yields n - 1 bytes; a partial block is padded
    with the highest digit. An empty result is returned for a block of the
    wrong length or one holding a character outside ``!``..``u``.
    """
    chars = block.encode("latin-1") if isinstance(block, str) else bytes(block)
    if not 1 <= len(chars) <= _BLOCK_SIZE:
        return b""

    value = 0
    for character in chars:
        if not _BASE <= character <= _BASE + _RADIX - 1:
            return b""
        value = (value * _RADIX + (character - _BASE)) & _MASK32

    for _ in range(_BLOCK_SIZE - len(chars)):
        value = (value * _RADIX + _PAD_DIGIT) & _MASK32

    return value.to_bytes(_BYTES_PER_BLOCK, "big")[: len(chars) - 1]


class ASCII85Decoder(Filter):
    """A filter that decodes ASCII base-85 data read from its source.

    Whitespace is skipped, ``z`` stands for four zero bytes, and ``~``
    marks the end of the data.
    """

    def __init__(self, source: Any = None) -> None:
        super().__init__(source)
        self._decoded = b""
        self._index = 0
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
                self._fill()
                if not self._decoded:
                    break
            count = min(len(self._decoded) - self._index, len(view) - total)
            view[total:total + count] = self._decoded[self._index:self._index + count]
            self._index += count
            total += count
        return total

    def _fill(self) -> None:
        """Decode the next block from the source into the internal buffer."""
        self._decoded = b""
        self._index = 0
        self._require_source()

        block = bytearray()
        while len(block) < _BLOCK_SIZE:
            character = self._read_source_byte()
            if character is None:
                self._eod = True
                break
            if is_whitespace(character):
                continue
            if character == _END_MARKER:
                # The closing '>' is consumed; a malformed marker still ends the data.
                self._read_source_byte()
                self._eod = True
                break
            if character == _ZERO_CHAR and not block:
                self._decoded = bytes(_BYTES_PER_BLOCK)
                return
            block.append(character)

        if block:
            self._decoded = decode_ascii85_block(block)