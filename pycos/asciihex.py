"""Decoding of ASCII hexadecimal encoded streams."""

from __future__ import annotations

from typing import Any

from .charset import CharacterSet, is_whitespace
from .filter import Filter

__all__ = ["ASCIIHexDecoder", "hex_digit_value"]

_BUFFER_SIZE = 256
_BLOCK_SIZE = 2
_END_MARKER = CharacterSet.GREATER_THAN_SIGN


def hex_digit_value(character: int | str) -> int:
    """Return the value of a hexadecimal digit, or -1 if it is not one."""
    if isinstance(character, str):
        if len(character) != 1:
            raise ValueError("expected a single character")
        character = ord(character)
    if CharacterSet.DIGIT_ZERO <= character <= CharacterSet.DIGIT_NINE:
        return character - CharacterSet.DIGIT_ZERO
    if CharacterSet.LATIN_CAPITAL_LETTER_A <= character <= CharacterSet.LATIN_CAPITAL_LETTER_F:
        return character - CharacterSet.LATIN_CAPITAL_LETTER_A + 0xA
    if CharacterSet.LATIN_SMALL_LETTER_A <= character <= CharacterSet.LATIN_SMALL_LETTER_F:
        return character - CharacterSet.LATIN_SMALL_LETTER_A + 0xA
    return -1


def _decode_pair(block: bytes | bytearray) -> int | None:
    """Decode two hexadecimal digits into a byte value, or None if invalid."""
    if len(block) != _BLOCK_SIZE:
        return None
    value = 0
    for character in block:
        digit = hex_digit_value(character)
        if digit < 0:
            return None
        value = (value << 4) | digit
    return value


class ASCIIHexDecoder(Filter):
    """A filter that decodes pairs of hexadecimal digits read from its source.

    Whitespace is skipped and ``>`` marks the end of the data. Decoding
    stops at the first pair that is not made of two hexadecimal digits.
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
                if self._fill(len(view) - total) == 0:
                    break
            count = min(len(self._decoded) - self._index, len(view) - total)
            view[total:total + count] = self._decoded[self._index:self._index + count]
            self._index += count
            total += count
        return total

    def _fill(self, count: int) -> int:
        """Decode up to ``count`` bytes (at most 256) from the source."""
        self._decoded = b""
        self._index = 0
        self._require_source()

        limit = min(count, _BUFFER_SIZE)
        out = bytearray()
        while len(out) < limit:
            block = bytearray()
            while len(block) < _BLOCK_SIZE:
                character = self._read_source_byte()
                if character is None:
                    self._eod = True
                    break
                if is_whitespace(character):
                    continue
                if character == _END_MARKER:
                    self._eod = True
                    break
                block.append(character)

            if not block:
                break
            value = _decode_pair(block)
            if value is None:
                break
            out.append(value)

        self._decoded = bytes(out)
        return len(out)