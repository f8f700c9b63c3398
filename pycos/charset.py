"""Character classes of the PDF/COS syntax."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "CharacterSet",
    "is_whitespace",
    "is_delimiter",
    "is_end_of_line",
    "is_hex_digit",
    "is_octal_digit",
    "is_decimal_digit",
]


class CharacterSet(IntEnum):
    """Named code points used by the syntax."""

    NUL = 0x00
    BACKSPACE = 0x08
    HORIZONTAL_TAB = 0x09
    LINE_FEED = 0x0A
    LINE_TABULATION = 0x0B
    FORM_FEED = 0x0C
    CARRIAGE_RETURN = 0x0D
    SPACE = 0x20

    NUMBER_SIGN = 0x23
    PERCENT_SIGN = 0x25

    LEFT_PARENTHESIS = 0x28
    RIGHT_PARENTHESIS = 0x29

    ASTERISK = 0x2A
    PLUS_SIGN = 0x2B
    COMMA = 0x2C
    HYPHEN_MINUS = 0x2D
    FULL_STOP = 0x2E
    SOLIDUS = 0x2F

    DIGIT_ZERO = 0x30
    DIGIT_ONE = 0x31
    DIGIT_TWO = 0x32
    DIGIT_THREE = 0x33
    DIGIT_FOUR = 0x34
    DIGIT_FIVE = 0x35
    DIGIT_SIX = 0x36
    DIGIT_SEVEN = 0x37
    DIGIT_EIGHT = 0x38
    DIGIT_NINE = 0x39

    LESS_THAN_SIGN = 0x3C
    GREATER_THAN_SIGN = 0x3E

    LATIN_CAPITAL_LETTER_A = 0x41
    LATIN_CAPITAL_LETTER_B = 0x42
    LATIN_CAPITAL_LETTER_C = 0x43
    LATIN_CAPITAL_LETTER_D = 0x44
    LATIN_CAPITAL_LETTER_E = 0x45
    LATIN_CAPITAL_LETTER_F = 0x46

    LATIN_SMALL_LETTER_A = 0x61
    LATIN_SMALL_LETTER_B = 0x62
    LATIN_SMALL_LETTER_C = 0x63
    LATIN_SMALL_LETTER_D = 0x64
    LATIN_SMALL_LETTER_E = 0x65
    LATIN_SMALL_LETTER_F = 0x66

    LEFT_SQUARE_BRACKET = 0x5B
    REVERSE_SOLIDUS = 0x5C
    RIGHT_SQUARE_BRACKET = 0x5D

    LEFT_CURLY_BRACKET = 0x7B
    RIGHT_CURLY_BRACKET = 0x7D


_WHITESPACE = frozenset(
    {
        CharacterSet.NUL,
        CharacterSet.HORIZONTAL_TAB,
        CharacterSet.LINE_FEED,
        CharacterSet.FORM_FEED,
        CharacterSet.CARRIAGE_RETURN,
        CharacterSet.SPACE,
    }
)

_DELIMITERS = frozenset(
    {
        CharacterSet.PERCENT_SIGN,
        CharacterSet.LEFT_PARENTHESIS,
        CharacterSet.RIGHT_PARENTHESIS,
        CharacterSet.SOLIDUS,
        CharacterSet.LESS_THAN_SIGN,
        CharacterSet.GREATER_THAN_SIGN,
        CharacterSet.LEFT_SQUARE_BRACKET,
        CharacterSet.RIGHT_SQUARE_BRACKET,
        CharacterSet.LEFT_CURLY_BRACKET,
        CharacterSet.RIGHT_CURLY_BRACKET,
    }
)

_END_OF_LINE = frozenset({CharacterSet.LINE_FEED, CharacterSet.CARRIAGE_RETURN})

_DECIMAL_DIGITS = frozenset(range(CharacterSet.DIGIT_ZERO, CharacterSet.DIGIT_NINE + 1))

_OCTAL_DIGITS = frozenset(range(CharacterSet.DIGIT_ZERO, CharacterSet.DIGIT_SEVEN + 1))

_HEX_DIGITS = (
    _DECIMAL_DIGITS
    | frozenset(
        range(CharacterSet.LATIN_CAPITAL_LETTER_A, CharacterSet.LATIN_CAPITAL_LETTER_F + 1)
    )
    | frozenset(
        range(CharacterSet.LATIN_SMALL_LETTER_A, CharacterSet.LATIN_SMALL_LETTER_F + 1)
    )
)


def _code(character: int | str | bytes) -> int:
    """Return the code point of an int, or of a one-character str or bytes."""
    if isinstance(character, (str, bytes, bytearray)):
        if len(character) != 1:
            raise ValueError("expected a single character")
        return ord(character)
    return int(character)


def is_whitespace(character: int | str | bytes) -> bool:
    """Return True if the character is a whitespace character."""
    return _code(character) in _WHITESPACE


def is_delimiter(character: int | str | bytes) -> bool:
    """Return True if the character is a delimiter character."""
    return _code(character) in _DELIMITERS


def is_end_of_line(character: int | str | bytes) -> bool:
    """Return True if the character is a line feed or carriage return."""
    return _code(character) in _END_OF_LINE


def is_hex_digit(character: int | str | bytes) -> bool:
    """Return True if the character is a hexadecimal digit."""
    return _code(character) in _HEX_DIGITS


def is_octal_digit(character: int | str | bytes) -> bool:
    """Return True if the character is an octal digit."""
    return _code(character) in _OCTAL_DIGITS


def is_decimal_digit(character: int | str | bytes) -> bool:
    """Return True if the character is a decimal digit."""
    return _code(character) in _DECIMAL_DIGITS