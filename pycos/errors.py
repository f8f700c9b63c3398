"""Error codes and the exception raised by the library."""

from __future__ import annotations

from enum import Enum

__all__ = ["ErrorCode", "CosError"]


class ErrorCode(Enum):
    """Kinds of failure the library reports."""

    NONE = "none"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    MEMORY = "memory"


class CosError(Exception):
    """An error carrying an ErrorCode and an optional message."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        super().__init__(message if message is not None else code.value)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message if self.message is not None else self.code.value

    def __repr__(self) -> str:
        return f"CosError({self.code!r}, {self.message!r})"