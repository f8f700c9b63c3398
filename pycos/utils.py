"""Bit and capacity helpers shared by the containers."""

from __future__ import annotations

__all__ = ["fls", "next_pow2", "round_capacity"]

_MIN_CAPACITY = 4


def fls(mask: int) -> int:
    """Return the 1-based index of the most significant set bit, or 0 if none."""
    if mask < 0:
        raise ValueError("mask must be non-negative")
    return mask.bit_length()


def next_pow2(x: int) -> int:
    """Return the power of two just above the highest set bit of x."""
    return 1 << fls(x)


def round_capacity(capacity: int) -> int:
    """Round a container capacity up to a power of two, at least 4."""
    if capacity < _MIN_CAPACITY:
        return _MIN_CAPACITY
    return next_pow2(capacity + 1)