"""A double-ended queue stored in a growable circular buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .errors import CosError, ErrorCode

__all__ = ["RingBuffer"]


class RingBuffer:
    """A circular buffer that supports pushing and popping at both ends.

    When full, the capacity doubles until the new item fits.
    """

    def __init__(self, capacity_hint: int = 0) -> None:
        if capacity_hint < 0:
            raise ValueError("capacity_hint must be non-negative")
        self._slots: list[Any] = [None] * capacity_hint
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of items the buffer can hold before it grows."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter([self._slots[self._ring_index(i)] for i in range(self._count)])

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self._count:
            raise CosError(ErrorCode.OUT_OF_RANGE, "Index out of range")
        return self._slots[self._ring_index(index)]

    def first(self) -> Any:
        """Return the item at the front."""
        self._require_items()
        return self._slots[self._head]

    def last(self) -> Any:
        """Return the item at the back."""
        self._require_items()
        return self._slots[self._ring_index(self._count - 1)]

    def push_front(self, item: Any) -> None:
        """Add an item at the front."""
        self._ensure_capacity(self._count + 1)
        self._head = (self._head - 1) % self.capacity
        self._slots[self._head] = item
        self._count += 1

    def push_back(self, item: Any) -> None:
        """Add an item at the back."""
        self._ensure_capacity(self._count + 1)
        self._slots[self._ring_index(self._count)] = item
        self._count += 1

    def pop_front(self) -> Any:
        """Remove and return the item at the front."""
        item = self.first()
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return item

    def pop_back(self) -> Any:
        """Remove and return the item at the back."""
        item = self.last()
        self._slots[self._ring_index(self._count - 1)] = None
        self._count -= 1
        return item

    def _ring_index(self, index: int) -> int:
        return (self._head + index) % self.capacity

    def _require_items(self) -> None:
        if self._count == 0:
            raise CosError(ErrorCode.OUT_OF_RANGE, "Ring buffer is empty")

    def _ensure_capacity(self, required: int) -> None:
        capacity = self.capacity
        if capacity >= required:
            return
        new_capacity = capacity if capacity > 0 else 1
        while new_capacity < required:
            new_capacity *= 2
        items = list(self)
        self._slots = items + [None] * (new_capacity - len(items))
        self._head = 0