"""A growable sequence of items with optional retain/release hooks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import CosError, ErrorCode
from .utils import round_capacity

__all__ = ["ItemArray"]

ItemCallback = Callable[[Any], None]


class ItemArray:
    """An ordered array of items.

    ``retain`` is called on each item as it enters the array, ``release``
    on each item as it leaves it (by removal or when the array is closed).
    Capacity grows in powers of two, starting at no less than 4.
    """

    def __init__(
        self,
        retain: ItemCallback | None = None,
        release: ItemCallback | None = None,
        capacity_hint: int = 0,
    ) -> None:
        self._items: list[Any] = []
        self._retain = retain
        self._release = release
        self._capacity = round_capacity(capacity_hint)

    @property
    def capacity(self) -> int:
        """The number of items the array can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise CosError(ErrorCode.OUT_OF_RANGE, "Index out of bounds")
        return self._items[index]

    def __enter__(self) -> ItemArray:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Insertion

    def insert(self, index: int, item: Any) -> None:
        """Insert one item before ``index``."""
        self.insert_items(index, [item])

    def append(self, item: Any) -> None:
        """Add one item at the end."""
        self.insert_items(len(self._items), [item])

    def insert_items(self, index: int, items: Iterable[Any]) -> None:
        """Insert several items, in order, before ``index``."""
        new_items = list(items)
        if not new_items:
            return
        if not 0 <= index <= len(self._items):
            raise CosError(ErrorCode.INVALID_ARGUMENT, "Index out of bounds")

        required = len(self._items) + len(new_items)
        if required > self._capacity:
            self._capacity = round_capacity(required)

        self._items[index:index] = new_items
        if self._retain is not None:
            for item in new_items:
                self._retain(item)

    def extend(self, items: Iterable[Any]) -> None:
        """Add several items at the end."""
        self.insert_items(len(self._items), items)

    # Removal

    def remove(self, index: int) -> None:
        """Remove the item at ``index``."""
        self.remove_items(index, 1)

    def remove_items(self, index: int, count: int) -> None:
        """Remove ``count`` items starting at ``index``."""
        if count == 0:
            return
        if count < 0 or not 0 <= index < len(self._items) or index + count > len(self._items):
            raise CosError(ErrorCode.INVALID_ARGUMENT, "Index out of bounds")

        removed = self._items[index:index + count]
        if self._release is not None:
            for item in removed:
                self._release(item)
        del self._items[index:index + count]

    def remove_last(self) -> None:
        """Remove the last item."""
        if not self._items:
            raise CosError(ErrorCode.OUT_OF_RANGE, "Array is empty")
        self.remove(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove the last item and return it."""
        if not self._items:
            raise CosError(ErrorCode.OUT_OF_RANGE, "Array is empty")
        item = self._items[-1]
        self.remove(len(self._items) - 1)
        return item

    def close(self) -> None:
        """Release every item and empty the array."""
        if self._release is not None:
            for item in self._items:
                self._release(item)
        self._items.clear()