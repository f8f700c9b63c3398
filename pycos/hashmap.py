"""An open-addressing hash map with pluggable hashing and ownership hooks."""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable
from typing import Any

from .errors import CosError, ErrorCode
from .utils import round_capacity

__all__ = ["HashMap"]

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], bool]
OwnershipFunc = Callable[[Any], None]

_EMPTY = object()


class HashMap:
    """A hash map using linear probing.

    ``hash_func`` and ``equal`` decide key identity; they default to the
    built-in ``hash`` and ``==``. The retain hooks are called when a key or
    value is stored, the release hooks when it is replaced or when the map
    is closed. Neither keys nor values may be None.
    """

    def __init__(
        self,
        hash_func: HashFunc | None = None,
        equal: EqualFunc | None = None,
        retain_key: OwnershipFunc | None = None,
        release_key: OwnershipFunc | None = None,
        retain_value: OwnershipFunc | None = None,
        release_value: OwnershipFunc | None = None,
        capacity_hint: int = 0,
    ) -> None:
        self._hash = hash_func if hash_func is not None else hash
        self._equal = equal if equal is not None else operator.eq
        self._retain_key = retain_key
        self._release_key = release_key
        self._retain_value = retain_value
        self._release_value = release_value
        capacity = round_capacity(capacity_hint)
        self._keys: list[Any] = [_EMPTY] * capacity
        self._values: list[Any] = [_EMPTY] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the table."""
        return len(self._keys)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: Hashable) -> bool:
        if key is None:
            return False
        return self._keys[self._find_slot(key)] is not _EMPTY

    def __enter__(self) -> HashMap:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``, or None if there is none."""
        if key is None:
            raise CosError(ErrorCode.INVALID_ARGUMENT, "Key must not be None")
        slot = self._find_slot(key)
        if self._keys[slot] is _EMPTY:
            return None
        return self._values[slot]

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if key is None or value is None:
            raise CosError(ErrorCode.INVALID_ARGUMENT, "Key and value must not be None")

        if self._count >= (self.capacity // 4) * 3:
            self._grow(round_capacity(self.capacity + 1))

        slot = self._find_slot(key)
        old_key = self._keys[slot]
        old_value = self._values[slot]
        is_new = old_key is _EMPTY

        if self._retain_key is not None:
            self._retain_key(key)
        if self._retain_value is not None:
            self._retain_value(value)

        self._keys[slot] = key
        self._values[slot] = value

        if is_new:
            self._count += 1
        else:
            if self._release_key is not None:
                self._release_key(old_key)
            if self._release_value is not None:
                self._release_value(old_value)

    def close(self) -> None:
        """Release every key and value and empty the map."""
        for key, value in zip(self._keys, self._values):
            if key is _EMPTY:
                continue
            if self._release_key is not None:
                self._release_key(key)
            if self._release_value is not None:
                self._release_value(value)
        capacity = self.capacity
        self._keys = [_EMPTY] * capacity
        self._values = [_EMPTY] * capacity
        self._count = 0

    def _find_slot(self, key: Any) -> int:
        """Return the slot holding ``key``, or the empty slot where it belongs."""
        capacity = self.capacity
        index = self._hash(key) % capacity
        while True:
            stored = self._keys[index]
            if stored is _EMPTY or self._equal(stored, key):
                return index
            index = (index + 1) % capacity

    def _grow(self, new_capacity: int) -> None:
        old_entries = [
            (key, value)
            for key, value in zip(self._keys, self._values)
            if key is not _EMPTY
        ]
        self._keys = [_EMPTY] * new_capacity
        self._values = [_EMPTY] * new_capacity
        for key, value in old_entries:
            slot = self._find_slot(key)
            self._keys[slot] = key
            self._values[slot] = value