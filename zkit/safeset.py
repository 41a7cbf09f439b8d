"""A thread-safe generic set built on :class:`ZMap`."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Generic, Hashable, TypeVar

from zkit.safemap import ZMap

T = TypeVar("T", bound=Hashable)


class ZSet(Generic[T]):
    """A set of unique values that can be shared between threads."""

    def __init__(self) -> None:
        self._map: ZMap[T, None] = ZMap()

    def add(self, value: T) -> None:
        """Insert ``value``; adding an existing value has no effect."""
        self._map.set(value, None)

    def contains(self, value: T) -> bool:
        """Return True if ``value`` is in the set."""
        return value in self._map

    def __contains__(self, value: object) -> bool:
        return value in self._map

    def remove(self, value: T) -> bool:
        """Remove ``value``; return True if it was present."""
        return self._map.delete(value)

    def __len__(self) -> int:
        return len(self._map)

    def values(self) -> list[T]:
        """Return a snapshot of all values in no particular order."""
        return self._map.keys()

    def clear(self) -> None:
        """Remove every value."""
        self._map.clear()

    def ordered(self, compare: Callable[[T, T], int]) -> list[T]:
        """Return all values sorted with a three-way ``compare`` function."""
        return sorted(self._map.keys(), key=cmp_to_key(compare))


def ordered(zset: ZSet[T]) -> list[T]:
    """Return all values of ``zset`` in ascending natural order."""
    return sorted(zset.values())