"""A thread-safe generic map."""

from __future__ import annotations

import threading
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class ZMap(Generic[K, V]):
    """A dictionary guarded by a lock so it can be shared between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[K, V] = {}

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key``, or ``default`` if it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def delete(self, key: K) -> bool:
        """Remove ``key``; return True if it was present."""
        with self._lock:
            return self._data.pop(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def keys(self) -> list[K]:
        """Return a snapshot of all keys in no particular order."""
        with self._lock:
            return list(self._data)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data = {}