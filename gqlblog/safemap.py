"""A dictionary guarded by a lock, safe to share between threads."""

from __future__ import annotations

import threading
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SafeMap(Generic[K, V]):
    """Thread-safe mapping with snapshot iteration."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[K, V] = {}

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value stored under ``key``, or ``default``."""
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._data[key] = value

    def delete(self, key: K) -> None:
        """Remove ``key``; removing a missing key does nothing."""
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> list[K]:
        """Return a snapshot of the keys."""
        with self._lock:
            return list(self._data)

    def values(self) -> list[V]:
        """Return a snapshot of the values."""
        with self._lock:
            return list(self._data.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data