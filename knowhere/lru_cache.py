"""A thread-safe least-recently-used cache."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Iterable, Optional, TypeVar

import numpy as np

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 10000
_MASK64 = (1 << 64) - 1


class LRUCache(Generic[K, V]):
    """Map holding at most ``capacity`` entries, evicting the least recently used."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: "OrderedDict[K, V]" = OrderedDict()
        self._lock = threading.Lock()

    def put(self, key: K, value: V) -> None:
        """Insert or replace ``key`` and mark it most recently used."""
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key, last=False)
            if len(self._entries) > self.capacity:
                self._entries.popitem(last=True)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key``, marking it most recently used, or ``default``."""
        with self._lock:
            if key not in self._entries:
                return default
            self._entries.move_to_end(key, last=False)
            return self._entries[key]

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def hash_vec(x: Iterable[float]) -> int:
    """Hash a float vector by the bit patterns of its float32 components."""
    bits = np.asarray(x, dtype=np.float32).ravel().view(np.uint32)
    h = 0
    for word in bits.tolist():
        h = (h * 13331 + word) & _MASK64
    return h