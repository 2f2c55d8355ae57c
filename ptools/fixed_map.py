"""A small insertion-ordered map with a fixed capacity."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class FixedMap(Generic[K, V]):
    """Maps keys to values; holds at most ``capacity`` entries, keys compared by equality."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._entries: List[Tuple[K, V]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._entries)

    def __getitem__(self, key: K) -> V:
        for k, v in self._entries:
            if k == key:
                return v
        raise KeyError(key)

    def insert(self, key: K, val: V) -> None:
        """Add a new entry; raises OverflowError when full and KeyError for a present key."""
        if len(self._entries) >= self._capacity:
            raise OverflowError(f"map is full: capacity {self._capacity}")
        if key in self:
            raise KeyError(key)
        self._entries.append((key, val))

    def find(self, key: K) -> Optional[V]:
        """The value stored for ``key``, or None."""
        return next((v for k, v in self._entries if k == key), None)