"""A growable array whose storage is reserved from an object memory pool."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ptools.fixed_array import _visible
from ptools.mempool import ObjectMemPool

T = TypeVar("T")

_SHOW_HEAD = 10
_SHOW_TAIL = 3


class PoolArray(Generic[T]):
    """A list-like array whose capacity is backed by memory from ``pool``.

    Each slot takes ``item_size`` bytes of pool memory. When the array is full
    it grows to ``capacity * 2 + 1``; the new region is reserved before the old
    one is released. Pool failures propagate as ``PoolError``.
    """

    def __init__(self, pool: ObjectMemPool, initial_capacity: int = 4, item_size: int = 8) -> None:
        if item_size <= 0:
            raise ValueError("item size must be positive")
        self._pool = pool
        self._item_size = item_size
        self._items: List[T] = []
        self._capacity = 0
        self._address: Optional[int] = None
        self.reserve(initial_capacity)

    @property
    def pool(self) -> ObjectMemPool:
        return self._pool

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def address(self) -> Optional[int]:
        """Start of the pool region holding the items, if any."""
        return self._address

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"PoolArray({self._items!r}, capacity={self._capacity})"

    def __enter__(self) -> "PoolArray[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.push_back(value)

    def reserve(self, new_capacity: int) -> None:
        """Make room for at least ``new_capacity`` items."""
        if new_capacity <= self._capacity:
            return
        address = self._pool.alloc(self._item_size * new_capacity)
        if self._address is not None:
            self._pool.free_object(self._address)
        self._address = address
        self._capacity = new_capacity

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.reserve(self._capacity * 2 + 1)

    def push_back(self, value: T) -> None:
        """Append ``value``, growing the storage when needed."""
        self._grow_if_full()
        self._items.append(value)

    def insert_at(self, index: int, value: T) -> None:
        """Insert ``value`` before ``index`` (``index`` may equal the length)."""
        if index < 0 or index > len(self._items):
            raise IndexError(f"index {index} outside array of length {len(self._items)}")
        self._grow_if_full()
        self._items.insert(index, value)

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``."""
        if index < 0 or index >= len(self._items):
            raise IndexError(f"index {index} outside array of length {len(self._items)}")
        del self._items[index]

    def clear(self) -> None:
        """Remove all items; the reserved storage stays."""
        self._items.clear()

    def back(self) -> T:
        """The last item."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def release(self) -> None:
        """Remove all items and give the storage back to the pool."""
        self._items.clear()
        if self._address is not None:
            self._pool.free_object(self._address)
        self._address = None
        self._capacity = 0

    def show(self, space: int = 0, count_start: int = _SHOW_HEAD, count_end: int = _SHOW_TAIL) -> None:
        """Print the items, eliding the middle of long arrays."""
        print(f"{' ' * space}PArray, count:{len(self._items)}")
        inner = " " * (space + 4)
        for index in _visible(len(self._items), count_start, count_end):
            if index is None:
                print(f"{inner}...")
            else:
                print(f"{inner}[{index}]={self._items[index]}")