"""An array with a fixed capacity."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_SHOW_HEAD = 10
_SHOW_TAIL = 3


def _visible(count: int, count_start: int, count_end: int) -> Iterator[Optional[int]]:
    """Indices to print; None marks the single elision line."""
    truncate = count_start + count_end < count
    for index in range(count):
        if not truncate or index < count_start or index >= count - count_end:
            yield index
        elif index == count_start:
            yield None


class FixedArray(Generic[T]):
    """A sequence that never holds more than ``capacity`` items."""

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: List[T] = []
        for item in items:
            self.push_back(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._items[index] = item

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedArray):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"FixedArray({self._capacity}, {self._items!r})"

    def _check_room(self) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError(
                f"array is full: {len(self._items)} >= {self._capacity}"
            )

    def push_back(self, item: T) -> None:
        """Append ``item``; raises OverflowError when the array is full."""
        self._check_room()
        self._items.append(item)

    def insert_at(self, pos: int, item: T) -> None:
        """Insert ``item`` before position ``pos`` (``pos`` may equal the length)."""
        if pos < 0 or pos > len(self._items):
            raise IndexError(f"position {pos} outside array of length {len(self._items)}")
        self._check_room()
        self._items.insert(pos, item)

    def delete_at(self, pos: int) -> None:
        """Remove the item at ``pos``."""
        if pos < 0 or pos >= len(self._items):
            raise IndexError(f"position {pos} outside array of length {len(self._items)}")
        del self._items[pos]

    def find(self, item: T) -> int:
        """Index of the first item equal to ``item``, or -1."""
        return next((i for i, value in enumerate(self._items) if value == item), -1)

    def find_specific(self, equals: Callable[[T, T], bool], item: T) -> int:
        """Index of the first element for which ``equals(element, item)`` holds, or -1."""
        return next((i for i, value in enumerate(self._items) if equals(value, item)), -1)

    def clear(self) -> None:
        self._items.clear()

    def sort(self, less: Optional[Callable[[T, T], bool]] = None) -> None:
        """Sort in place, by ``<`` or by the ``less(a, b)`` predicate."""
        if less is None:
            self._items.sort()
            return

        def compare(a: T, b: T) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        self._items.sort(key=cmp_to_key(compare))

    def show(self, space: int = 0, count_start: int = _SHOW_HEAD, count_end: int = _SHOW_TAIL) -> None:
        """Print the items, eliding the middle of long arrays."""
        print(f"{' ' * space}Array, count:{len(self._items)}")
        inner = " " * (space + 4)
        for index in _visible(len(self._items), count_start, count_end):
            if index is None:
                print(f"{inner}...")
            else:
                print(f"{inner}[{index}]={self._items[index]}")