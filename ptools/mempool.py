"""A block-based object memory pool with handle bookkeeping."""

from __future__ import annotations

import bisect
import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from ptools.result import ErrClass, ToolsError
from ptools.textfmt import get_hex_string

_SHOW_HEAD = 10
_SHOW_TAIL = 3


class PoolErr(IntEnum):
    """Error codes of the memory pool."""

    NO_ERROR = 0
    BLOCK_SIZE = 1
    COUNT_BLOCKS = 2
    ALLOC = 3
    INVALID_BLOCK_COUNT = 4
    INVALID_BLOCK = 5
    NO_CONSECUTIVE_BLOCKS = 6
    ALREADY_FREE = 8
    HANDLE_FULL = 9
    BLOCKS_RANGE = 10
    MISC = 100

    @property
    def label(self) -> str:
        return f"ERR_{self.name}"


class PoolError(ToolsError):
    """Raised when the pool cannot serve or accept a request."""

    def __init__(self, code: PoolErr, msg: str = "") -> None:
        self.code = PoolErr(code)
        super().__init__(int(self.code), ErrClass.MEMORY, msg or self.code.label)


@dataclass(frozen=True)
class HandleMemory:
    """A region of the pool: start address and number of blocks."""

    address: Optional[int] = None
    count_blocks: int = 0

    def is_ok(self) -> bool:
        return self.address is not None and self.count_blocks > 0

    def __str__(self) -> str:
        start = get_hex_string(self.address or 0, 8)
        return f"HandleMemory:{self.count_blocks} blocks, start at:{start}"


class ObjectMemPool:
    """Hands out runs of consecutive fixed-size blocks.

    Addresses are byte offsets into the pool. A failure raises
    :class:`PoolError` and leaves the pool in an error state; while in that
    state every allocation fails until :meth:`clear_error` or :meth:`clear`.
    """

    def __init__(self, block_size: int, max_blocks: int, max_objects: int) -> None:
        if block_size <= 0 or max_blocks <= 0 or block_size % 8 != 0:
            raise PoolError(
                PoolErr.BLOCK_SIZE,
                f"invalid block size {block_size} or block count {max_blocks}; "
                "block size must be a positive multiple of 8",
            )
        if max_objects <= 0:
            raise PoolError(PoolErr.HANDLE_FULL, "the pool must be able to hold at least one object")
        self._block_size = block_size
        self._max_blocks = max_blocks
        self._max_objects = max_objects
        self._handles: List[HandleMemory] = []
        self._lock = threading.RLock()
        self._err = PoolErr.NO_ERROR

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def max_blocks(self) -> int:
        return self._max_blocks

    @property
    def max_objects(self) -> int:
        return self._max_objects

    @property
    def last_error(self) -> PoolErr:
        return self._err

    @property
    def handles(self) -> List[HandleMemory]:
        """The live handles, ordered by address."""
        with self._lock:
            return list(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def _fail(self, code: PoolErr, msg: str = "") -> PoolError:
        self._err = code
        return PoolError(code, msg)

    def _occupied(self) -> List[bool]:
        used = [False] * self._max_blocks
        for handle in self._handles:
            first = handle.address // self._block_size
            for index in range(first, min(first + handle.count_blocks, self._max_blocks)):
                used[index] = True
        return used

    def _find_consecutive_blocks(self, count_blocks: int) -> int:
        if count_blocks <= 0 or count_blocks > self._max_blocks:
            raise self._fail(PoolErr.INVALID_BLOCK_COUNT, f"invalid block count {count_blocks}")
        used = self._occupied()
        run = 0
        for index, taken in enumerate(used):
            run = 0 if taken else run + 1
            if run == count_blocks:
                return index - count_blocks + 1
        raise self._fail(
            PoolErr.NO_CONSECUTIVE_BLOCKS,
            f"not enough blocks in a row for {count_blocks} blocks needed",
        )

    def blocks_alloc(self, count_blocks: int = 1) -> int:
        """Reserve ``count_blocks`` consecutive blocks and return their address."""
        with self._lock:
            if self.is_error_state():
                raise PoolError(self._err, f"pool is in error state {self._err.label}")
            if count_blocks <= 0:
                raise self._fail(PoolErr.INVALID_BLOCK_COUNT, f"invalid block count {count_blocks}")
            start = self._find_consecutive_blocks(count_blocks)
            if len(self._handles) >= self._max_objects:
                raise self._fail(PoolErr.HANDLE_FULL, "no room left for another handle")
            address = start * self._block_size
            handle = HandleMemory(address, count_blocks)
            position = bisect.bisect_right([h.address for h in self._handles], address)
            self._handles.insert(position, handle)
            return address

    def alloc(self, count_bytes: int) -> int:
        """Reserve enough blocks for ``count_bytes`` bytes and return their address."""
        count_blocks = -(-count_bytes // self._block_size) if count_bytes > 0 else 0
        return self.blocks_alloc(count_blocks)

    def free_object(self, address: Optional[int]) -> None:
        """Release the region starting at ``address``."""
        if address is None:
            raise self._fail(PoolErr.INVALID_BLOCK, "address is missing")
        with self._lock:
            for index, handle in enumerate(self._handles):
                if handle.address == address:
                    del self._handles[index]
                    return
            raise self._fail(PoolErr.INVALID_BLOCK, f"no object at address {address}")

    def count_mem_used(self) -> int:
        """Bytes held by all live handles."""
        with self._lock:
            return sum(h.count_blocks for h in self._handles) * self._block_size

    def max_blocks_free(self) -> int:
        """Length of the longest run of free blocks."""
        with self._lock:
            best = run = 0
            for taken in self._occupied():
                run = 0 if taken else run + 1
                best = max(best, run)
            return best

    def max_mem_free(self) -> int:
        """Bytes in the longest run of free blocks."""
        return self.max_blocks_free() * self._block_size

    def total_memsize(self) -> int:
        return self._block_size * self._max_blocks

    def show_blocks(self) -> int:
        """Print the block map (``.`` free, ``X`` used) and return the longest free run."""
        with self._lock:
            used = self._occupied()
            print("".join("X" if taken else "." for taken in used) + "<<<")
            print()
            return self.max_blocks_free()

    def show_info(self, space: int = 0, full: bool = False) -> None:
        """Print a summary of the pool; with ``full`` also every handle."""
        pad = " " * space
        with self._lock:
            print(
                f"{pad}MemoryPool: MAX_MEM:{self.total_memsize()}, BLOCK_SIZE:{self._block_size}, "
                f"MAX_BLOCK_COUNT:{self._max_blocks}, MAX_OBJECTS:{self._max_objects}, "
                f"count objects:{len(self._handles)}, used mem:{self.count_mem_used()}, "
                f"max-free:{self.max_blocks_free()}"
            )
            if self.is_error_state():
                print(f"{pad}MemoryPool: err:{int(self._err)}, <<<{self.error_as_string()}>>>")
            if full and self._handles:
                self._show_handles(space + 4)

    def _show_handles(self, space: int) -> None:
        pad = " " * space
        inner = " " * (space + 4)
        count = len(self._handles)
        print(f"{pad}Array, count:{count}")
        truncate = _SHOW_HEAD + _SHOW_TAIL < count
        for index, handle in enumerate(self._handles):
            if not truncate or index < _SHOW_HEAD or index >= count - _SHOW_TAIL:
                print(f"{inner}[{index}]={handle}")
            elif index == _SHOW_HEAD:
                print(f"{inner}...")

    def is_error_state(self) -> bool:
        return self._err != PoolErr.NO_ERROR

    def clear_error(self) -> None:
        self._err = PoolErr.NO_ERROR

    def error_as_string(self) -> str:
        return self._err.label

    def clear(self) -> None:
        """Release every handle and reset the error state."""
        with self._lock:
            self._handles.clear()
            self._err = PoolErr.NO_ERROR