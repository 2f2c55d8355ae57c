"""Millisecond clock, sleeping and time-of-day breakdown."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

_START_NS = time.monotonic_ns()
_UINT32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class PTime:
    """A millisecond count split into clock parts (hours wrap at 24)."""

    sec_total: int
    msec: int
    hours: int
    minutes: int
    seconds: int


def get_milliseconds() -> int:
    """Milliseconds since the module was loaded, wrapped to 32 bits."""
    return ((time.monotonic_ns() - _START_NS) // 1_000_000) & _UINT32_MASK


def get_time(ms: int = 0) -> PTime:
    """Split ``ms`` into clock parts; 0 means the current clock value."""
    if ms < 0:
        raise ValueError("milliseconds must not be negative")
    if ms == 0:
        ms = get_milliseconds()
    sec_total, msec = divmod(ms, 1000)
    return PTime(
        sec_total=sec_total,
        msec=msec,
        hours=(sec_total // 3600) % 24,
        minutes=(sec_total // 60) % 60,
        seconds=sec_total % 60,
    )


def sleep_milliseconds(ms: int) -> None:
    """Block the current thread for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError("milliseconds must not be negative")
    time.sleep(ms / 1000)


def get_thread_id() -> int:
    """Short identifier of the current thread (24 bits)."""
    return threading.get_ident() & 0xFFFFFF