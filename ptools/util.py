"""Version information, flag parsing and pseudo-random numbers."""

from __future__ import annotations

import random
import time
from typing import Optional

from ptools.textfmt import string_compare_n

_MAJOR, _MINOR, _PATCH = 0, 4, 3
_C_SPACE = " \t\n\v\f\r"
_TRUE_WORDS = ("true", "1", "ON", "on", "TRUE", "True")

_rng = random.Random()


def version() -> str:
    """Library version as ``major.minor.patch``."""
    return f"{_MAJOR}.{_MINOR}.{_PATCH}"


def is_flag(text: str, length: Optional[int] = None) -> bool:
    """True if ``text`` reads as an enabled flag.

    Leading whitespace is skipped. With ``length`` of None only the common
    prefix with each accepted word is compared; otherwise ``length``
    characters are compared. A ``length`` of 0 compares nothing and accepts.
    """
    if text is None:
        raise ValueError("text is missing")
    i = 0
    while i < len(text) and text[i] in _C_SPACE and (not length or i < length):
        i += 1
    rest = text[i:]
    return any(string_compare_n(rest, word, length) == 0 for word in _TRUE_WORDS)


def rand_seed_by_milliseconds() -> None:
    """Seed the generator from the monotonic clock in milliseconds."""
    _rng.seed(time.monotonic_ns() // 1_000_000)


def rand_next_int(rand_min: int, rand_max: int) -> int:
    """Random integer in [rand_min, rand_max]; ``rand_min`` if the range is empty."""
    if rand_max <= rand_min:
        return rand_min
    return _rng.randint(rand_min, rand_max)