"""Low-level string, memory and number formatting helpers."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Type, TypeVar, Union

Number = TypeVar("Number", int, float)
BytesLike = Union[bytes, bytearray, memoryview, str]

_C_SPACE = " \t\n\v\f\r"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def mem_compare(a: Optional[BytesLike], b: Optional[BytesLike]) -> int:
    """Compare two byte blocks.

    Returns the difference of the first differing bytes, otherwise -1, 0 or 1
    according to the lengths. A missing block sorts before a present one.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    left, right = _as_bytes(a), _as_bytes(b)
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return _sign(len(left) - len(right))


def string_starts_with(text: Optional[str], prefix: Optional[str]) -> bool:
    """True if ``text`` begins with ``prefix``; False if either is missing."""
    if text is None or prefix is None:
        return False
    return text.startswith(prefix)


def string_find(text: Optional[str], needle: Optional[str]) -> int:
    """Index of the first occurrence of ``needle`` in ``text``, or -1."""
    if text is None or needle is None:
        return -1
    return text.find(needle)


def string_compare(a: Optional[str], b: Optional[str]) -> int:
    """strcmp-like comparison returning the difference of the first differing characters."""
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def string_compare_n(a: Optional[str], b: Optional[str], num: Optional[int] = None) -> int:
    """Compare at most ``num`` characters.

    With ``num`` of None only the length of the shorter string is compared.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    if num is None:
        num = min(len(a), len(b))
    for ca, cb in zip_longest(a[:num], b[:num], fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == "\0":
            return 0
    return 0


def string_find_backwards(text: Optional[str], needle: Optional[str]) -> int:
    """Index of the last occurrence of a non-empty ``needle``, or -1."""
    if text is None or not needle:
        return -1
    return text.rfind(needle)


def string_find_char_backwards(text: Optional[str], ch: str, from_pos: int = -1) -> int:
    """Search ``ch`` backwards, starting at ``from_pos`` if it lies inside the text, else at the end."""
    if text is None:
        return -1
    start = len(text)
    if 0 <= from_pos < len(text):
        start = from_pos
    if start == len(text) and ch == "\0":
        return start
    return text.rfind(ch, 0, start + 1)


def string_remove_chars(text: str, pos: int, count: int = 1) -> str:
    """Return ``text`` with ``count`` characters removed at ``pos``."""
    if text is None:
        raise ValueError("text is missing")
    if pos < 0 or pos >= len(text):
        raise IndexError(f"position {pos} outside string of length {len(text)}")
    if count <= 0:
        return text
    return text[:pos] + text[pos + count:]


def string_insert(text: str, pos: int, part: str) -> str:
    """Return ``text`` with ``part`` inserted at ``pos``."""
    if text is None or part is None:
        raise ValueError("text or part is missing")
    if pos < 0 or pos > len(text):
        raise IndexError(f"position {pos} outside string of length {len(text)}")
    return text[:pos] + part + text[pos:]


def float_to_ascii(val: float, decimals: int = 2) -> str:
    """Format a float with a fixed number of rounded decimals, always with a dot."""
    sign = ""
    if val < 0.0:
        sign = "-"
        val = -val
    val += 0.5 / (10 ** decimals)
    int_part = int(val)
    frac = val - int_part
    digits = []
    for _ in range(decimals):
        frac *= 10.0
        digit = int(frac)
        digits.append(str(digit))
        frac -= digit
    return f"{sign}{int_part}.{''.join(digits)}"


def ascii_to_number(text: Optional[str], kind: Type[Number] = int, length: int = 0) -> Number:
    """Parse a leading number from ``text``.

    ``length`` of 0 reads up to the end of the text. Leading whitespace and an
    optional sign are accepted; parsing stops at the first invalid character.
    ``kind`` is ``int`` or ``float``; only floats accept a decimal point.
    """
    if kind not in (int, float):
        raise TypeError(f"unsupported number kind: {kind!r}")
    if text is None:
        return kind(0)
    text = text[:length] if length > 0 else text.split("\0", 1)[0]
    rest = text.lstrip(_C_SPACE)

    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]

    result = kind(0)
    frac = kind(1)
    has_dot = False
    for ch in rest:
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
            if has_dot:
                frac /= 10
                result += digit * frac
            else:
                result = result * 10 + digit
        elif kind is float and ch == "." and not has_dot:
            has_dot = True
        else:
            break

    return -result if negative else result


def number_to_ascii(val: int, min_digits: int = 0) -> str:
    """Decimal text of ``val``, digits zero-padded to at least ``min_digits``."""
    if isinstance(val, bool):
        return "1" if val else "0"
    sign = "-" if val < 0 else ""
    return sign + str(abs(val)).zfill(min_digits)


def number_to_hex_ascii(val: int, min_digits: int = 0) -> str:
    """Upper-case hex text of a non-negative ``val``, zero-padded to ``min_digits``."""
    if val < 0:
        raise ValueError("negative values have no hex form here")
    return format(val, "X").zfill(min_digits)


def _masked(val: int, size: int) -> int:
    if size <= 0:
        raise ValueError("size must be positive")
    return val & ((1 << (8 * size)) - 1)


def get_hex(val: int, size: int = 4) -> str:
    """Upper-case hex with exactly two digits per byte of ``size``."""
    return format(_masked(val, size), f"0{size * 2}X")


def get_hex_trimmed(val: int, size: int = 4) -> str:
    """Lower-case hex with ``0x`` prefix and without leading zeros."""
    return "0x" + format(_masked(val, size), "x")


def get_hex_string(val: int, size: int = 4) -> str:
    """Upper-case full-width hex with ``0x`` prefix."""
    return "0x" + get_hex(val, size)


def clamp(val, low, high):
    """Limit ``val`` to the range [low, high]."""
    if val < low:
        return low
    if val > high:
        return high
    return val


def str_equal(a: Optional[str], b: Optional[str]) -> bool:
    """True if both strings are present and equal."""
    if a is None or b is None:
        return False
    return a == b


def pmem_cmp(a: Optional[BytesLike], b: Optional[BytesLike]) -> int:
    """Compare byte blocks, returning -1, 0 or 1; a missing block on either side gives 1."""
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return 1
    left, right = _as_bytes(a), _as_bytes(b)
    for x, y in zip(left, right):
        if x != y:
            return -1 if x < y else 1
    return _sign(len(left) - len(right))


def _ascii_lower(byte: int) -> int:
    return byte + 32 if 65 <= byte <= 90 else byte


def pmem_cmp_ignore_case(a: Optional[BytesLike], b: Optional[BytesLike]) -> int:
    """Compare byte blocks ignoring ASCII case."""
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return 1 if a is not None else -1
    left, right = _as_bytes(a), _as_bytes(b)
    for x, y in zip(left, right):
        lx, ly = _ascii_lower(x), _ascii_lower(y)
        if lx != ly:
            return lx - ly
    return _sign(len(left) - len(right))


def is_peek(data: Optional[str], pos: int, ch: str, dist: int) -> bool:
    """True if the character ``dist`` positions after ``pos`` exists and equals ``ch``."""
    if data is None:
        return False
    index = pos + dist
    if index < 0 or index >= len(data):
        return False
    return data[index] == ch