"""MAC and IPv4 address helpers and single-line text extraction."""

from __future__ import annotations

from typing import Optional, Sequence, Union

BytesLike = Union[bytes, bytearray, Sequence[int]]

_MAC_LEN = 6
_MAC_MASK = (1 << 48) - 1


def mac_to_int(mac: BytesLike) -> int:
    """Pack the first six bytes of ``mac`` into an integer, first byte most significant."""
    raw = bytes(mac)
    if len(raw) < _MAC_LEN:
        raise ValueError(f"a MAC address needs {_MAC_LEN} bytes, got {len(raw)}")
    return int.from_bytes(raw[:_MAC_LEN], "big")


def mac6_to_int(m0: int, m1: int, m2: int, m3: int, m4: int, m5: int) -> int:
    """Pack six separate bytes into an integer."""
    return mac_to_int(bytes([m0, m1, m2, m3, m4, m5]))


def int_to_mac(val: int) -> bytes:
    """Unpack the low 48 bits of ``val`` into six bytes."""
    if val < 0:
        raise ValueError("MAC value must not be negative")
    return (val & _MAC_MASK).to_bytes(_MAC_LEN, "big")


def format_ip(ip: int) -> str:
    """Dotted text of a 32-bit address held in memory order (least significant byte first)."""
    if not 0 <= ip <= 0xFFFFFFFF:
        raise ValueError("IPv4 value must fit into 32 bits")
    return format_ip_bytes(ip.to_bytes(4, "little"))


def format_ip_bytes(data: Optional[BytesLike]) -> str:
    """Dotted text of the first four bytes of ``data``."""
    if data is None:
        raise ValueError("address bytes are missing")
    raw = bytes(data)
    if len(raw) < 4:
        raise ValueError(f"an IPv4 address needs 4 bytes, got {len(raw)}")
    return ".".join(str(b) for b in raw[:4])


def first_line(text: Optional[str]) -> str:
    """Text up to the first CR or LF; ``"nullptr"`` for a missing text."""
    if text is None:
        return "nullptr"
    for index, ch in enumerate(text):
        if ch in "\r\n":
            return text[:index]
    return text