"""A small bit-flag container."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bits:
    """Holds an integer of flags and offers named bit operations."""

    flags: int = 0

    def __int__(self) -> int:
        return self.flags

    def is_flag(self, bits: int) -> bool:
        """True if any of ``bits`` is set."""
        return (self.flags & bits) != 0

    def and_flag(self, bits: int) -> int:
        """The flags masked with ``bits``."""
        return self.flags & bits

    def set_flag(self, bit: int, flag: bool) -> bool:
        """Set or clear ``bit`` and return ``flag``."""
        if flag:
            self.flags |= bit
        else:
            self.flags &= ~bit
        return flag

    def toggle_flag(self, bit: int) -> bool:
        """Invert ``bit`` and return whether it is now set."""
        return self.set_flag(bit, not self.is_flag(bit))

    def clear_bits(self, bits: int) -> None:
        """Clear every bit in ``bits``."""
        self.flags &= ~bits

    def reset_flags(self) -> None:
        """Clear all flags."""
        self.flags = 0

    def is_zero_flags(self) -> bool:
        """True if no flag is set."""
        return self.flags == 0

    def set_all_flags(self, bits: int) -> None:
        """Replace all flags with ``bits``."""
        self.flags = bits

    def set_bit_number(self, bit_number: int, flag: bool) -> None:
        """Set or clear the bit at position ``bit_number``."""
        if bit_number < 0:
            raise ValueError("bit number must not be negative")
        self.set_flag(1 << bit_number, flag)