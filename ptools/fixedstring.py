"""A string with a fixed capacity and a write cursor."""

from __future__ import annotations

from typing import Optional, Union


class FixedString:
    """Text limited to ``size`` characters.

    Writing happens at a cursor; every written character ends the text right
    after itself. Construction and :meth:`reset` put the cursor at the start,
    so the next write replaces the current contents.
    """

    def __init__(self, size: int, data: Optional[str] = None, length: int = 0) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._text = ""
        if data is not None:
            limit = length if length > 0 else size - 1
            self._text = data.split("\0", 1)[0][: min(limit, size - 1)]
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return self._size

    @property
    def data(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FixedString({self._size}, {self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __iadd__(self, other: Union[str, "FixedString"]) -> "FixedString":
        self.append(other)
        return self

    def write_char(self, ch: str) -> bool:
        """Write one character at the cursor; False if the capacity is used up."""
        if len(ch) != 1:
            raise ValueError("exactly one character expected")
        if self._cursor >= self._size:
            return False
        self._text = self._text[: self._cursor] + ch
        self._cursor += 1
        return True

    def write_mem(self, chars: Optional[str]) -> None:
        """Write characters at the cursor until the capacity is reached."""
        if chars is None:
            return
        for ch in chars:
            if not self.write_char(ch):
                break

    def assign(self, text: Union[str, "FixedString", None]) -> None:
        """Replace the contents with ``text``."""
        self.reset()
        self.write_mem(None if text is None else str(text))

    def append(self, text: Union[str, "FixedString", None]) -> None:
        """Write ``text`` at the cursor."""
        self.write_mem(None if text is None else str(text))

    def reset(self) -> None:
        """Move the cursor to the start."""
        self._cursor = 0

    def to_string(self) -> Optional[str]:
        """The text, or None if it is empty."""
        return self._text or None