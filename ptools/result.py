"""Error classes and the library's error type."""

from __future__ import annotations

from enum import IntEnum

_MSG_CAPACITY = 80


class ErrClass(IntEnum):
    """Area an error belongs to."""

    GENERAL = 0
    UART = 1
    MEMORY = 2
    SOCKET = 3


class ToolsError(Exception):
    """An error with a numeric code, an error class and a short message."""

    def __init__(self, err: int = 1, err_class: ErrClass = ErrClass.GENERAL, msg: str = "") -> None:
        if err == 0:
            raise ValueError("error code 0 means success")
        self.err = err
        self.err_class = ErrClass(err_class)
        self.msg = msg[: _MSG_CAPACITY - 1]
        super().__init__(self.msg or f"error {err}")

    def is_general(self) -> bool:
        return self.err_class is ErrClass.GENERAL

    def is_uart(self) -> bool:
        return self.err_class is ErrClass.UART

    def is_memory(self) -> bool:
        return self.err_class is ErrClass.MEMORY

    def is_socket(self) -> bool:
        return self.err_class is ErrClass.SOCKET