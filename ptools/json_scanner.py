"""An event-based JSON scanner."""

from __future__ import annotations

from typing import Any, List, Tuple, Union

_WHITESPACE = " \n\r\t"


class JsonScanError(ValueError):
    """Raised when the scanned text is not valid JSON."""

    def __init__(self, message: str, position: int) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{message} at {position}")


class Handler:
    """Receives the scanner's events.

    This base class records every event as a tuple in :attr:`events`;
    subclasses override the methods they care about.
    """

    def __init__(self) -> None:
        self.events: List[Tuple[Any, ...]] = []

    def start_object(self) -> None:
        self.events.append(("start_object",))

    def end_object(self) -> None:
        self.events.append(("end_object",))

    def start_array(self) -> None:
        self.events.append(("start_array",))

    def end_array(self) -> None:
        self.events.append(("end_array",))

    def key(self, data: str) -> None:
        self.events.append(("key", data))

    def string_value(self, data: str) -> None:
        self.events.append(("string_value", data))

    def number_value(self, data: str) -> None:
        self.events.append(("number_value", data))

    def boolean_value(self, value: bool) -> None:
        self.events.append(("boolean_value", value))

    def null_value(self) -> None:
        self.events.append(("null_value",))

    def error(self, message: str, position: int) -> None:
        self.events.append(("error", message, position))


class Scanner:
    """Walks JSON text and reports what it finds to a :class:`Handler`.

    Strings and keys are passed on raw, escape sequences included; numbers
    are passed on as their text.
    """

    def __init__(self, data: Union[str, bytes, bytearray], handler: Handler) -> None:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        self.data = data
        self.handler = handler
        self.pos = 0

    def scan_json_data(self) -> None:
        """Scan one JSON value followed only by whitespace; raises JsonScanError."""
        self._skip_whitespace()
        self._parse_value()
        self._skip_whitespace()
        if self.pos != len(self.data):
            self._fail("Extra data after JSON value")

    def debug_run(self) -> None:
        """Print every character with its code from the start."""
        self.pos = 0
        while self.pos < len(self.data):
            ch = self._peek()
            print(f"Scanner::debug_run, ch-int:{ord(ch)},  char '{ch}'")
            self.pos += 1

    def _fail(self, message: str) -> None:
        self.handler.error(message, self.pos)
        raise JsonScanError(message, self.pos)

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.data) and self.data[self.pos] in _WHITESPACE:
            self.pos += 1

    def _peek(self) -> str:
        return self.data[self.pos] if self.pos < len(self.data) else "\0"

    def _match(self, expected: str) -> bool:
        if self._peek() == expected:
            self.pos += 1
            return True
        return False

    def _parse_value(self) -> None:
        self._skip_whitespace()
        ch = self._peek()
        if ch == "{":
            self._parse_object()
        elif ch == "[":
            self._parse_array()
        elif ch == '"':
            self._parse_string(is_key=False)
        elif "0" <= ch <= "9" or ch == "-":
            self._parse_number()
        elif ch == "t":
            self._parse_literal("true")
        elif ch == "f":
            self._parse_literal("false")
        elif ch == "n":
            self._parse_null()
        else:
            self._fail("Unexpected character while parsing value")

    def _parse_object(self) -> None:
        self._match("{")
        self.handler.start_object()
        self._skip_whitespace()
        if self._match("}"):
            self.handler.end_object()
            return
        while True:
            self._skip_whitespace()
            self._parse_string(is_key=True)
            self._skip_whitespace()
            if not self._match(":"):
                self._fail("Expected ':' after key in object")
            self._parse_value()
            self._skip_whitespace()
            if self._match("}"):
                break
            if not self._match(","):
                self._fail("Expected ',' or '}' in object")
        self.handler.end_object()

    def _parse_array(self) -> None:
        self._match("[")
        self.handler.start_array()
        self._skip_whitespace()
        if self._match("]"):
            self.handler.end_array()
            return
        while True:
            self._parse_value()
            self._skip_whitespace()
            if self._match("]"):
                break
            if not self._match(","):
                self._fail("Expected ',' or ']' in array")
        self.handler.end_array()

    def _parse_string(self, is_key: bool) -> None:
        if not self._match('"'):
            self._fail("Expected '\"' at start of string")
        start = self.pos
        size = len(self.data)
        while self.pos < size:
            ch = self.data[self.pos]
            self.pos += 1
            if ch == '"':
                text = self.data[start:self.pos - 1]
                if is_key:
                    self.handler.key(text)
                else:
                    self.handler.string_value(text)
                return
            if ch == "\\":
                self.pos += 1
        self._fail("Unterminated string")

    def _skip_digits(self) -> None:
        while self.pos < len(self.data) and "0" <= self.data[self.pos] <= "9":
            self.pos += 1

    def _parse_number(self) -> None:
        start = self.pos
        if self.data[self.pos] == "-":
            self.pos += 1
        self._skip_digits()
        if self.pos < len(self.data) and self.data[self.pos] == ".":
            self.pos += 1
            self._skip_digits()
        if self.pos == start:
            self._fail("Invalid number")
        self.handler.number_value(self.data[start:self.pos])

    def _parse_literal(self, literal: str) -> None:
        if self.data[self.pos:self.pos + len(literal)] != literal:
            self._fail("Invalid literal")
        self.pos += len(literal)
        self.handler.boolean_value(literal[0] == "t")

    def _parse_null(self) -> None:
        if self.data[self.pos:self.pos + 4] != "null":
            self._fail("Invalid null literal")
        self.pos += 4
        self.handler.null_value()