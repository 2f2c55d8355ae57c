"""Parsing of HTTP request lines and request headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

TextLike = Union[str, bytes, bytearray, None]

_TOKEN_END = " \r\n"
_BLANKS = " \t"


class Method(Enum):
    """Request methods; the value is the text used on the wire."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DEL = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class HttpVersion(Enum):
    """Protocol versions; the value is the text used on the wire."""

    VER_0_9 = "HTTP/0.9"
    VER_1_0 = "HTTP/1.0"
    VER_1_1 = "HTTP/1.1"
    VER_2_0 = "HTTP/2.0"
    VER_3_0 = "HTTP/3.0"


_VERSION_TEXT = {
    HttpVersion.VER_0_9: "0.9",
    HttpVersion.VER_1_0: "1.0",
    HttpVersion.VER_1_1: "1.1",
    HttpVersion.VER_2_0: "2.0",
    HttpVersion.VER_3_0: "2.3",
}


def method_to_string(method: Method) -> str:
    """Wire name of ``method``."""
    return Method(method).value


def version_to_string(version: HttpVersion) -> str:
    """Short display text of ``version``."""
    return _VERSION_TEXT[HttpVersion(version)]


def _as_text(buf: TextLike) -> str:
    if buf is None:
        return ""
    if isinstance(buf, (bytes, bytearray)):
        return bytes(buf).decode("latin-1")
    return buf


@dataclass
class Request:
    """A parsed request line such as ``GET /index.html HTTP/1.1``."""

    request_all: str = ""
    request_target: str = ""
    method: Method = Method.GET
    version: HttpVersion = HttpVersion.VER_1_0

    def is_get(self) -> bool:
        return self.method is Method.GET

    def is_post(self) -> bool:
        return self.method is Method.POST

    def is_http_1_0(self) -> bool:
        return self.version is HttpVersion.VER_1_0

    def is_http_1_1(self) -> bool:
        return self.version is HttpVersion.VER_1_1

    def is_http_2_0(self) -> bool:
        return self.version is HttpVersion.VER_2_0

    def show(self, space: int = 0) -> None:
        """Print the request parts."""
        pad = " " * space
        print(f"{pad}Request all: '{self.request_all}'")
        print(f"{pad}     method: '{method_to_string(self.method)}'")
        print(f"{pad}     target: '{self.request_target}'")
        print(f"{pad}    version: '{version_to_string(self.version)}'")


def _extract_token(rest: str) -> Tuple[str, str]:
    """Split off the next token (ended by space, CR or LF) and skip following blanks."""
    end = next((i for i, ch in enumerate(rest) if ch in _TOKEN_END), len(rest))
    return rest[:end], rest[end:].lstrip(_BLANKS)


def create_request(line: TextLike) -> Request:
    """Parse a request line.

    An unknown method leaves method, target and version at their defaults;
    an unknown version leaves target and version at their defaults.
    """
    text = _as_text(line)
    if not text:
        return Request()

    method_token, rest = _extract_token(text)
    target, rest = _extract_token(rest)
    version_token, _ = _extract_token(rest)

    request = Request(request_all=text)
    try:
        request.method = Method(method_token)
    except ValueError:
        return request
    try:
        request.version = HttpVersion(version_token)
    except ValueError:
        return request
    request.request_target = target
    return request


def _header_lines(text: str) -> Iterator[str]:
    """Lines separated by CR LF, ending at the first empty line."""
    pos = 0
    last = len(text) - 1
    while True:
        cr = text.find("\r", pos)
        if cr < 0:
            line = text[pos:]
            pos = len(text)
        else:
            line = text[pos:cr]
            if cr + 1 < last and text[cr + 1] == "\n":
                pos = cr + 2
            else:
                pos = cr
        if not line:
            return
        yield line


@dataclass
class HttpHeader:
    """The request line and the header fields of an HTTP request."""

    request: Request = field(default_factory=Request)
    fields: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def get(self, key: str) -> Optional[str]:
        """Value of header field ``key``, or None."""
        return self.fields.get(key)

    def show(self, space: int = 0) -> None:
        """Print the request line and every field."""
        pad = " " * (space + 4)
        print(f"{' ' * space}HttpHeader")
        self.request.show(space + 4)
        print(f"{pad}Fields, count:{len(self.fields)}")
        for key, value in self.fields.items():
            print(f"{pad}    {key}: {value}")


def create_header(buf: TextLike) -> HttpHeader:
    """Parse the request line and the ``Name: value`` fields up to the first empty line.

    Lines without a colon, or starting with one, are skipped. A repeated
    field replaces the earlier value.
    """
    text = _as_text(buf)
    header = HttpHeader()
    if not text:
        return header

    lines: List[str] = list(_header_lines(text))
    header.request = create_request(lines[0] if lines else "")

    for line in lines:
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].rstrip(_BLANKS)
        value = line[colon + 1:].lstrip(_BLANKS)
        header.fields[key] = value
    return header