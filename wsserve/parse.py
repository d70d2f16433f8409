"""Parsing of HTTP/1.1 request heads."""

from __future__ import annotations

from dataclasses import dataclass, field

CRLF = "\r\n"
MAX_HEADERS = 100


class ParseError(ValueError):
    """Raised when a request or header line cannot be parsed."""


@dataclass
class Header:
    """A single ``Key: value`` header."""

    key: str
    value: str


@dataclass
class Request:
    """A parsed HTTP request head with any bytes that followed it."""

    method: str
    path: str
    version: str
    headers: list[Header] = field(default_factory=list)
    body: str = ""

    def get(self, key):
        """Return the value of the first header named ``key``, or None."""
        for header in self.headers:
            if header.key == key:
                return header.value
        return None


def parse_header(line):
    """Parse one header line (without its CRLF terminator)."""
    key, sep, value = line.partition(":")
    if not sep:
        raise ParseError(f"header line has no colon: {line!r}")
    return Header(key, value.strip())


def parse(data):
    """Parse a raw request given as bytes or text into a Request."""
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("latin-1")
    else:
        text = data

    end = text.find(CRLF)
    if end == -1:
        raise ParseError("request line is not terminated")

    method, sep, rest = text[:end].partition(" ")
    if not sep:
        raise ParseError("request line has no method")
    path, sep, version = rest.partition(" ")
    if not sep:
        raise ParseError("request line has no version")

    headers: list[Header] = []
    pos = end + len(CRLF)
    while len(headers) < MAX_HEADERS:
        stop = text.find(CRLF, pos)
        if stop == -1:
            break
        try:
            header = parse_header(text[pos:stop])
        except ParseError:
            break
        headers.append(header)
        pos = stop + len(CRLF)

    body = text[pos + len(CRLF):] if text.startswith(CRLF, pos) else ""
    return Request(method, path, version, headers, body)