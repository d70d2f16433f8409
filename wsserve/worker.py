"""Handling of a single client connection."""

from __future__ import annotations

from .parse import ParseError, parse
from .websocket import ws_handshake

BUFFER_SIZE = 5000

HEAD_RESPONSE = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: text/html; charset=UTF-8\r\n"
    b"Connection: close\r\n"
    b"\r\n"
)

GET_RESPONSE = HEAD_RESPONSE + (
    b"<!DOCTYPE html>\r\n"
    b"<html>\r\n"
    b"<head>\r\n"
    b"  <title>Pito en C</title>\r\n"
    b"</head>\r\n"
    b"<body>\r\n"
    b"  <h1>human</h1>\r\n"
    b"</body>\r\n"
    b"</html>\r\n"
)

SWITCHING_PREFIX = (
    b"HTTP/1.1 101 Switching Protocols\r\n"
    b"Upgrade: websocket\r\n"
    b"Connection: Upgrade\r\n"
    b"Sec-WebSocket-Accept: "
)


def _websocket_key(request):
    key = None
    for header in request.headers:
        if header.key.startswith("Sec-WebSocket-Key"):
            key = header.value
    return key


def build_response(request):
    """Return the bytes to send back for a parsed request."""
    if request.method.startswith("HEAD"):
        return HEAD_RESPONSE
    if not request.method.startswith("GET"):
        return b""

    upgrade = False
    for header in request.headers:
        if (
            upgrade
            and header.key.startswith("Upgrade")
            and header.value.startswith("websocket")
        ):
            key = _websocket_key(request)
            if key is not None:
                accept = ws_handshake(key).encode("ascii")
                return SWITCHING_PREFIX + accept + b"\r\n\r\n"
        if header.key.startswith("Connection") and header.value.startswith("Upgrade"):
            upgrade = True
    return GET_RESPONSE


def handle(conn, registry):
    """Serve one request on ``conn``, tracking it in ``registry``, then close it."""
    fd = conn.fileno()
    try:
        registry.insert(fd)
        data = conn.recv(BUFFER_SIZE)
        try:
            request = parse(data)
        except ParseError:
            return
        response = build_response(request)
        if response:
            conn.sendall(response)
    finally:
        registry.drop(fd)
        conn.close()