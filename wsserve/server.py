"""Listening socket, client bookkeeping and the accept loop."""

from __future__ import annotations

import argparse
import os
import selectors
import socket

from .worker import handle

MAX_CLIENTS = 50
DEFAULT_PORT = 8080
BACKLOG = 100
POLL_INTERVAL = 0.5


class ClientLimitError(RuntimeError):
    """Raised when no more clients can be registered."""


class ClientRegistry:
    """The set of client descriptors currently being served."""

    def __init__(self):
        self._clients: list[int] = []

    def insert(self, fd):
        """Register a client descriptor."""
        if len(self._clients) >= MAX_CLIENTS - 1:
            raise ClientLimitError(f"at most {MAX_CLIENTS - 1} clients")
        self._clients.append(fd)

    def drop(self, fd):
        """Forget a client descriptor; unknown descriptors are ignored."""
        if fd in self._clients:
            self._clients.remove(fd)

    def __len__(self):
        return len(self._clients)

    def __contains__(self, fd):
        return fd in self._clients


def resolve_port(environ):
    """Return the port from ``PORT`` in ``environ``, or the default."""
    value = environ.get("PORT")
    if value is None:
        return DEFAULT_PORT
    port = int(value)
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port


def start_http(port):
    """Create a TCP socket listening on all interfaces at ``port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind(("", port))
        sock.listen(BACKLOG)
    except OSError:
        sock.close()
        raise
    return sock


def serve(sock, registry):
    """Accept and handle connections until ``sock`` is closed."""
    with selectors.DefaultSelector() as selector:
        selector.register(sock, selectors.EVENT_READ)
        while sock.fileno() != -1:
            try:
                events = selector.select(timeout=POLL_INTERVAL)
            except (OSError, ValueError):
                return
            for _ in events:
                try:
                    conn, _addr = sock.accept()
                except OSError:
                    return
                try:
                    handle(conn, registry)
                except (ClientLimitError, ConnectionError):
                    pass


def main(argv=None):
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(prog="wsserve", description="Serve HTTP and WebSocket handshakes.")
    parser.add_argument("--port", type=int, default=None, help="port to listen on (default: $PORT or 8080)")
    args = parser.parse_args(argv)
    port = args.port if args.port is not None else resolve_port(os.environ)
    registry = ClientRegistry()
    with start_http(port) as sock:
        try:
            serve(sock, registry)
        except KeyboardInterrupt:
            pass
    return 0