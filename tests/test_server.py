import socket
import threading

import pytest

from wsserve.server import (
    DEFAULT_PORT,
    MAX_CLIENTS,
    ClientLimitError,
    ClientRegistry,
    main,
    resolve_port,
    serve,
    start_http,
)
from wsserve.worker import GET_RESPONSE, HEAD_RESPONSE


def test_insert_and_drop():
    registry = ClientRegistry()
    registry.insert(7)
    assert 7 in registry
    assert len(registry) == 1
    registry.drop(7)
    assert 7 not in registry
    assert len(registry) == 0


def test_registry_limit():
    registry = ClientRegistry()
    for fd in range(MAX_CLIENTS - 1):
        registry.insert(fd)
    with pytest.raises(ClientLimitError):
        registry.insert(1000)
    assert len(registry) == MAX_CLIENTS - 1


def test_drop_unknown_is_ignored():
    registry = ClientRegistry()
    registry.insert(3)
    registry.drop(4)
    assert len(registry) == 1


def test_resolve_port_default():
    assert resolve_port({}) == DEFAULT_PORT == 8080


def test_resolve_port_from_environment():
    assert resolve_port({"PORT": "9000"}) == 9000


def test_resolve_port_invalid():
    with pytest.raises(ValueError):
        resolve_port({"PORT": "http"})
    with pytest.raises(ValueError):
        resolve_port({"PORT": "70000"})


def test_main_rejects_bad_port_argument():
    with pytest.raises(SystemExit):
        main(["--port", "not-a-port"])


def _request(port, payload):
    with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
        client.sendall(payload)
        chunks = []
        while chunk := client.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks)


def test_serve_answers_requests_and_stops_when_closed():
    sock = start_http(0)
    port = sock.getsockname()[1]
    registry = ClientRegistry()
    thread = threading.Thread(target=serve, args=(sock, registry), daemon=True)
    thread.start()
    try:
        assert _request(port, b"GET / HTTP/1.1\r\nHost: a\r\n\r\n") == GET_RESPONSE
        assert _request(port, b"HEAD / HTTP/1.1\r\n\r\n") == HEAD_RESPONSE
    finally:
        sock.close()
        thread.join(timeout=5)
    assert not thread.is_alive()
    assert len(registry) == 0