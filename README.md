# wsserve

A small single-threaded HTTP server. For each connection it reads one
request (a single read of up to 5000 bytes), parses the request line and
headers, sends one response and closes the connection. It answers:

- `HEAD` with a bare `200 OK` header block;
- `GET` with a short HTML page, or, when the request carries
  `Connection: Upgrade` followed by `Upgrade: websocket` and a
  `Sec-WebSocket-Key` header, with a `101 Switching Protocols` response
  holding the computed `Sec-WebSocket-Accept` value.

Any other method gets no response; the connection is simply closed, as it
is when the request line cannot be parsed.

## Installing

```
pip install .
```

## Running

```
wsserve
```

The server listens on all interfaces on port 8080. Set the `PORT`
environment variable, or pass `--port`, to choose another port:

```
PORT=9000 wsserve
wsserve --port 9000
```

`--port` takes precedence over `PORT`. Stop the server with Ctrl-C.

## Using it as a library

```python
from wsserve.parse import parse
from wsserve.websocket import ws_handshake
from wsserve.worker import build_response

request = parse(
    "GET /chat HTTP/1.1\r\n"
    "Host: localhost\r\n"
    "Connection: Upgrade\r\n"
    "Upgrade: websocket\r\n"
    "Sec-WebSocket-Key: dGhlIHNhbXBsZSBub25jZQ==\r\n"
    "\r\n"
)
print(request.method, request.path, request.version)
print(request.get("Host"))

print(ws_handshake("dGhlIHNhbXBsZSBub25jZQ=="))
# s3pPLMBiTxaQ9kYGzzhZRbK+xOo=

print(build_response(request).decode())
```

- `wsserve.parse`: `parse` accepts bytes or text and returns a `Request`
  (`method`, `path`, `version`, `headers` as a list of `Header`, `body`).
  `Request.get` returns the first header value with a given name, or
  `None`. At most 100 headers are read. `parse` raises `ParseError` when
  the request line is malformed; `parse_header` raises it for a header
  line without a colon.
- `wsserve.websocket`: `ws_handshake` computes the `Sec-WebSocket-Accept`
  value for a client key.
- `wsserve.worker`: `build_response` returns the response bytes for a
  parsed request; `handle` serves one connection and closes it.
- `wsserve.server`: `resolve_port`, `start_http`, `serve`, `main`, and
  `ClientRegistry`, which tracks at most 49 clients and raises
  `ClientLimitError` from `insert` when full.

## What it does not do

The server stops at the WebSocket opening handshake: after sending the
`101 Switching Protocols` response it closes the connection, so no
WebSocket frames are ever exchanged. It does not serve files, keep
connections alive, read request bodies beyond the first read, or handle
connections concurrently.

## Tests

```
pip install ".[test]"
pytest
```