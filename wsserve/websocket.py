"""WebSocket opening handshake."""

import base64
import hashlib

WS_GUID = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"


def ws_handshake(key):
    """Return the Sec-WebSocket-Accept value for a client key."""
    digest = hashlib.sha1((key.strip() + WS_GUID).encode("latin-1")).digest()
    return base64.b64encode(digest).decode("ascii")