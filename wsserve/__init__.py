"""A small HTTP server that answers HEAD and GET and performs the WebSocket opening handshake."""

__version__ = "0.1.0"
__all__ = ["parse", "server", "websocket", "worker"]