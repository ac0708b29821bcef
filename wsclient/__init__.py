"""Building blocks for a WebSocket client: errors, logging, buffers, hashing and utilities."""

__version__ = "0.1.0"

__all__ = [
    "b64",
    "circular_buffer",
    "errors",
    "log",
    "networking",
    "sha1",
    "strings",
    "timeout",
    "utf8",
]