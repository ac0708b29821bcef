"""Base64 encoding for the WebSocket handshake key."""

from __future__ import annotations

import base64
from typing import Union

__all__ = ["base64_encode"]


def base64_encode(data: Union[str, bytes, bytearray, memoryview]) -> str:
    """Return the padded standard Base64 encoding of ``data``.

    Text is encoded as UTF-8 before it is converted.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return base64.b64encode(raw).decode("ascii")