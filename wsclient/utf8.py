"""UTF-8 validation of text message payloads (RFC 6455, section 5.6)."""

from __future__ import annotations

from typing import Union

__all__ = ["is_valid_utf8"]


def is_valid_utf8(data: Union[bytes, bytearray, memoryview]) -> bool:
    """Return True if ``data`` is well-formed UTF-8.

    Overlong forms, surrogate halves, code points above U+10FFFF and
    truncated sequences are all rejected.
    """
    try:
        bytes(data).decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True