"""Conversion of fixed-width unsigned integers between host and network byte order."""

from __future__ import annotations

import sys

__all__ = ["byteswap", "host_to_network", "network_to_host"]

_WIDTHS = {16: 2, 32: 4, 64: 8}


def _byte_count(value: int, width: int) -> int:
    try:
        size = _WIDTHS[width]
    except KeyError:
        raise ValueError(f"unsupported width {width}, expected 16, 32 or 64") from None
    if not 0 <= value < 1 << width:
        raise ValueError(f"value {value} does not fit in {width} unsigned bits")
    return size


def byteswap(value: int, width: int) -> int:
    """Reverse the byte order of an unsigned integer of ``width`` bits."""
    size = _byte_count(value, width)
    return int.from_bytes(value.to_bytes(size, "big"), "little")


def host_to_network(value: int, width: int) -> int:
    """Convert ``value`` from host byte order to big-endian network order."""
    if sys.byteorder == "little":
        return byteswap(value, width)
    _byte_count(value, width)
    return value


def network_to_host(value: int, width: int) -> int:
    """Convert ``value`` from big-endian network order to host byte order."""
    return host_to_network(value, width)