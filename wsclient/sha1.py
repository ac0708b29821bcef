"""SHA-1 message digest, as used by the WebSocket opening handshake."""

from __future__ import annotations

import struct
from typing import BinaryIO, Union

__all__ = ["SHA1", "sha1"]

BytesLike = Union[bytes, bytearray, memoryview]

_BLOCK_BYTES = 64
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_READ_SIZE = 1 << 16


def _rol(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & _MASK32


class SHA1:
    """Incremental SHA-1 hasher.

    Feed data with ``update`` or ``update_from``; ``final_bytes`` returns the
    20-byte digest and resets the hasher for the next message.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._digest = list(_INITIAL)
        self._buffer = bytearray()
        self._transforms = 0

    def update(self, data: BytesLike) -> None:
        """Hash more bytes."""
        self._buffer += memoryview(data).cast("B")
        full = len(self._buffer) - len(self._buffer) % _BLOCK_BYTES
        if not full:
            return
        view = memoryview(self._buffer)
        for offset in range(0, full, _BLOCK_BYTES):
            self._transform(view[offset:offset + _BLOCK_BYTES])
        view.release()
        del self._buffer[:full]

    def update_from(self, stream: BinaryIO) -> None:
        """Hash everything that can be read from a binary stream."""
        while chunk := stream.read(_READ_SIZE):
            self.update(chunk)

    def final_bytes(self) -> bytes:
        """Return the digest of all data hashed so far and reset."""
        total_bits = ((self._transforms * _BLOCK_BYTES + len(self._buffer)) * 8) & _MASK64
        padding = b"\x80" + b"\x00" * ((55 - len(self._buffer)) % _BLOCK_BYTES)
        self.update(padding + struct.pack(">Q", total_bits))
        result = struct.pack(">5I", *self._digest)
        self._reset()
        return result

    def _transform(self, block: memoryview) -> None:
        w = list(struct.unpack(">16I", block))
        for i in range(16, 80):
            w.append(_rol(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

        a, b, c, d, e = self._digest
        for i, word in enumerate(w):
            if i < 20:
                f = (b & c) | (~b & d)
                k = 0x5A827999
            elif i < 40:
                f = b ^ c ^ d
                k = 0x6ED9EBA1
            elif i < 60:
                f = (b & c) | (b & d) | (c & d)
                k = 0x8F1BBCDC
            else:
                f = b ^ c ^ d
                k = 0xCA62C1D6
            temp = (_rol(a, 5) + (f & _MASK32) + e + k + word) & _MASK32
            a, b, c, d, e = temp, a, _rol(b, 30), c, d

        self._digest = [
            (x + y) & _MASK32 for x, y in zip(self._digest, (a, b, c, d, e))
        ]
        self._transforms += 1


def sha1(data: BytesLike) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    hasher = SHA1()
    hasher.update(data)
    return hasher.final_bytes()