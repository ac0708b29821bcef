"""ASCII case-insensitive comparison and whitespace trimming helpers."""

from __future__ import annotations

from typing import Tuple, Union

__all__ = [
    "equals_ci",
    "less_ci",
    "ci_sort_key",
    "trim_left",
    "trim_right",
    "trim",
    "string_from_bytes",
]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_WHITESPACE = " \t\n\v\f\r"

Text = Union[str, bytes]


def _fold(s: Text) -> Text:
    if isinstance(s, bytes):
        return s.lower()
    return s.translate(_ASCII_LOWER)


def equals_ci(a: Text, b: Text) -> bool:
    """Return True if ``a`` and ``b`` are equal ignoring ASCII case."""
    return len(a) == len(b) and _fold(a) == _fold(b)


def ci_sort_key(s: Text) -> Tuple[int, Text]:
    """Sort key ordering shorter strings first, then by ASCII-folded content."""
    return len(s), _fold(s)


def less_ci(a: Text, b: Text) -> bool:
    """Case-insensitive ordering: shorter first, then lexicographic."""
    return ci_sort_key(a) < ci_sort_key(b)


def trim_left(s: str) -> str:
    """Return ``s`` without leading whitespace."""
    return s.lstrip(_WHITESPACE)


def trim_right(s: str) -> str:
    """Return ``s`` without trailing whitespace."""
    return s.rstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Return ``s`` without leading and trailing whitespace."""
    return s.strip(_WHITESPACE)


def string_from_bytes(data: Union[bytes, bytearray, memoryview]) -> str:
    """Decode bytes as UTF-8, keeping undecodable bytes as surrogate escapes."""
    return bytes(data).decode("utf-8", errors="surrogateescape")