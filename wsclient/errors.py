"""WebSocket close codes, client error codes and the client exception type."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "CloseCode",
    "WSErrorCode",
    "WSError",
    "is_valid_close_code",
    "close_code_name",
]


class CloseCode(IntEnum):
    """Close frame status codes defined by RFC 6455.

    Codes 3000-3999 are reserved for libraries, frameworks and applications,
    4000-4999 for private use; those are valid but have no member here.
    """

    NOT_SET = 0
    NORMAL_CLOSURE = 1000
    GOING_AWAY = 1001
    PROTOCOL_ERROR = 1002
    UNACCEPTABLE_DATA_TYPE = 1003
    INVALID_FRAME_PAYLOAD_DATA = 1007
    POLICY_VIOLATION = 1008
    MESSAGE_TOO_BIG = 1009
    MISSING_EXTENSION = 1010
    UNEXPECTED_CONDITION = 1011

    def __str__(self) -> str:
        return self.name.lower()


def is_valid_close_code(code: int) -> bool:
    """Return True if ``code`` may be sent in a close frame."""
    value = int(code)
    if value in CloseCode.__members__.values() and value != CloseCode.NOT_SET:
        return True
    return 3000 <= value <= 4999


def close_code_name(code: int) -> str:
    """Return the lower-case name of a close code, or ``"unknown"``."""
    try:
        return str(CloseCode(int(code)))
    except ValueError:
        return "unknown"


class WSErrorCode(IntEnum):
    """Error categories reported by the WebSocket client."""

    SUCCESS = 0
    CONNECTION_CLOSED = 1
    TRANSPORT_ERROR = 3
    PROTOCOL_ERROR = 4
    URL_ERROR = 5
    BUFFER_ERROR = 6
    UNCATEGORIZED_ERROR = 7
    COMPRESSION_ERROR = 8
    TIMEOUT_ERROR = 9
    LOGIC_ERROR = 10

    def __str__(self) -> str:
        return self.name.lower()


class WSError(Exception):
    """Error raised by the WebSocket client.

    ``close_with_code`` is the close code the connection should be closed
    with in response to this error, or ``CloseCode.NOT_SET``.
    """

    def __init__(
        self,
        code: WSErrorCode,
        message: str,
        close_with_code: int = CloseCode.NOT_SET,
    ) -> None:
        super().__init__(message)
        self.code = WSErrorCode(code)
        self.message = message
        self.close_with_code = close_with_code

    def error_code_message(self) -> str:
        """Return the name of this error's category."""
        return str(self.code)

    def __str__(self) -> str:
        return (
            f"WSClientError {self.code}: {self.message} "
            f"(close code {close_code_name(self.close_with_code)})"
        )

    def __repr__(self) -> str:
        return (
            f"WSError({self.code!s}, {self.message!r}, "
            f"close_with_code={close_code_name(self.close_with_code)})"
        )