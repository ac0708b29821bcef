"""Console logging by topic with a per-topic log level."""

from __future__ import annotations

import sys
import threading
from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional, TextIO

__all__ = [
    "LogLevel",
    "LogTopic",
    "ConsoleLogger",
    "DEFAULT_TOPIC_LEVELS",
    "log_level_from_int",
    "extract_log_file_name",
]


class LogLevel(IntEnum):
    """Log severity; a message is shown if its level is at most the topic's."""

    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    def __str__(self) -> str:
        return _LEVEL_LETTERS.get(self, "?")


_LEVEL_LETTERS = {
    LogLevel.ERROR: "E",
    LogLevel.WARNING: "W",
    LogLevel.INFO: "I",
    LogLevel.DEBUG: "D",
}

_LEVEL_COLORS = {
    LogLevel.ERROR: "\033[1;91m",
    LogLevel.WARNING: "\033[0;93m",
    LogLevel.INFO: "\033[0;37m",
    LogLevel.DEBUG: "\033[0;30m",
}

_RESET = "\x1b[0m"


class LogTopic(IntEnum):
    """Subsystems that log messages."""

    NONE = 0
    DNS = 1
    TCP = 2
    SSL = 3
    HANDSHAKE = 4
    COMPRESSION = 5
    SEND_FRAME = 6
    SEND_FRAME_PAYLOAD = 7
    RECV_FRAME = 8
    RECV_FRAME_PAYLOAD = 9
    USER = 10

    def __str__(self) -> str:
        return _TOPIC_LABELS[self]


_TOPIC_LABELS = {
    LogTopic.NONE: "None",
    LogTopic.DNS: "DNS",
    LogTopic.TCP: "TCP",
    LogTopic.SSL: "SSL",
    LogTopic.HANDSHAKE: "Handshake",
    LogTopic.COMPRESSION: "Compression",
    LogTopic.SEND_FRAME: "SendFrame",
    LogTopic.SEND_FRAME_PAYLOAD: "SendFramePayload",
    LogTopic.RECV_FRAME: "RecvFrame",
    LogTopic.RECV_FRAME_PAYLOAD: "RecvFramePayload",
    LogTopic.USER: "User",
}

# Default level per topic; topics not listed start disabled.
DEFAULT_TOPIC_LEVELS = {
    LogTopic.DNS: LogLevel.INFO,
    LogTopic.TCP: LogLevel.INFO,
    LogTopic.SSL: LogLevel.WARNING,
    LogTopic.HANDSHAKE: LogLevel.INFO,
    LogTopic.COMPRESSION: LogLevel.WARNING,
    LogTopic.SEND_FRAME: LogLevel.WARNING,
    LogTopic.SEND_FRAME_PAYLOAD: LogLevel.WARNING,
    LogTopic.RECV_FRAME: LogLevel.WARNING,
    LogTopic.RECV_FRAME_PAYLOAD: LogLevel.WARNING,
    LogTopic.USER: LogLevel.INFO,
}


def log_level_from_int(level: int) -> LogLevel:
    """Convert an integer 0..4 to a LogLevel, raising ValueError otherwise."""
    if not 0 <= level <= 4:
        raise ValueError(f"log level out of bounds: {level}")
    return LogLevel(level)


def extract_log_file_name(path: str) -> str:
    """Return the part of ``path`` after its last '/' or '\\'."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


class ConsoleLogger:
    """Thread-safe logger writing coloured lines to a text stream.

    Each topic has its own level; ``min_level`` caps all of them.
    Output goes to ``stream``, or to ``sys.stderr`` when none is given.
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.DEBUG,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._lock = threading.Lock()
        self._stream = stream
        self._levels = {topic: LogLevel.NONE for topic in LogTopic}
        self._levels.update(DEFAULT_TOPIC_LEVELS)
        self.set_min_level(min_level)

    def is_enabled(self, level: LogLevel, topic: LogTopic) -> bool:
        """Return True if messages of ``level`` on ``topic`` are shown."""
        return level <= self._levels[LogTopic(topic)]

    def set_level(self, topic: LogTopic, level: LogLevel) -> None:
        """Set the level for one topic."""
        self._levels[LogTopic(topic)] = LogLevel(level)

    def level(self, topic: LogTopic) -> LogLevel:
        """Return the current level of a topic."""
        return self._levels[LogTopic(topic)]

    def set_min_level(self, min_level: LogLevel) -> None:
        """Lower every topic whose level is above ``min_level`` to it."""
        min_level = LogLevel(min_level)
        for topic, current in list(self._levels.items()):
            if current > min_level:
                self._levels[topic] = min_level

    def log(self, level: LogLevel, topic: LogTopic, message: str) -> None:
        """Write ``message`` if ``level`` is enabled for ``topic``."""
        level = LogLevel(level)
        topic = LogTopic(topic)
        if not self.is_enabled(level, topic):
            return

        caller = sys._getframe(1)
        location = f"{extract_log_file_name(caller.f_code.co_filename)}:{caller.f_lineno}"
        now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")
        color = _LEVEL_COLORS.get(level, "")
        line = (
            f"{color}{now} {level} {str(topic):<17} {location:<20}: "
            f"{color}{message}{_RESET}\n"
        )

        stream = self._stream if self._stream is not None else sys.stderr
        with self._lock:
            stream.write(line)
            stream.flush()