# wsclient

Building blocks for a WebSocket client (RFC 6455), in pure Python with no
third-party dependencies.

## What is included

- `wsclient.errors`: `CloseCode` (close frame status codes such as
  `CloseCode.NORMAL_CLOSURE`), `WSErrorCode`, the `WSError` exception,
  `is_valid_close_code()` (the named codes other than `NOT_SET`, plus
  3000-4999) and `close_code_name()` (lower-case name or `"unknown"`).
- `wsclient.log`: `LogLevel` (`NONE`, `ERROR`, `WARNING`, `INFO`, `DEBUG`),
  `LogTopic`, `DEFAULT_TOPIC_LEVELS`, `log_level_from_int()`,
  `extract_log_file_name()` and a thread-safe `ConsoleLogger`. The logger
  keeps one level per topic, which `set_level()`, `level()` and
  `set_min_level()` read and change at runtime; `log()` writes a coloured,
  timestamped line to the given stream, or to standard error.
- `wsclient.circular_buffer`: a fixed-capacity `CircularBuffer` (the capacity
  must be a power of two) with `push()`, `extend()`, `pop()`, `pop_many()`,
  `peek()`, indexing and `len()`, plus `available_span()` / `used_span()`
  views with `move_head()` / `move_tail()` for writing and reading in place.
  Pushing past capacity raises `OverflowError`; reading from an empty buffer
  raises `IndexError`.
- `wsclient.sha1`: an incremental `SHA1` hasher (`update()`, `update_from()`
  for binary streams, `final_bytes()`) and a one-shot `sha1()`.
- `wsclient.b64`: `base64_encode()` for bytes or text (text is UTF-8 encoded).
- `wsclient.networking`: `byteswap()`, `host_to_network()` and
  `network_to_host()` for 16, 32 and 64 bit unsigned values.
- `wsclient.strings`: ASCII case-insensitive comparison (`equals_ci`,
  `less_ci`, `ci_sort_key`), `trim`, `trim_left`, `trim_right` and
  `string_from_bytes`.
- `wsclient.utf8`: `is_valid_utf8()`, the check RFC 6455 requires for text
  frames.
- `wsclient.timeout`: `Timeout`, which reports `elapsed()`, `remaining()`,
  `remaining_timeval()` and `is_expired()` against a monotonic clock (or a
  clock you pass in).

## Examples

```python
from wsclient.b64 import base64_encode
from wsclient.sha1 import sha1

# Sec-WebSocket-Accept from a client key
key = "dGhlIHNhbXBsZSBub25jZQ=="
guid = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"
accept = base64_encode(sha1((key + guid).encode()))
assert accept == "s3pPLMBiTxaQ9kYGzzhZRbK+xOo="
```

```python
from wsclient.log import ConsoleLogger, LogLevel, LogTopic

logger = ConsoleLogger(LogLevel.INFO)
logger.set_level(LogTopic.HANDSHAKE, LogLevel.DEBUG)
logger.log(LogLevel.INFO, LogTopic.USER, "connected")
```

```python
from wsclient.circular_buffer import CircularBuffer

buf = CircularBuffer(8)
buf.extend([1, 2, 3])
assert buf.pop() == 1
assert len(buf) == 2
```

```python
from wsclient.errors import CloseCode, WSError, WSErrorCode

try:
    raise WSError(WSErrorCode.PROTOCOL_ERROR, "bad frame", CloseCode.PROTOCOL_ERROR)
except WSError as err:
    print(err.error_code_message())  # protocol_error
    print(err.close_with_code)       # protocol_error
```

```python
from wsclient.timeout import Timeout

deadline = Timeout(5.0)
if not deadline.is_expired():
    seconds, micros = deadline.remaining_timeval()
```

## What this package does not do

It is a set of helpers, not a client. It does not open connections, resolve
host names, speak TLS, perform the opening handshake, parse URLs or HTTP
headers, read or write frames, mask payloads, compress messages or generate
random masking keys. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```