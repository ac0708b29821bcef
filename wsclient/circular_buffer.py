"""Fixed-capacity FIFO ring buffer with direct access to its free and used regions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, List, TypeVar, overload

__all__ = ["CircularBuffer"]

T = TypeVar("T")


class _Window(Sequence, Generic[T]):
    """Writable view over a contiguous region of a buffer's storage."""

    __slots__ = ("_storage", "_start", "_length")

    def __init__(self, storage: List[Any], start: int, length: int) -> None:
        self._storage = storage
        self._start = start
        self._length = length

    def __len__(self) -> int:
        return self._length

    def _position(self, index: int) -> int:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("window index out of range")
        return self._start + index

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._length))]
        return self._storage[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._storage[self._position(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._storage[self._start:self._start + self._length])

    def __repr__(self) -> str:
        return f"_Window({list(self)!r})"


class CircularBuffer(Generic[T]):
    """FIFO buffer of fixed, power-of-two capacity that wraps around.

    Pushing more items than there is room for raises ``OverflowError``;
    callers are expected to check ``available()`` first. Not thread-safe.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1 or capacity & (capacity - 1):
            raise ValueError(f"capacity must be a power of two, got {capacity}")
        self._storage: List[Any] = [None] * capacity
        self._capacity = capacity
        self._mask = capacity - 1
        self._head = 0
        self._tail = 0
        self._full = False

    def push(self, item: T) -> None:
        """Append one item."""
        if self._full:
            raise OverflowError("buffer is full")
        self._storage[self._head] = item
        self._head = (self._head + 1) & self._mask
        self._full = self._head == self._tail

    def extend(self, items: Iterable[T]) -> None:
        """Append all ``items``; there must be room for every one of them."""
        values = list(items)
        count = len(values)
        if count > self.available():
            raise OverflowError(
                f"cannot push {count} items, only {self.available()} available"
            )
        if count == 0:
            return
        first = min(count, self._capacity - self._head)
        self._storage[self._head:self._head + first] = values[:first]
        rest = count - first
        if rest:
            self._storage[:rest] = values[first:]
            self._head = rest
        else:
            self._head = (self._head + first) & self._mask
        self._full = self._head == self._tail

    def pop(self) -> T:
        """Remove and return the oldest item; raise IndexError if empty."""
        if self.empty():
            raise IndexError("pop from empty buffer")
        item = self._storage[self._tail]
        self._tail = (self._tail + 1) & self._mask
        self._full = False
        return item

    def pop_many(self, count: int) -> List[T]:
        """Remove and return the ``count`` oldest items, oldest first."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        if count > len(self):
            raise IndexError(
                f"cannot pop {count} items, buffer holds only {len(self)}"
            )
        first = min(count, self._capacity - self._tail)
        result = self._storage[self._tail:self._tail + first]
        rest = count - first
        if rest:
            result.extend(self._storage[:rest])
            self._tail = rest
        else:
            self._tail = (self._tail + first) & self._mask
        self._full = False
        return result

    def empty(self) -> bool:
        """Return True if the buffer holds no items."""
        return self._head == self._tail and not self._full

    def full(self) -> bool:
        """Return True if no more items fit."""
        return self._full

    def clear(self) -> None:
        """Reset the buffer to the empty state."""
        self._head = 0
        self._tail = 0
        self._full = False

    def available(self) -> int:
        """Return how many more items fit."""
        return self._capacity - len(self)

    def available_span(self) -> _Window[T]:
        """Return a writable view of the contiguous free slots after the head.

        After writing into it, commit the items with ``move_head``. Because of
        wrap-around the view may be shorter than ``available()``.
        """
        if self._full:
            return _Window(self._storage, self._head, 0)
        if self._head >= self._tail:
            return _Window(self._storage, self._head, self._capacity - self._head)
        return _Window(self._storage, self._head, self._tail - self._head)

    def used_span(self) -> _Window[T]:
        """Return a view of the contiguous stored items starting at the tail.

        Discard items read from it with ``move_tail``. Because of wrap-around
        the view may be shorter than ``len(self)``.
        """
        if self._full or self._head < self._tail:
            return _Window(self._storage, self._tail, self._capacity - self._tail)
        return _Window(self._storage, self._tail, self._head - self._tail)

    def move_head(self, count: int) -> None:
        """Advance the write position by ``count`` items already written."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > self.available():
            raise OverflowError("cannot move head, buffer (almost) full")
        self._head = (self._head + count) & self._mask
        self._full = self._head == self._tail and (count > 0 or self._full)

    def move_tail(self, count: int) -> None:
        """Discard the ``count`` oldest items."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count > len(self):
            raise IndexError("buffer does not contain enough items to move tail")
        self._tail = (self._tail + count) & self._mask
        if count:
            self._full = False

    def peek(self) -> T:
        """Return the oldest item without removing it; raise IndexError if empty."""
        if self.empty():
            raise IndexError("peek into empty buffer")
        return self._storage[self._tail]

    def capacity(self) -> int:
        """Return the maximum number of items the buffer holds."""
        return self._capacity

    def __len__(self) -> int:
        if self._full:
            return self._capacity
        return (self._head - self._tail) & self._mask

    def __getitem__(self, index: int) -> T:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("buffer index out of range")
        return self._storage[(self._tail + index) & self._mask]

    def __repr__(self) -> str:
        items = [self[i] for i in range(len(self))]
        return f"CircularBuffer(capacity={self._capacity}, items={items!r})"