"""A bounded, closable channel for passing values between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class ChannelClosed(RuntimeError):
    """Raised when sending on a channel that has been closed."""


class BufferedChannel(Generic[T]):
    """A FIFO channel holding at most ``capacity`` values.

    ``send`` blocks while the buffer is full, ``recv`` blocks while it is
    empty. After ``close`` no more values can be sent, but values already
    buffered can still be received.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Buffer size must be positive")
        self._capacity = capacity
        self._queue: Deque[T] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def send(self, value: T) -> None:
        """Put a value in the channel, waiting for room if it is full."""
        with self._not_full:
            self._not_full.wait_for(
                lambda: len(self._queue) < self._capacity or self._closed
            )
            if self._closed:
                raise ChannelClosed("Channel is closed")
            self._queue.append(value)
            self._not_empty.notify()

    def recv(self) -> Tuple[Optional[T], bool]:
        """Take the next value.

        Returns ``(value, True)``, or ``(None, False)`` once the channel is
        closed and drained.
        """
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._queue) or self._closed)
            if self._queue:
                value = self._queue.popleft()
                self._not_full.notify()
                return value, True
            return None, False

    def close(self) -> None:
        """Close the channel, waking every waiting sender and receiver."""
        with self._lock:
            if not self._closed:
                self._closed = True
                self._not_empty.notify_all()
                self._not_full.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            value, ok = self.recv()
            if not ok:
                return
            yield value  # type: ignore[misc]

    def __enter__(self) -> "BufferedChannel[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()