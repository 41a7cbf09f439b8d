"""A thread-safe FIFO queue with blocking, cancellable and non-blocking pops."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# How often a waiting pop_context re-checks its cancel event.
_POLL_INTERVAL = 0.01


class QueueClosedError(Exception):
    """Raised when pushing to a closed queue or popping from a closed, empty one."""


class QueueEmptyError(Exception):
    """Raised by a non-blocking pop on an empty queue."""


class CanceledError(Exception):
    """Raised when a waiting pop is cancelled or times out."""


class ZQueue(Generic[T]):
    """A FIFO queue for producer/consumer use across threads.

    Closing the queue wakes every blocked consumer; items already queued
    can still be popped after close.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._items: deque[T] = deque()
        self._closed = False

    def push(self, item: T) -> None:
        """Append ``item``; raise QueueClosedError if the queue is closed."""
        with self._cond:
            if self._closed:
                raise QueueClosedError("queue closed")
            self._items.append(item)
            self._cond.notify()

    def pop(self) -> T:
        """Remove and return the front item, blocking until one is available.

        Raises QueueClosedError once the queue is closed and empty.
        """
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if not self._items:
                raise QueueClosedError("queue closed")
            return self._items.popleft()

    def pop_context(
        self,
        cancel: Optional[threading.Event] = None,
        timeout: Optional[float] = None,
    ) -> T:
        """Like :meth:`pop`, but give up when ``cancel`` is set or ``timeout`` expires.

        Raises CanceledError when giving up and QueueClosedError once the
        queue is closed and empty.
        """
        deadline = None if timeout is None else time.monotonic() + timeout

        def canceled() -> bool:
            if cancel is not None and cancel.is_set():
                return True
            return deadline is not None and time.monotonic() >= deadline

        with self._cond:
            while not self._items and not self._closed:
                if canceled():
                    raise CanceledError("operation canceled")
                wait_for = _POLL_INTERVAL if cancel is not None else None
                if deadline is not None:
                    remaining = max(deadline - time.monotonic(), 0.0)
                    wait_for = remaining if wait_for is None else min(wait_for, remaining)
                self._cond.wait(wait_for)
                if canceled():
                    raise CanceledError("operation canceled")
            if not self._items:
                raise QueueClosedError("queue closed")
            return self._items.popleft()

    def try_pop(self) -> T:
        """Remove and return the front item without blocking.

        Raises QueueEmptyError if there is nothing to pop.
        """
        with self._cond:
            if not self._items:
                raise QueueEmptyError("queue empty")
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def close(self) -> None:
        """Close the queue and wake every blocked consumer."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def is_closed(self) -> bool:
        """Return True once the queue has been closed."""
        with self._cond:
            return self._closed

    def __enter__(self) -> "ZQueue[T]":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()