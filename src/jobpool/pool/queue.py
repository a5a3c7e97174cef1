"""Bounded, closable FIFO queue of jobs shared by submitters and workers.

The standard library's queue.Queue treats maxsize=0 as unbounded and has no
closed state consumers can observe, so the pool uses its own queue built on
the same pair-of-Conditions design.
"""

import threading
import typing as t
from collections import deque

from ..domain.exceptions import QueueClosedError

Job = t.Callable[[], t.Any]
QueueItem = tuple[int, Job]


class JobQueue:
    """FIFO queue that blocks producers when full and consumers when empty.

    Capacity semantics:
    - put() blocks while the buffered items fill the capacity plus the number
      of consumers currently idle in get(). An idle consumer therefore always
      lets a producer hand an item straight over, which is what makes a
      capacity of zero behave as a rendezvous rather than a deadlock.
    - A negative capacity is treated as zero.

    Close semantics:
    - close() is idempotent.
    - After close(), put() raises QueueClosedError, including for producers
      already blocked on a full queue.
    - Items already buffered remain available; get() raises QueueClosedError
      only once the queue is closed and drained.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._maxsize = max(maxsize, 0)
        self._items: deque[QueueItem] = deque()
        self._mutex = threading.Lock()
        self._not_empty = threading.Condition(self._mutex)
        self._not_full = threading.Condition(self._mutex)
        self._idle_consumers = 0
        self._closed = False

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def closed(self) -> bool:
        with self._mutex:
            return self._closed

    def qsize(self) -> int:
        """Number of items buffered and not yet taken by a consumer."""
        with self._mutex:
            return len(self._items)

    def put(self, item: QueueItem) -> None:
        """Append item, blocking while the queue is full.

        Raises:
            QueueClosedError: If the queue is closed before item is accepted
        """
        with self._not_full:
            while (
                not self._closed
                and len(self._items) >= self._maxsize + self._idle_consumers
            ):
                self._not_full.wait()
            if self._closed:
                raise QueueClosedError("Cannot put onto a closed queue")
            self._items.append(item)
            self._not_empty.notify()

    def get(self) -> QueueItem:
        """Remove and return the oldest item, blocking while the queue is empty.

        Raises:
            QueueClosedError: If the queue is closed and drained
        """
        with self._not_empty:
            while not self._items:
                if self._closed:
                    raise QueueClosedError("Queue is closed and drained")
                self._idle_consumers += 1
                # An idle consumer opens a hand-off slot for a waiting producer.
                self._not_full.notify()
                try:
                    self._not_empty.wait()
                finally:
                    self._idle_consumers -= 1
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def close(self) -> None:
        """Stop accepting items and wake every blocked producer and consumer."""
        with self._mutex:
            self._closed = True
            self._not_full.notify_all()
            self._not_empty.notify_all()
