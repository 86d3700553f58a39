# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Closable FIFO handoff between one producer and many competing consumers."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from ..errors import QueueClosedError

T = TypeVar("T")


class WorkQueue(Generic[T]):
    """
    FIFO queue with an explicit "no more items" signal.

    Each item is handed to exactly one consumer. `get()` blocks until an item
    is available or the queue has been closed and drained, in which case it
    returns None. `maxsize <= 0` means unbounded.
    """

    def __init__(self, maxsize: int = 0):
        self.maxsize = maxsize
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    def put(self, item: T) -> None:
        if item is None:
            raise ValueError("None cannot be enqueued; it marks a closed queue")
        with self._cond:
            while not self._closed and self.maxsize > 0 and len(self._items) >= self.maxsize:
                self._cond.wait()
            if self._closed:
                raise QueueClosedError("cannot enqueue onto a closed WorkQueue")
            self._items.append(item)
            self._cond.notify_all()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def get(self) -> T | None:
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            return None

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.get()
            if item is None:
                return
            yield item
