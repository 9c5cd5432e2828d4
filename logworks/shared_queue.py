"""A blocking, thread-safe FIFO queue for many producers and many consumers."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class SharedQueue(Generic[T]):
    """FIFO queue guarded by a lock, with a blocking pop."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def try_pop(self) -> T:
        """Remove and return the oldest item without waiting.

        Raises IndexError if the queue is empty.
        """
        with self._cond:
            if not self._items:
                raise IndexError("pop from an empty SharedQueue")
            return self._items.popleft()

    def wait_and_pop(self) -> T:
        """Remove and return the oldest item, waiting until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def empty(self) -> bool:
        """Return True if the queue holds no items."""
        with self._cond:
            return not self._items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)