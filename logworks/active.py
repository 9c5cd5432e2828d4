"""An active object: a worker thread that runs queued callbacks in order."""

from __future__ import annotations

import itertools
import threading
from typing import Callable

from logworks.shared_queue import SharedQueue

DEFAULT_THREAD_NAME_PREFIX = "G3log_Worker#"

Callback = Callable[[], object]

_thread_numbers = itertools.count(1)


class Active:
    """Runs callbacks one at a time, in submission order, on its own thread.

    Closing queues a stop marker behind all pending work and waits for the
    worker to finish, so everything sent before closing is executed.
    """

    def __init__(self, thread_name_prefix: str = DEFAULT_THREAD_NAME_PREFIX) -> None:
        self._queue: SharedQueue[Callback] = SharedQueue()
        self._done = False
        self._closed = False
        self._lock = threading.Lock()
        self._thread = threading.Thread(
            target=self._run,
            name=f"{thread_name_prefix}{next(_thread_numbers)}",
            daemon=True,
        )
        self._thread.start()

    @classmethod
    def create(cls, thread_name_prefix: str = DEFAULT_THREAD_NAME_PREFIX) -> "Active":
        """Create an Active whose worker thread is already running."""
        return cls(thread_name_prefix)

    @property
    def thread_name(self) -> str:
        """Name of the worker thread."""
        return self._thread.name

    @property
    def closed(self) -> bool:
        return self._closed

    def _run(self) -> None:
        while not self._done:
            callback = self._queue.wait_and_pop()
            callback()

    def _finish(self) -> None:
        self._done = True

    def send(self, callback: Callback) -> None:
        """Queue a callback for execution on the worker thread."""
        with self._lock:
            if self._closed:
                raise RuntimeError("send() on a closed Active")
            self._queue.push(callback)

    def close(self) -> None:
        """Run all pending callbacks, then stop the worker thread."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.push(self._finish)
        if threading.current_thread() is not self._thread:
            self._thread.join()

    def __enter__(self) -> "Active":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()