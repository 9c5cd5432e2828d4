"""Helpers for tests of logging code: fatal-call mocks, output capture and cleanup."""

from __future__ import annotations

import io
import os
import sys
import threading
import time
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from logworks.atomicbool import AtomicBool

PathLike = Union[str, Path]

NO_SIGNAL = -1


class MockFatal:
    """Stand-in for a fatal exit handler that records what it was given.

    If a forward callable is supplied, every fatal message is passed on to it
    after being recorded, so it can still reach the log sinks.
    """

    def __init__(self, forward: Optional[Callable[[object], object]] = None) -> None:
        self._forward = forward
        self._lock = threading.Lock()
        self.message = ""
        self.signal = NO_SIGNAL
        self.was_called = False

    def call(self, message: object, signal_id: int) -> None:
        """Record a fatal message and its signal, then forward the message."""
        with self._lock:
            self.message = str(message)
            self.signal = signal_id
            self.was_called = True
        if self._forward is not None:
            self._forward(message)

    def clear(self) -> None:
        """Forget any recorded fatal call."""
        with self._lock:
            self.message = ""
            self.signal = NO_SIGNAL
            self.was_called = False


def remove_file(path_to_file: PathLike) -> bool:
    """Delete a file and report whether it was removed."""
    try:
        os.remove(path_to_file)
    except OSError:
        return False
    return True


def verify_content(total_text: str, msg_to_find: str) -> bool:
    """Return True if msg_to_find occurs in total_text."""
    return msg_to_find in total_text


def read_file_to_text(filename: PathLike) -> str:
    """Return the whole content of a file, or an empty string if it cannot be read."""
    try:
        with open(filename, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return ""


class ScopedOut:
    """Redirect sys.stdout or sys.stderr into a text buffer while in scope.

    Example:
        with ScopedOut("stdout") as buffer:
            print("Hello World", end="")
        assert buffer.getvalue() == "Hello World"
    """

    _STREAMS = ("stdout", "stderr")

    def __init__(self, stream: str = "stdout", buffer: Optional[TextIO] = None) -> None:
        if stream not in self._STREAMS:
            raise ValueError(f"stream must be one of {self._STREAMS}, not {stream!r}")
        self._stream = stream
        self.buffer: TextIO = buffer if buffer is not None else io.StringIO()
        self._saved: Optional[TextIO] = None

    def _current(self) -> TextIO:
        return sys.stdout if self._stream == "stdout" else sys.stderr

    def _install(self, target: TextIO) -> None:
        if self._stream == "stdout":
            sys.stdout = target
        else:
            sys.stderr = target

    def __enter__(self) -> TextIO:
        self._saved = self._current()
        self._install(self.buffer)
        return self.buffer

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            self._install(self._saved)
            self._saved = None


class LogFileCleaner:
    """Collects log files and deletes them all when cleaned or on scope exit."""

    def __init__(self) -> None:
        self._logs: List[str] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._logs)

    def add_log_to_clean(self, path_to_log: PathLike) -> None:
        """Register a file for deletion; a path already registered is ignored."""
        path = os.fspath(path_to_log)
        with self._lock:
            if path not in self._logs:
                self._logs.append(path)

    def clean(self) -> None:
        """Delete every registered file and forget them all.

        Raises OSError naming the files that could not be removed.
        """
        with self._lock:
            failed = [path for path in self._logs if not remove_file(path)]
            self._logs.clear()
        if failed:
            raise OSError(f"UNABLE to remove: {', '.join(failed)}")

    def __enter__(self) -> "LogFileCleaner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clean()


class ScopedSetTrue:
    """A slow message receiver that counts messages and raises a flag on exit."""

    def __init__(self, flag: Optional[AtomicBool] = None, wait: float = 0.1) -> None:
        self.flag = flag if flag is not None else AtomicBool(False)
        self._wait = wait
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """Number of messages received so far."""
        with self._lock:
            return self._count

    def receive_msg(self, message: str) -> None:
        """Wait a moment, then count the message."""
        if self._wait > 0:
            time.sleep(self._wait)
        with self._lock:
            self._count += 1

    def __enter__(self) -> "ScopedSetTrue":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flag.set(True)