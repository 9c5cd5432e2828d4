"""A boolean flag that is safe to share between threads."""

from __future__ import annotations

import threading
from typing import Union


class AtomicBool:
    """A lock-protected boolean that can be copied, compared and assigned."""

    def __init__(self, value: Union[bool, "AtomicBool"] = False) -> None:
        self._lock = threading.Lock()
        self._value = value.value() if isinstance(value, AtomicBool) else bool(value)

    def value(self) -> bool:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: Union[bool, "AtomicBool"]) -> "AtomicBool":
        """Store a new value, taken from a bool or another AtomicBool."""
        new_value = value.value() if isinstance(value, AtomicBool) else bool(value)
        with self._lock:
            self._value = new_value
        return self

    def __bool__(self) -> bool:
        return self.value()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AtomicBool):
            return self.value() == other.value()
        if isinstance(other, bool):
            return self.value() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AtomicBool({self.value()!r})"