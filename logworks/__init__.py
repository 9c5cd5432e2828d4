"""Building blocks for asynchronous logging: a shared queue, an atomic flag, an active object, log file helpers, benchmarks and test helpers."""

__version__ = "0.1.0"

__all__ = [
    "active",
    "atomicbool",
    "filesinkhelper",
    "performance",
    "shared_queue",
    "testing_helpers",
]