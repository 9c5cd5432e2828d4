"""Throughput and worst-case latency measurements for logging calls.

Each benchmark runs a logging action from several threads. It reports the
mean time per entry, or the slowest single entry per thread together with a
histogram of all measured durations.
"""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence, Tuple, Union

TITLE = "LOGWORKS"
G_LOOP = 1
G_ITERATIONS = 1_000_000
CHARPTR_MSG = "\tmessage by char*"
STR_MSG = "\tmessage by string"
PI_F = 3.1415926535897932384626433832795

US_TO_MS = 1000
US_TO_S = 1_000_000

IterationAction = Callable[[int], object]
ThreadAction = Callable[[str, int], object]


class WriteMode(Enum):
    """How write_text_to_file treats an existing file."""

    APPEND = 0
    TRUNCATE = 1


def write_text_to_file(
    filename: Union[str, Path],
    msg: str,
    write_mode: WriteMode = WriteMode.APPEND,
    push_out: bool = True,
) -> None:
    """Write msg to a file, appending or truncating, and echo it to stdout.

    Raises OSError if the file cannot be opened.
    """
    if push_out:
        sys.stdout.write(msg)
        sys.stdout.flush()
    mode = "w" if write_mode is WriteMode.TRUNCATE else "a"
    try:
        with open(filename, mode, encoding="utf-8") as out:
            out.write(msg)
    except OSError as error:
        raise OSError(
            error.errno, f"Fatal error could not open log file:[{filename}]"
        ) from error


def mean(values: Iterable[int]) -> int:
    """Return the integer mean of the values.

    Raises ValueError for an empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("mean of an empty sequence")
    return sum(items) // len(items)


def _elapsed_us(start_ns: int, stop_ns: int) -> int:
    return (stop_ns - start_ns) // 1000


def measure_peak(action: IterationAction, iterations: int = G_ITERATIONS) -> List[int]:
    """Call action(count) for each iteration and return each call's duration in microseconds."""
    results: List[int] = []
    for count in range(iterations):
        start = time.perf_counter_ns()
        action(count)
        stop = time.perf_counter_ns()
        results.append(_elapsed_us(start, stop))
    return results


def _validate(number_of_threads: int, iterations: int) -> None:
    if number_of_threads < 1:
        raise ValueError("number of threads must be at least 1")
    if iterations < 1:
        raise ValueError("number of iterations must be at least 1")


def _thread_names(number_of_threads: int) -> List[str]:
    return [f"{TITLE}_T{idx + 1}" for idx in range(number_of_threads)]


def _run_threads(targets: Sequence[Callable[[], object]], names: Sequence[str]) -> None:
    threads = [threading.Thread(target=target, name=name) for target, name in zip(targets, names)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


@dataclass(frozen=True)
class MeanReport:
    """Result of a mean-time benchmark."""

    number_of_threads: int
    iterations: int
    application_time_us: int

    @property
    def average_us(self) -> int:
        """Mean time per log entry in microseconds."""
        return self.application_time_us // (self.number_of_threads * self.iterations)

    def __str__(self) -> str:
        return (
            f"\n{self.number_of_threads}*{self.iterations} log entries took: "
            f"[{self.application_time_us // US_TO_S} s]\n"
            f"[Application({self.number_of_threads}):\t\t:"
            f"{self.application_time_us // US_TO_MS} ms]\n"
            "\nAverage time per log entry:\n"
            f"[Application: {self.average_us} us]\n"
        )


@dataclass(frozen=True)
class WorstReport:
    """Result of a worst-case benchmark, with every single measurement kept."""

    number_of_threads: int
    iterations: int
    application_time_us: int
    per_thread: List[List[int]] = field(default_factory=list)

    @property
    def average_us(self) -> int:
        """Mean time per log entry in microseconds, measurement overhead included."""
        return self.application_time_us // (self.number_of_threads * self.iterations)

    @property
    def worst_per_thread(self) -> List[int]:
        """Slowest single entry of each thread, in microseconds."""
        return [max(results) for results in self.per_thread]

    @property
    def all_measurements(self) -> List[int]:
        """Every measurement from every thread, sorted ascending."""
        return sorted(value for results in self.per_thread for value in results)

    def __str__(self) -> str:
        lines = [
            f"\n{self.number_of_threads}*{self.iterations} log entries took: "
            f"[{self.application_time_us // US_TO_S} s]\n",
            f"[Application({self.number_of_threads}_threads+overhead time for measurement):\t"
            f"{self.application_time_us // US_TO_MS} ms]\n",
            "\nAverage time per log entry:\n",
            f"[Application: {self.average_us} us]\n",
        ]
        for idx, worst in enumerate(self.worst_per_thread, start=1):
            lines.append(
                f"[Application t{idx} worst took: {worst // US_TO_MS} ms  ({worst} us)] \n"
            )
        return "".join(lines)


def run_mean(
    action: ThreadAction, number_of_threads: int, iterations: int = G_ITERATIONS
) -> MeanReport:
    """Call action(thread_name, count) iterations times on each of several threads."""
    _validate(number_of_threads, iterations)
    names = _thread_names(number_of_threads)

    def writes(name: str) -> None:
        for count in range(iterations):
            action(name, count)

    targets = [partial(writes, name) for name in names]
    start = time.perf_counter_ns()
    _run_threads(targets, names)
    stop = time.perf_counter_ns()
    return MeanReport(number_of_threads, iterations, _elapsed_us(start, stop))


def run_worst(
    action: ThreadAction, number_of_threads: int, iterations: int = G_ITERATIONS
) -> WorstReport:
    """Like run_mean, but time every single call on every thread."""
    _validate(number_of_threads, iterations)
    names = _thread_names(number_of_threads)
    results: List[List[int]] = [[] for _ in names]

    def measure(idx: int, name: str) -> None:
        results[idx] = measure_peak(partial(action, name), iterations)

    targets = [partial(measure, idx, name) for idx, name in enumerate(names)]
    start = time.perf_counter_ns()
    _run_threads(targets, names)
    stop = time.perf_counter_ns()
    return WorstReport(number_of_threads, iterations, _elapsed_us(start, stop), results)


def bucket_measurements(
    measurements: Iterable[int],
) -> Tuple[Dict[int, int], Dict[int, int]]:
    """Count measurements per millisecond bucket.

    Returns the millisecond buckets and, for values inside the 0 ms bucket,
    a count per microsecond value. Both mappings are ordered by key.
    """
    ms_buckets: Dict[int, int] = {}
    us_buckets: Dict[int, int] = {}
    for value in sorted(measurements):
        ms = value // US_TO_MS
        ms_buckets[ms] = ms_buckets.get(ms, 0) + 1
        if ms == 0:
            us_buckets[value] = us_buckets.get(value, 0) + 1
    return ms_buckets, us_buckets


def format_buckets(measurements: Iterable[int]) -> str:
    """Render the bucket histogram of measurements as text.

    When every value falls in a single millisecond bucket, the microsecond
    buckets of the 0 ms bucket are listed first.
    """
    ms_buckets, us_buckets = bucket_measurements(measurements)
    single = len(ms_buckets) == 1
    parts: List[str] = []
    if single:
        parts.append(
            "Format:  bucket of us inside bucket0 for ms\n"
            "Format:bucket_of_ms, number_of_values_in_bucket\n\n\n\n"
        )
        parts.append(
            "\n\n***** Microsecond bucket measurement for all measurements "
            "that went inside the '0 millisecond bucket' ****\n"
        )
        parts.extend(f"{us}\t{count}\n" for us, count in us_buckets.items())
        parts.append("\n\n***** Millisecond bucket measurement ****\n")
    else:
        parts.append("Format:bucket_of_ms, number_of_values_in_bucket\n\n\n")
    parts.extend(f"{ms}\t, {count}\n" for ms, count in ms_buckets.items())
    return "".join(parts)