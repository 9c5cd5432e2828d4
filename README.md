# logworks

Small building blocks for asynchronous logging in Python. They use only the standard library.

## Modules

### `logworks.shared_queue`

`SharedQueue` is a FIFO queue that many producer threads and many consumer threads can share.

- `push(item)` appends an item and wakes one waiting consumer.
- `try_pop()` returns the oldest item at once. It raises `IndexError` if the queue is empty.
- `wait_and_pop()` blocks until an item is available, then returns it.
- `empty()` and `len(queue)` report the queue's state.

### `logworks.atomicbool`

`AtomicBool` is a lock-protected boolean.

- Build one from a `bool` or from another `AtomicBool`.
- `value()` reads the flag. `set(value)` writes it and returns the flag itself.
- It can be used directly in `if` tests.
- It compares with `==` against another `AtomicBool` or a plain `bool`.

### `logworks.active`

`Active` is an active object. A background thread runs the callables you `send` to it, one at a time and in the order they arrived.

- `Active.create(thread_name_prefix)` starts the worker. The thread is named with the prefix plus a running number, for example `G3log_Worker#1` for the default prefix. The name is available as `thread_name`.
- `close()`, or leaving a `with` block, queues a stop marker behind the pending work. It waits for that work to finish, then stops the thread.
- `send` on a closed `Active` raises `RuntimeError`. The `closed` property tells whether `close()` has been called.

### `logworks.filesinkhelper`

Helpers for naming and opening log files.

- `is_valid_filename(prefix)` returns `False` for an empty prefix or for one that contains path or shell characters such as `/`, `:`, `*` or a space.
- `prefix_sanity_fix(prefix)` removes whitespace and the characters `/`, `\`, `.` and `:` from a prefix. It raises `InvalidFilenameError`, a `ValueError`, if what remains is still not valid.
- `path_sanity_fix(path, file_name)` joins a directory and a file name. Backslashes become `/`, and trailing slashes and spaces are trimmed.
- `create_log_file_name(prefix, logger_id)` builds `prefix.logger_id.YYYYmmdd-HHMMSS.log` from the local time. The `logger_id.` part is left out when the id is empty.
- `header(header_format)` returns a banner with the creation time, followed by `header_format`.
- `create_log_file(path)` opens the file for writing and truncates it. If the file cannot be opened it raises `OSError`.

### `logworks.performance`

Tools for measuring how fast a logging call runs when several threads call it at once.

- `run_mean(action, number_of_threads, iterations)` calls `action(thread_name, count)` `iterations` times on each thread. It returns a `MeanReport` holding the total time and the `average_us` per call.
- `run_worst(action, number_of_threads, iterations)` times every single call. It returns a `WorstReport`, which has:
  - `worst_per_thread`, the slowest call of each thread;
  - `all_measurements`, every measurement, sorted;
  - a text summary, given by `str()`.
- The default for `iterations` is 1,000,000. A thread count or iteration count below 1 raises `ValueError`.
- Helper functions:
  - `measure_peak(action, iterations)` times each call of `action(count)` in microseconds.
  - `mean(values)` returns the integer mean. It raises `ValueError` when `values` is empty.
  - `bucket_measurements(values)` counts values per millisecond bucket, and per microsecond inside the 0 ms bucket.
  - `format_buckets(values)` renders those buckets as text.
- `write_text_to_file(filename, msg, write_mode, push_out)` appends or truncates according to `WriteMode.APPEND` or `WriteMode.TRUNCATE`. It echoes the text to stdout unless `push_out` is false, and raises `OSError` if the file cannot be opened.

### `logworks.testing_helpers`

Helpers for tests of logging code.

- `MockFatal` stands in for a fatal exit handler.
  - `call(message, signal_id)` records the message and the signal, then passes the message on to an optional `forward` callable.
  - `clear()` forgets what was recorded.
- `ScopedOut("stdout")` or `ScopedOut("stderr")` redirects that stream into a buffer for the length of a `with` block.
- `LogFileCleaner` collects file paths and ignores any path it already holds. `clean()`, or the end of its `with` block, deletes them. It raises `OSError` that names any file it could not remove.
- `ScopedSetTrue` is a slow receiver. `receive_msg` sleeps for `wait` seconds, then increments `count`. It sets its `AtomicBool` `flag` to `True` when its `with` block ends.
- `read_file_to_text(path)` returns a file's text, or `""` if the file cannot be read.
- `verify_content(text, part)` tells whether `part` occurs in `text`.
- `remove_file(path)` deletes a file and returns whether the deletion succeeded.

## Example

```python
from logworks.active import Active
from logworks.filesinkhelper import create_log_file_name, path_sanity_fix, prefix_sanity_fix

prefix = prefix_sanity_fix("my app")          # -> "myapp"
name = create_log_file_name(prefix, "g3log")  # -> "myapp.g3log.<timestamp>.log"
path = path_sanity_fix("logs\\", name)        # -> "logs/myapp.g3log.<timestamp>.log"

lines = []
with Active.create("Worker#") as worker:
    worker.send(lambda: lines.append("first"))
    worker.send(lambda: lines.append("second"))
# Every callback sent has run, in order, once the with block ends.
assert lines == ["first", "second"]
```

## What it does not do

These are parts, not a complete logger. The package provides no logging calls, log levels, sinks, or file sink that writes messages. It has no crash or signal handling and no command-line program. The benchmarks time whatever callable you pass them.

## Requirements

Python 3.10 or newer. No third-party packages are needed at run time. The tests use pytest, which is available through the `test` extra.