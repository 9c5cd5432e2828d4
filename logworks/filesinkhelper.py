"""Helpers for building and opening log file names."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

FILE_NAME_TIME_FORMATTED = "%Y%m%d-%H%M%S"
HEADER_TIME_FORMATTED = "%a %b %d %H:%M:%S %Y"

_ILLEGAL_CHARACTERS = "/,|<>:#$%{}[]'\"^!?+* "
_C_WHITESPACE = " \t\n\v\f\r"
_STRIPPED_CHARACTERS = "/\\.:"


class InvalidFilenameError(ValueError):
    """Raised when a log file name prefix cannot be used."""


def _filename_problem(prefix_filename: str) -> Optional[str]:
    for char in prefix_filename:
        if char in _ILLEGAL_CHARACTERS:
            return f"Illegal character [{char}] in logname prefix: [{prefix_filename}]"
    if not prefix_filename:
        return "Empty filename prefix is not allowed"
    return None


def is_valid_filename(prefix_filename: str) -> bool:
    """Return True if the prefix is non-empty and holds no path or shell characters."""
    return _filename_problem(prefix_filename) is None


def prefix_sanity_fix(prefix: str) -> str:
    """Strip whitespace and path characters from a prefix and validate it.

    Raises InvalidFilenameError if what remains is not a valid file name.
    """
    cleaned = "".join(
        char for char in prefix if char not in _C_WHITESPACE and char not in _STRIPPED_CHARACTERS
    )
    problem = _filename_problem(cleaned)
    if problem is not None:
        raise InvalidFilenameError(problem)
    return cleaned


def path_sanity_fix(path: str, file_name: str) -> str:
    """Join a directory and a file name using '/' as the only separator."""
    path = path.replace("\\", "/").rstrip("/ ")
    if path:
        path += "/"
    return path + file_name


def header(header_format: str) -> str:
    """Return the header written at the top of a new log file."""
    stamp = datetime.now().strftime(HEADER_TIME_FORMATTED)
    return f"\t\tg3log created log at: {stamp}\n{header_format}"


def create_log_file_name(verified_prefix: str, logger_id: str) -> str:
    """Build '<prefix>.[<id>.]<timestamp>.log' from the current local time."""
    parts = [verified_prefix]
    if logger_id:
        parts.append(logger_id)
    parts.append(datetime.now().strftime(FILE_NAME_TIME_FORMATTED))
    parts.append("log")
    return ".".join(parts)


def create_log_file(file_with_full_path: Union[str, Path]) -> TextIO:
    """Open (truncating) a log file for writing.

    Raises OSError if the file cannot be opened.
    """
    try:
        return open(file_with_full_path, "w", encoding="utf-8")
    except OSError as error:
        raise OSError(
            error.errno,
            f"FILE ERROR:  could not open log file:[{file_with_full_path}]",
        ) from error