import io
import os
import sys
from typing import Iterable, Iterator, Optional, TextIO

# fgets() into a 256-byte buffer keeps 255 characters per read
REFERENCE_LINE_LENGTH = 255

class InputUnavailable(Exception):
    """The line source could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

def _eprintln(msg: str) -> None:
    print(msg, file=sys.stderr)

def open_source(path: str) -> TextIO:
    """
    Open a statement file for reading. Raise InputUnavailable (never OSError)
    when it is missing, not a regular file, unreadable, or fails to open.
    """
    if not os.path.exists(path):
        raise InputUnavailable(path, "file not found")
    if not os.path.isfile(path):
        raise InputUnavailable(path, "not a regular file")
    if not os.access(path, os.R_OK):
        raise InputUnavailable(path, "file is not readable")
    try:
        return open(path, "r", encoding="utf-8", errors="replace", newline="")
    except OSError as e:
        raise InputUnavailable(path, e.strerror or str(e)) from e

def open_stdin() -> TextIO:
    """
    Standard input decoded the same way as open_source(). Text streams
    without an underlying byte buffer are returned unchanged.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace", newline="")

def strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line

def iter_lines(stream: Iterable[str], max_line_length: Optional[int] = None) -> Iterator[str]:
    """
    Yield one statement line at a time without its terminator.

    With max_line_length set, only the first max_line_length characters of
    each line are kept; the rest of that physical line is dropped, it does
    not spill into a new line.
    """
    if max_line_length is not None and max_line_length < 1:
        raise ValueError(f"max_line_length must be at least 1, got {max_line_length}")
    for raw in stream:
        line = strip_terminator(raw)
        if max_line_length is not None:
            line = line[:max_line_length]
        yield line

def read_lines(path: str, max_line_length: Optional[int] = None) -> Iterator[str]:
    """open_source() + iter_lines(); the file is closed once exhausted."""
    f = open_source(path)
    try:
        yield from iter_lines(f, max_line_length)
    except OSError as e:
        raise InputUnavailable(path, e.strerror or str(e)) from e
    finally:
        f.close()
