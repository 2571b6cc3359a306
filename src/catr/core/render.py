# src/catr/core/render.py
from typing import Iterable, Iterator

from catr.config import NUMBER_SEPARATOR, NUMBER_WIDTH
from catr.models import LineCounter, NumberingMode


def format_number(value: int, width: int = NUMBER_WIDTH, separator: str = NUMBER_SEPARATOR) -> bytes:
    """Right-justified line number plus separator, e.g. b'     1\\t'."""
    return f"{value:>{width}}{separator}".encode("ascii")


def is_blank(line: bytes) -> bool:
    """A line is blank when nothing is left after removing its terminator."""
    return line in (b"", b"\n", b"\r\n")


def render(lines: Iterable[bytes], mode: NumberingMode, counter: LineCounter) -> Iterator[bytes]:
    """
    Lazily renders lines under a numbering mode.

    The counter is owned by the caller and advanced in place, so passing the
    same counter for every file keeps numbering continuous across files.
    Read errors raised by `lines` propagate unchanged.
    """
    if mode is NumberingMode.NONE:
        yield from lines
        return

    for line in lines:
        if mode is NumberingMode.NONBLANK and is_blank(line):
            yield line
            continue
        yield format_number(counter.take()) + line
