# src/catr/core/sources.py
import errno
import logging
import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from catr.config import STDIN_TOKEN
from catr.errors import StreamReadError

logger = logging.getLogger("catr.sources")


def _read_lines(token: str, stream: BinaryIO) -> Iterator[bytes]:
    """Yields raw lines (terminator included); OS errors become StreamReadError."""
    try:
        for line in stream:
            yield line
    except OSError as e:
        raise StreamReadError(token, e) from e


class _ScopedSource:
    """Context-manager plumbing shared by the two source kinds."""

    token: str
    stream: BinaryIO

    def lines(self) -> Iterator[bytes]:
        return _read_lines(self.token, self.stream)

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


@dataclass
class StdinSource(_ScopedSource):
    """The process's standard input. Never closed here; it belongs to the process."""
    token: str
    stream: BinaryIO


@dataclass
class FileSource(_ScopedSource):
    """A file opened for buffered binary reading, released on close()."""
    token: str
    stream: BinaryIO

    def close(self):
        if not self.stream.closed:
            self.stream.close()
            logger.debug("closed %s", self.token)


LineSource = Union[StdinSource, FileSource]


@dataclass(frozen=True)
class Opened:
    token: str
    source: LineSource
    ok = True


@dataclass(frozen=True)
class OpenFailed:
    token: str
    cause: OSError
    ok = False


OpenResult = Union[Opened, OpenFailed]


def _stdin_buffer() -> Optional[BinaryIO]:
    # sys.stdin can be None (detached) or a text stream without a buffer
    return getattr(sys.stdin, "buffer", None)


def open_source(token: str, stdin: Optional[BinaryIO] = None) -> OpenResult:
    """
    Resolves one FILE token to a readable line source.

    '-' maps to standard input (or the injected `stdin` binary stream).
    Anything else is opened as a path. Open failures are returned as
    OpenFailed rather than raised, so the caller can report and move on.
    """
    if token == STDIN_TOKEN:
        stream = stdin if stdin is not None else _stdin_buffer()
        if stream is None:
            return OpenFailed(token, OSError(errno.EBADF, "standard input is not available"))
        logger.debug("reading standard input")
        return Opened(token, StdinSource(token, stream))

    try:
        handle = open(token, "rb")
    except OSError as e:
        logger.debug("cannot open %s: %s", token, e)
        return OpenFailed(token, e)

    logger.debug("opened %s", token)
    return Opened(token, FileSource(token, handle))


def resolve_all(tokens: Iterable[str], stdin: Optional[BinaryIO] = None) -> Iterator[OpenResult]:
    """Lazily opens tokens in order, so at most one file is held open at a time."""
    for token in tokens:
        yield open_source(token, stdin=stdin)
