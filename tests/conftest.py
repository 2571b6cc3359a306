# tests/conftest.py
import errno

import pytest


@pytest.fixture
def sample_files(tmp_path):
    """a.txt holds 'hello' plus a blank line, b.txt holds 'world'."""
    a = tmp_path / "a.txt"
    a.write_bytes(b"hello\n\n")
    b = tmp_path / "b.txt"
    b.write_bytes(b"world\n")
    return a, b


class FlakyStream:
    """Binary stream stand-in that yields some lines, then fails like a bad disk."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.closed = False

    def __iter__(self):
        yield from self._lines
        raise OSError(errno.EIO, "Input/output error")

    def close(self):
        self.closed = True


@pytest.fixture
def flaky_stream():
    return FlakyStream([b"first\n", b"second\n"])
