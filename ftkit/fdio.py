"""Writing text to file descriptors and reading them line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["BUFFER_SIZE", "putchar_fd", "putstr_fd", "putendl_fd", "LineReader"]

BUFFER_SIZE = 1024
_NEWLINE = b"\n"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is not None:
        _write_all(fd, s.encode())


def putendl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is not None:
        _write_all(fd, (s + "\n").encode())


class LineReader:
    """Read a file descriptor one line at a time, in chunks of BUFFER_SIZE."""

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        self.fd = fd
        self._pending = bytearray()

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="replace")

    def readline(self) -> str:
        """Return the next line with its newline.

        A final line without a newline is returned as is, and an empty
        string means the end of input was reached with nothing pending.
        """
        while True:
            index = self._pending.find(_NEWLINE)
            if index >= 0:
                line = bytes(self._pending[:index + 1])
                del self._pending[:index + 1]
                return self._decode(line)
            chunk = os.read(self.fd, BUFFER_SIZE)
            if not chunk:
                line = bytes(self._pending)
                self._pending.clear()
                return self._decode(line)
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        """Yield lines without their newline until the input ends."""
        while line := self.readline():
            yield line.removesuffix("\n")