"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

BUFFER_SIZE = 42


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Return the lines of a stream one by one, newline included.

    The stream may yield bytes or str. Data is read buffer_size units at
    a time and kept until a full line is available; the last line may
    lack its newline.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None
        self._eof = False

    def _fill(self) -> None:
        while not self._eof and (self._stash is None or self._newline() not in self._stash):
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                self._eof = True
                raise
            if not chunk:
                self._eof = True
            elif self._stash is None:
                self._stash = chunk
            else:
                self._stash += chunk

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._stash, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._stash:
            self._stash = None
            return None
        index = self._stash.find(self._newline())
        if index < 0:
            line, self._stash = self._stash, None
            return line
        line = self._stash[: index + 1]
        self._stash = self._stash[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream, newline included."""
    yield from LineReader(stream, buffer_size)