"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Hands out lines from a binary or text stream, newline included.

    The stream is read in chunks of buffer_size; anything left over after a
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None
        self._pos = 0

    def _fill(self) -> bool:
        try:
            chunk = self._stream.read(self._buffer_size)
        except BaseException:
            self._buffer = None
            self._pos = 0
            raise
        if not chunk:
            return False
        self._buffer = chunk
        self._pos = 0
        return True

    def read_line(self) -> Optional[AnyStr]:
        """The next line, ending with its newline if it had one; None at end of input."""
        pieces: List[AnyStr] = []
        while True:
            if self._buffer is None or self._pos >= len(self._buffer):
                if not self._fill():
                    break
            buffer = self._buffer
            newline = b"\n" if isinstance(buffer, bytes) else "\n"
            index = buffer.find(newline, self._pos)
            if index >= 0:
                pieces.append(buffer[self._pos:index + 1])
                self._pos = index + 1
                break
            pieces.append(buffer[self._pos:])
            self._pos = len(buffer)
        if not pieces:
            return None
        return pieces[0][:0].join(pieces)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line