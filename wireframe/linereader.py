"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream, newline included."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None
        self._eof = False

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line

    def _reset(self) -> None:
        self._stash = None
        self._eof = False

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while not self._eof:
            if self._stash is not None and self._newline(self._stash) in self._stash:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                if self._stash is None:
                    self._stash = chunk if chunk is not None else ""  # type: ignore[assignment]
                return
            self._stash = chunk if self._stash is None else self._stash + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        try:
            self._fill()
        except OSError:
            self._reset()
            raise
        stash = self._stash
        if stash is None or (self._eof and not stash):
            self._reset()
            return None
        index = stash.find(self._newline(stash))
        cut = len(stash) if index < 0 else index + 1
        line, self._stash = stash[:cut], stash[cut:]
        return line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newline included."""
    yield from LineReader(stream, buffer_size)