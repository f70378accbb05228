"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Return one line at a time from ``stream``, reading ``buffer_size`` at once.

    Lines keep their trailing newline; the last line may lack one. Works with
    text and binary streams alike. Data read past a newline is kept for the
    next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _newline_index(self) -> Optional[int]:
        if self._pending is None:
            return None
        newline = b"\n" if isinstance(self._pending, bytes) else "\n"
        pos = self._pending.find(newline)
        return None if pos < 0 else pos

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream holds no more data."""
        pos = self._newline_index()
        while pos is None:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
            pos = self._newline_index()
        pending = self._pending
        if not pending:
            return None
        if pos is None:
            self._pending = pending[:0]
            return pending
        self._pending = pending[pos + 1:]
        return pending[:pos + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line