"""Buffered file output for console messages."""

from pathlib import Path
from typing import Union

from ..exceptions import IllegalStateError


class BufferedFileSink:
    """Writes lines to a file, buffering them in memory.

    The file is truncated on open. With flush_threshold 0 lines are only
    written on close; otherwise the buffer is written every time it
    holds flush_threshold lines. A failed write leaves the buffer intact
    so the next flush retries the same lines. Characters that cannot be
    encoded are written as backslash escapes.

    Not safe for unsynchronized use from several threads.
    """

    def __init__(self, path: Union[str, Path], flush_threshold: int = 0):
        if flush_threshold < 0:
            raise ValueError(
                f"flush_threshold must be >= 0, got {flush_threshold}"
            )
        self.path = Path(path)
        self.flush_threshold = flush_threshold
        self._buffer: list[str] = []
        self._file = open(
            self.path, "w", encoding="utf-8", errors="backslashreplace"
        )

    @classmethod
    def open(
        cls, path: Union[str, Path], flush_threshold: int = 0
    ) -> "BufferedFileSink":
        return cls(path, flush_threshold)

    @property
    def closed(self) -> bool:
        return self._file is None

    @property
    def buffered(self) -> int:
        """Number of lines waiting to be written."""
        return len(self._buffer)

    def _check_open(self) -> None:
        if self._file is None:
            raise IllegalStateError(f"Sink for {self.path} is closed")

    def append(self, line: str) -> None:
        """Buffer one line, flushing when the threshold is reached."""
        self._check_open()
        self._buffer.append(line)
        if self.flush_threshold and len(self._buffer) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        """Write all buffered lines, in order."""
        self._check_open()
        if not self._buffer:
            return

        self._file.write("".join(f"{line}\n" for line in self._buffer))
        self._file.flush()
        self._buffer.clear()

    def close(self) -> None:
        """Flush remaining lines and release the file. Safe to repeat."""
        if self._file is None:
            return

        try:
            self.flush()
        finally:
            handle, self._file = self._file, None
            handle.close()

    def __enter__(self) -> "BufferedFileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
