"""Console that mirrors every message to a file."""

from pathlib import Path
from typing import Callable, Optional, Union

from ..interfaces import IConsole, Message, MessageType
from .buffered_file_sink import BufferedFileSink
from .message_formatter import MessageFormatter


class FileConsole:
    """Forwards to a delegate console and appends the same lines to a file.

    The delegate is not owned: closing this console only closes the file.
    flush_rate is the number of lines buffered before writing (0 = write
    on close only).
    """

    def __init__(
        self,
        delegate: IConsole,
        path: Union[str, Path],
        flush_rate: int = 0,
        formatter: Optional[MessageFormatter] = None
    ):
        self.delegate = delegate
        self.formatter = formatter or MessageFormatter()
        self.sink = BufferedFileSink(path, flush_rate)

    def _emit(
        self, message: Message, forward: Callable[[str], None]
    ) -> None:
        """Forward first, then buffer. The first failure wins."""
        line = self.formatter.render(message)
        try:
            forward(message.text)
        except Exception as delegate_error:
            try:
                self.sink.append(line)
            except Exception as sink_error:
                delegate_error.add_note(
                    f"Writing to {self.sink.path} also failed: {sink_error!r}"
                )
            raise
        self.sink.append(line)

    def startup_message(self, version: str) -> None:
        self._emit(
            Message(MessageType.STARTUP, version),
            self.delegate.startup_message
        )

    def info(self, message: str) -> None:
        self._emit(Message(MessageType.INFO, message), self.delegate.info)

    def warn(self, message: str) -> None:
        self._emit(Message(MessageType.WARNING, message), self.delegate.warn)

    def error(self, message: str) -> None:
        self._emit(Message(MessageType.ERROR, message), self.delegate.error)

    def verbose(self, message: str) -> None:
        self._emit(
            Message(MessageType.VERBOSE, message), self.delegate.verbose
        )

    def progress(self, message: str) -> None:
        self._emit(
            Message(MessageType.PROGRESS, message), self.delegate.progress
        )

    def close(self) -> None:
        """Flush and close the file. The delegate stays open."""
        self.sink.close()

    def __enter__(self) -> "FileConsole":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.close()
            return

        try:
            self.close()
        except Exception as close_error:
            exc.add_note(
                f"Closing {self.sink.path} also failed: {close_error!r}"
            )
