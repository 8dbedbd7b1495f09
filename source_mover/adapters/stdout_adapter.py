"""Stdout console adapter."""

import sys
from datetime import datetime

from ..interfaces import MessageType
from .message_formatter import startup_banner


class StdoutConsole:
    """Adapter for interactive console output on stdout."""

    def __init__(self, verbose: bool = False):
        self.show_verbose = verbose

    def _print(self, message_type: MessageType, message: str) -> None:
        timestamp = datetime.now().isoformat(timespec="seconds")
        stream = sys.stderr if message_type is MessageType.ERROR else sys.stdout
        print(f"[{timestamp}] {message_type.name}: {message}", file=stream)

    def startup_message(self, version: str) -> None:
        self._print(MessageType.INFO, startup_banner(version))

    def info(self, message: str) -> None:
        self._print(MessageType.INFO, message)

    def warn(self, message: str) -> None:
        self._print(MessageType.WARNING, message)

    def error(self, message: str) -> None:
        self._print(MessageType.ERROR, message)

    def verbose(self, message: str) -> None:
        if not self.show_verbose:
            return
        self._print(MessageType.VERBOSE, message)

    def progress(self, message: str) -> None:
        self._print(MessageType.PROGRESS, message)
