"""Console interface (adapter pattern)."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class MessageType(Enum):
    """Message severity."""
    STARTUP = "startup"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    VERBOSE = "verbose"
    PROGRESS = "progress"


@dataclass(frozen=True)
class Message:
    """A single console message."""
    type: MessageType
    text: str


class IConsole(Protocol):
    """Interface for user-facing console output."""

    def startup_message(self, version: str) -> None:
        """Print the startup banner."""
        ...

    def info(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def verbose(self, message: str) -> None:
        """Only shown when verbose output is enabled."""
        ...

    def progress(self, message: str) -> None:
        ...
