"""Interface definitions for source mover adapters."""

from .i_console import IConsole, Message, MessageType
from .i_github_transport import (
    IGitHubApiTransport,
    Issue,
    Label,
    PullRequest,
    Revision,
    User
)
from .i_profiler import IProfiler

__all__ = [
    'IConsole',
    'Message',
    'MessageType',
    'IGitHubApiTransport',
    'Issue',
    'Label',
    'PullRequest',
    'Revision',
    'User',
    'IProfiler',
]
