"""Adapter implementations for source mover."""

from .buffered_file_sink import BufferedFileSink
from .console_profiler import ConsoleProfiler
from .file_console import FileConsole
from .github_api import GithubApi
from .github_api_transport import GitHubApiTransportAdapter
from .message_formatter import MessageFormatter, startup_banner
from .stdout_adapter import StdoutConsole

__all__ = [
    'BufferedFileSink',
    'ConsoleProfiler',
    'FileConsole',
    'GithubApi',
    'GitHubApiTransportAdapter',
    'MessageFormatter',
    'startup_banner',
    'StdoutConsole',
]
