"""Profiler that reports span durations on the console."""

import time
from contextlib import contextmanager
from typing import Iterator

from ..interfaces import IConsole


class ConsoleProfiler:
    """Times named spans and reports them as verbose messages."""

    def __init__(self, console: IConsole):
        self.console = console
        self.tasks: list[tuple[str, float]] = []

    @contextmanager
    def start(self, name: str) -> Iterator[None]:
        started = time.monotonic()
        try:
            yield
        finally:
            elapsed_ms = (time.monotonic() - started) * 1000
            self.tasks.append((name, elapsed_ms))
            self.console.verbose(f"{name} took {elapsed_ms:.0f}ms")
