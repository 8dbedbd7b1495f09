"""Profiler interface (adapter pattern)."""

from typing import ContextManager, Protocol


class IProfiler(Protocol):
    """Interface for named timing spans."""

    def start(self, name: str) -> ContextManager[None]:
        """Open a span, closed when the context exits."""
        ...
