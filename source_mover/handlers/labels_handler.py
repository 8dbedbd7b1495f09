"""Handler for the labels command."""

from typing import Optional

from ..adapters import GithubApi
from ..interfaces import IConsole


class LabelsHandler:
    """Shows the labels of a pull request (read through its issue)."""

    def __init__(self, api: GithubApi, console: IConsole):
        self.api = api
        self.console = console

    def handle(self, project_id: str, number: Optional[int] = None) -> None:
        """Handle labels command."""
        if number is None:
            self.console.error("labels requires a pull request number")
            raise ValueError("number required")

        try:
            issue = self.api.get_issue(project_id, number)
        except Exception as e:
            self.console.error(f"Failed to get labels for {number}: {e}")
            raise

        if not issue.labels:
            self.console.info(f"No labels on {project_id}#{number}")
            return

        names = ", ".join(label.name for label in issue.labels)
        self.console.info(f"Labels on {project_id}#{number}: {names}")
