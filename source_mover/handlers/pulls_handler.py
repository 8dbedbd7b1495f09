"""Handler for the pulls command."""

from typing import Optional

from ..adapters import GithubApi
from ..interfaces import IConsole


class PullsHandler:
    """Lists the pull requests of a project."""

    def __init__(self, api: GithubApi, console: IConsole):
        self.api = api
        self.console = console

    def handle(self, project_id: str, number: Optional[int] = None) -> None:
        """Handle pulls command."""
        self.console.progress(f"Fetching pull requests for {project_id}")

        try:
            pulls = self.api.get_pull_requests(project_id)
        except Exception as e:
            self.console.error(f"Failed to list pull requests: {e}")
            raise

        if not pulls:
            self.console.info(f"No open pull requests in {project_id}")
            return

        for pr in pulls:
            self.console.info(f"#{pr.number} [{pr.state}] {pr.title}")
