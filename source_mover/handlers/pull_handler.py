"""Handler for the pull command."""

from typing import Optional

from ..adapters import GithubApi
from ..interfaces import IConsole


class PullHandler:
    """Shows a single pull request."""

    def __init__(self, api: GithubApi, console: IConsole):
        self.api = api
        self.console = console

    def handle(self, project_id: str, number: Optional[int] = None) -> None:
        """Handle pull command."""
        if number is None:
            self.console.error("pull requires a pull request number")
            raise ValueError("number required")

        self.console.progress(f"Fetching {project_id}#{number}")

        try:
            pr = self.api.get_pull_request(project_id, number)
        except Exception as e:
            self.console.error(f"Failed to get pull request {number}: {e}")
            raise

        self.console.info(f"#{pr.number} [{pr.state}] {pr.title}")
        if pr.user:
            self.console.info(f"Author: {pr.user.login}")
        if pr.head and pr.base:
            self.console.info(f"Branch: {pr.head.ref} -> {pr.base.ref}")
        if pr.html_url:
            self.console.verbose(pr.html_url)
