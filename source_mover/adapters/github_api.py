"""A mini API over the GitHub REST API for reading projects."""

import re

from ..exceptions import ValidationError
from ..interfaces import IGitHubApiTransport, IProfiler, Issue, PullRequest

PROJECT_RE = re.compile(r"^[\w.-]+/[\w.-]+$")


class GithubApi:
    """Read-only queries for pull requests and issues."""

    def __init__(self, transport: IGitHubApiTransport, profiler: IProfiler):
        if transport is None:
            raise ValueError("transport required")
        if profiler is None:
            raise ValueError("profiler required")
        self.transport = transport
        self.profiler = profiler

    @staticmethod
    def _check_project(project_id: str) -> None:
        if not isinstance(project_id, str) or not PROJECT_RE.match(project_id):
            raise ValidationError(
                f"Invalid project '{project_id}', expected 'owner/repo'"
            )

    @staticmethod
    def _check_number(number: int) -> None:
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise ValidationError(f"Invalid number '{number}'")

    def get_pull_requests(self, project_id: str) -> list[PullRequest]:
        """Get all the pull requests for a project like "google/copybara"."""
        self._check_project(project_id)
        with self.profiler.start("github_api/pulls"):
            return self.transport.get(
                f"repos/{project_id}/pulls",
                lambda data: [PullRequest.from_json(pr) for pr in data]
            )

    def get_pull_request(self, project_id: str, number: int) -> PullRequest:
        """Get a specific pull request for a project."""
        self._check_project(project_id)
        self._check_number(number)
        with self.profiler.start("github_api/pulls/NUMBER"):
            return self.transport.get(
                f"repos/{project_id}/pulls/{number}", PullRequest.from_json
            )

    def get_issue(self, project_id: str, number: int) -> Issue:
        """Get a specific issue for a project.

        Use this to read pull request labels: issues and pull requests
        share the same numbers.
        """
        self._check_project(project_id)
        self._check_number(number)
        with self.profiler.start("github_api/issues/NUMBER"):
            return self.transport.get(
                f"repos/{project_id}/issues/{number}", Issue.from_json
            )
