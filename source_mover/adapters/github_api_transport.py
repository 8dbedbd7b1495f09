"""GitHub REST API transport (requests)."""

from typing import Any, Callable, TypeVar

import requests

from ..exceptions import RepoError

T = TypeVar("T")

DEFAULT_API_URL = "https://api.github.com"


class GitHubApiTransportAdapter:
    """Adapter for GET calls against the GitHub REST API."""

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: int = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Accept": "application/vnd.github+json"}

    def get(self, path: str, parse: Callable[[Any], T]) -> T:
        """GET base_url/path and convert the JSON body with parse."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = requests.get(
                url, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as e:
            raise RepoError(f"Error calling GitHub API {url}: {e}") from e

        if resp.status_code == 404:
            raise RepoError(f"Not found: {url}")

        if resp.status_code != 200:
            raise RepoError(
                f"GitHub API {url} failed: {resp.status_code} {resp.text}"
            )

        try:
            data = resp.json()
            return parse(data)
        except (ValueError, KeyError, TypeError) as e:
            raise RepoError(f"Cannot parse GitHub response from {url}: {e}") from e
