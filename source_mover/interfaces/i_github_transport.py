"""GitHub API transport interface (adapter pattern)."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


@dataclass
class User:
    """GitHub user."""
    login: str

    @classmethod
    def from_json(cls, data: dict) -> "User":
        return cls(login=data["login"])


@dataclass
class Revision:
    """Branch reference of a pull request (head or base)."""
    ref: str
    sha: str

    @classmethod
    def from_json(cls, data: dict) -> "Revision":
        return cls(ref=data["ref"], sha=data["sha"])


@dataclass
class Label:
    """Issue label."""
    name: str
    color: str = ""
    description: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Label":
        return cls(
            name=data["name"],
            color=data.get("color", ""),
            description=data.get("description")
        )


@dataclass
class PullRequest:
    """GitHub pull request data."""
    number: int
    state: str
    title: str
    body: Optional[str] = None
    user: Optional[User] = None
    head: Optional[Revision] = None
    base: Optional[Revision] = None
    html_url: str = ""

    @classmethod
    def from_json(cls, data: dict) -> "PullRequest":
        return cls(
            number=data["number"],
            state=data["state"],
            title=data["title"],
            body=data.get("body"),
            user=User.from_json(data["user"]) if data.get("user") else None,
            head=Revision.from_json(data["head"]) if data.get("head") else None,
            base=Revision.from_json(data["base"]) if data.get("base") else None,
            html_url=data.get("html_url", "")
        )


@dataclass
class Issue:
    """GitHub issue data (pull requests share the numbering)."""
    number: int
    state: str
    title: str
    body: Optional[str] = None
    labels: list[Label] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "Issue":
        return cls(
            number=data["number"],
            state=data["state"],
            title=data["title"],
            body=data.get("body"),
            labels=[Label.from_json(label) for label in data.get("labels", [])]
        )


class IGitHubApiTransport(Protocol):
    """Interface for raw GitHub REST calls."""

    def get(self, path: str, parse: Callable[[Any], T]) -> T:
        """GET path relative to the API root, convert JSON with parse."""
        ...
