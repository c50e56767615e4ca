"""
Domain models for GitHub webhook payloads.

These dataclasses are read-only views over the JSON delivered by GitHub.
Label membership is owned by GitHub; the bot inspects the snapshot carried
in each payload and never caches it.

Example:
    Building an issue view from a webhook payload::

        issue = IssuePayload.from_dict(payload["issue"])
        if issue.has_label("翻译认领"):
            ...
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Label:
    """A label attached to an issue or pull request."""

    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Label":
        return cls(name=data.get("name") or "")


@dataclass(frozen=True)
class User:
    """A GitHub account (comment author or event sender)."""

    login: str

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "User":
        if not isinstance(data, dict):
            return cls(login="")
        return cls(login=data.get("login") or "")


@dataclass
class IssuePayload:
    """Issue as delivered in ``issues`` and ``issue_comment`` events.

    For ``issue_comment`` events GitHub delivers pull requests through the
    same ``issue`` object; ``is_pull_request`` tells the two apart.
    """

    number: int
    title: str = ""
    body: str = ""
    labels: list[Label] = field(default_factory=list)
    html_url: str = ""
    pull_request: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IssuePayload":
        return cls(
            number=int(data["number"]),
            title=data.get("title") or "",
            body=data.get("body") or "",
            labels=[Label.from_dict(label) for label in data.get("labels") or []],
            html_url=data.get("html_url") or "",
            pull_request=bool(data.get("pull_request")),
        )

    @property
    def is_pull_request(self) -> bool:
        """Whether this item is a pull request.

        GitHub attaches a ``pull_request`` object to pull requests delivered
        as issues; the URL path segment ``/pull/`` is checked as a fallback.
        """
        return self.pull_request or "/pull/" in self.html_url

    def has_label(self, name: str) -> bool:
        """Check label membership by exact, case-sensitive name."""
        for label in self.labels:
            if label.name == name:
                return True
        return False


@dataclass
class PullRequestPayload:
    """Pull request as delivered in ``pull_request`` events."""

    number: int
    title: str = ""
    body: str = ""
    labels: list[Label] = field(default_factory=list)
    html_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PullRequestPayload":
        return cls(
            number=int(data["number"]),
            title=data.get("title") or "",
            body=data.get("body") or "",
            labels=[Label.from_dict(label) for label in data.get("labels") or []],
            html_url=data.get("html_url") or "",
        )


@dataclass
class CommentPayload:
    """Issue or pull request comment."""

    body: str
    user: User

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommentPayload":
        return cls(
            body=data.get("body") or "",
            user=User.from_dict(data.get("user")),
        )
