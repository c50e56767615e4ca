"""GitHub issue tracker implementation using PyGithub."""

import asyncio
from collections.abc import Callable
from typing import TypeVar

import structlog
from github import Auth, Github, GithubException  # type: ignore[import-not-found]
from github.Repository import Repository as GHRepository  # type: ignore[import-not-found]

from translation_bot.exceptions import ExternalServiceError
from translation_bot.providers.base import IssueTracker

log = structlog.get_logger(__name__)

T = TypeVar("T")


async def _run_sync(func: Callable[[], T]) -> T:
    """Run a synchronous function in a thread pool.

    This prevents blocking the event loop when calling synchronous
    PyGithub methods.
    """
    return await asyncio.to_thread(func)


def _service_error(message: str, exc: GithubException) -> ExternalServiceError:
    return ExternalServiceError(message, status_code=exc.status, response_text=str(exc.data))


class GitHubRestProvider(IssueTracker):
    """GitHub implementation of the label/comment client."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        base_url: str = "https://api.github.com",
        user_agent: str = "gold-miner-robot",
    ):
        """Initialize GitHub provider.

        Args:
            token: GitHub personal access token or App token
            owner: Repository owner (user or organization)
            repo: Repository name
            base_url: GitHub API base URL (for GitHub Enterprise)
            user_agent: User-Agent header sent with every request
        """
        self.token = token.strip() if token else token
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self._client: Github | None = None
        self._repo: GHRepository | None = None

    async def connect(self) -> None:
        """Initialize GitHub client."""

        def _connect() -> tuple[Github, GHRepository]:
            client = Github(
                auth=Auth.Token(self.token),
                base_url=self.base_url,
                user_agent=self.user_agent,
            )
            repo = client.get_repo(f"{self.owner}/{self.repo}")
            return client, repo

        try:
            self._client, self._repo = await _run_sync(_connect)
        except GithubException as e:
            log.error("github_connect_failed", owner=self.owner, repo=self.repo, error=str(e))
            raise _service_error(f"Cannot access repository {self.owner}/{self.repo}", e) from e

        log.info(
            "github_connected",
            base_url=self.base_url,
            owner=self.owner,
            repo=self.repo,
        )

    async def disconnect(self) -> None:
        """Close GitHub client."""
        if self._client:
            await _run_sync(self._client.close)
            self._client = None
            self._repo = None

    def _require_repo(self) -> GHRepository:
        if self._repo is None:
            raise ExternalServiceError("GitHub client is not connected")
        return self._repo

    async def add_comment(self, issue_number: int, body: str) -> None:
        """Add comment to issue or pull request."""
        log.info("add_comment", number=issue_number)
        repo = self._require_repo()

        try:

            def _add_comment() -> None:
                gh_issue = repo.get_issue(issue_number)
                gh_issue.create_comment(body)

            await _run_sync(_add_comment)

        except GithubException as e:
            log.error("github_add_comment_failed", number=issue_number, error=str(e))
            raise _service_error(f"Failed to comment on #{issue_number}", e) from e

    async def remove_label(self, issue_number: int, label: str) -> None:
        """Remove label from issue or pull request."""
        log.info("remove_label", number=issue_number, label=label)
        repo = self._require_repo()

        try:

            def _remove_label() -> None:
                gh_issue = repo.get_issue(issue_number)
                gh_issue.remove_from_labels(label)

            await _run_sync(_remove_label)

        except GithubException as e:
            if e.status == 404:
                log.debug("github_label_not_present", number=issue_number, label=label)
                return
            log.error("github_remove_label_failed", number=issue_number, label=label, error=str(e))
            raise _service_error(f"Failed to remove label {label!r} from #{issue_number}", e) from e

    async def add_labels(self, issue_number: int, labels: list[str]) -> None:
        """Add labels to issue or pull request."""
        log.info("add_labels", number=issue_number, labels=labels)
        repo = self._require_repo()

        try:

            def _add_labels() -> None:
                gh_issue = repo.get_issue(issue_number)
                gh_issue.add_to_labels(*labels)

            await _run_sync(_add_labels)

        except GithubException as e:
            log.error("github_add_labels_failed", number=issue_number, labels=labels, error=str(e))
            raise _service_error(f"Failed to add labels {labels} to #{issue_number}", e) from e
