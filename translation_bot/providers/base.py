"""
Abstract base class for the issue tracker client.

The bot needs only three remote operations: post a comment, remove a label,
and add labels. Implementations are constructed once at process start and
handed to every handler.
"""

from abc import ABC, abstractmethod


class IssueTracker(ABC):
    """Label and comment client for a single repository.

    All methods are async so handlers can fan several calls out with
    ``asyncio.gather``. None of them retry; failures raise to the caller.
    Pull requests share the issue number space, so every method accepts
    either an issue or a pull request number.
    """

    async def connect(self) -> None:
        """Prepare the underlying API client."""
        return None

    async def disconnect(self) -> None:
        """Release the underlying API client."""
        return None

    @abstractmethod
    async def add_comment(self, issue_number: int, body: str) -> None:
        """Post a new comment.

        Args:
            issue_number: Issue or pull request number
            body: Markdown comment text

        Raises:
            ExternalServiceError: If the item does not exist or the call is
                rejected (auth, rate limit, network).
        """
        pass

    @abstractmethod
    async def remove_label(self, issue_number: int, label: str) -> None:
        """Remove a label from an issue or pull request.

        Removing a label that is not present is a no-op.

        Raises:
            ExternalServiceError: If the call fails for any other reason.
        """
        pass

    @abstractmethod
    async def add_labels(self, issue_number: int, labels: list[str]) -> None:
        """Add existing labels to an issue or pull request.

        Raises:
            ExternalServiceError: If the call fails.
        """
        pass
