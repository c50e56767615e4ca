"""Webhook payload views.

Key Models:
    - IssuePayload: Issue (or pull request, in comment events)
    - PullRequestPayload: Pull request in pull_request events
    - CommentPayload: Issue or pull request comment
    - Label, User
"""

from translation_bot.models.domain import CommentPayload, IssuePayload, Label, PullRequestPayload, User

__all__ = [
    "CommentPayload",
    "IssuePayload",
    "Label",
    "PullRequestPayload",
    "User",
]
