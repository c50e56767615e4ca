"""Issue tracker clients.

Key Components:
    - IssueTracker: Abstract label/comment client
    - GitHubRestProvider: PyGithub implementation
"""

from translation_bot.providers.base import IssueTracker
from translation_bot.providers.github_rest import GitHubRestProvider

__all__ = [
    "GitHubRestProvider",
    "IssueTracker",
]
