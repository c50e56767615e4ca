"""Event handlers of the claim workflow.

Handlers:
    - TranslationClaimHandler: claim comment on an issue
    - ReviewClaimHandler: claim comment on a pull request
    - NewPullHandler: pull request opened
    - NewIssueHandler: issue opened
"""

from translation_bot.engine.handlers.base import EventHandler
from translation_bot.engine.handlers.new_issue import NewIssueHandler
from translation_bot.engine.handlers.new_pull import NewPullHandler
from translation_bot.engine.handlers.review_claim import ReviewClaimHandler
from translation_bot.engine.handlers.translation_claim import TranslationClaimHandler

__all__ = [
    "EventHandler",
    "NewIssueHandler",
    "NewPullHandler",
    "ReviewClaimHandler",
    "TranslationClaimHandler",
]
