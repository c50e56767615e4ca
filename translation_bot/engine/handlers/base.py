"""
Base class for webhook event handlers.

Handlers are instantiated once by the dispatcher and reused for every event
of their kind. Each one issues a small, fixed set of label and comment
mutations against the tracker.

Handler Responsibilities:
    - Check preconditions against the label snapshot in the payload
    - Fan out the calls of one label transition with ``asyncio.gather``
    - Catch and log failures of each transition group; never roll back
      calls that already succeeded

Example:
    >>> class EchoHandler(EventHandler):
    ...     async def handle(self, event: ClassifiedEvent) -> None:
    ...         await self.tracker.add_comment(event.issue.number, "hello")
"""

from abc import ABC, abstractmethod

from translation_bot.config.settings import BotSettings, LabelsConfig, RepliesConfig
from translation_bot.engine.event_classifier import ClassifiedEvent
from translation_bot.engine.matching import contains_keyword
from translation_bot.providers.base import IssueTracker


class EventHandler(ABC):
    """Abstract base class for all event handlers.

    Attributes:
        tracker: Label/comment client shared by every handler.
        settings: Labels, reply templates and claim keywords.
    """

    def __init__(self, tracker: IssueTracker, settings: BotSettings) -> None:
        self.tracker = tracker
        self.settings = settings

    @property
    def labels(self) -> LabelsConfig:
        return self.settings.labels

    @property
    def replies(self) -> RepliesConfig:
        return self.settings.replies

    @abstractmethod
    async def handle(self, event: ClassifiedEvent) -> None:
        """Handle one classified event.

        Implementations log remote failures instead of raising them.
        """
        pass

    def is_claim(self, comment_body: str) -> bool:
        """Whether a comment body contains one of the claim keywords."""
        return contains_keyword(comment_body, self.settings.bot.claim_keywords)
