"""
Webhook dispatch: actor guard, classification and handler routing.

The dispatcher is built once at process start with the tracker and the
settings, and handed to the webhook server. Nothing it runs propagates an
exception; handler outcomes are observable only through logs.
"""

from typing import Any

import structlog

from translation_bot.config.settings import BotSettings
from translation_bot.engine.event_classifier import ClassifiedEvent, EventKind, classify_event
from translation_bot.engine.handlers import (
    EventHandler,
    NewIssueHandler,
    NewPullHandler,
    ReviewClaimHandler,
    TranslationClaimHandler,
)
from translation_bot.providers.base import IssueTracker

log = structlog.get_logger(__name__)


class WebhookDispatcher:
    """Routes classified webhook events to their handlers."""

    def __init__(self, tracker: IssueTracker, settings: BotSettings):
        """Initialize dispatcher.

        Args:
            tracker: Label/comment client shared by all handlers
            settings: Bot settings
        """
        self.tracker = tracker
        self.settings = settings
        self.handlers: dict[EventKind, EventHandler] = {
            EventKind.COMMENT_ON_ISSUE: TranslationClaimHandler(tracker, settings),
            EventKind.COMMENT_ON_PULL: ReviewClaimHandler(tracker, settings),
            EventKind.PULL_OPENED: NewPullHandler(tracker, settings),
            EventKind.ISSUE_OPENED: NewIssueHandler(tracker, settings),
        }

    def should_ignore(self, payload: Any) -> bool:
        """Whether the event was triggered by the bot's own account."""
        if not isinstance(payload, dict):
            return False
        sender = payload.get("sender")
        if not isinstance(sender, dict):
            return False
        return sender.get("login") == self.settings.bot.ignored_login

    def classify(self, event_name: str | None, payload: Any) -> ClassifiedEvent:
        return classify_event(event_name, payload)

    async def dispatch(self, event_name: str | None, payload: Any) -> ClassifiedEvent | None:
        """Guard, classify and handle one webhook.

        Args:
            event_name: Value of the ``X-GitHub-Event`` header
            payload: Parsed JSON payload

        Returns:
            The classified event, or None when the sender is ignored
        """
        if self.should_ignore(payload):
            log.debug("ignoring_own_event", event_name=event_name)
            return None

        event = self.classify(event_name, payload)
        await self.run(event)
        return event

    async def run(self, event: ClassifiedEvent) -> None:
        """Run the handler for an already classified event."""
        structlog.contextvars.bind_contextvars(
            event_name=event.event_name,
            action=event.action,
            sender=event.sender.login,
        )
        try:
            log.info("webhook_event_received", kind=str(event.kind))

            handler = self.handlers.get(event.kind)
            if handler is None:
                log.info("no_handler_matched", reason=event.skip_reason)
                return

            try:
                await handler.handle(event)
            except Exception as e:
                log.error("handler_failed", kind=str(event.kind), error=str(e), exc_info=True)
                return

            log.info("webhook_event_done", kind=str(event.kind))
        finally:
            structlog.contextvars.unbind_contextvars("event_name", "action", "sender")
