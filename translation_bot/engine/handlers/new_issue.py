"""New issue handler - thanks contributors for article recommendations."""

import structlog

from translation_bot.engine.event_classifier import ClassifiedEvent
from translation_bot.engine.handlers.base import EventHandler

log = structlog.get_logger(__name__)


class NewIssueHandler(EventHandler):
    """Reply to recommendation issues. Never touches labels."""

    async def handle(self, event: ClassifiedEvent) -> None:
        issue = event.issue
        if issue is None:
            return

        if self.settings.bot.recommendation_marker not in issue.title:
            return

        try:
            await self.tracker.add_comment(
                issue.number,
                self.replies.recommendation_thanks.format(login=event.sender.login, number=issue.number),
            )
        except Exception as e:
            log.error("recommendation_reply_failed", issue=issue.number, error=str(e), exc_info=True)
            return

        log.info("recommendation_replied", issue=issue.number, title=issue.title)
