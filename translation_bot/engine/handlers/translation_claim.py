"""Translation claim handler - a translator claims an issue."""

import asyncio

import structlog

from translation_bot.engine.event_classifier import ClassifiedEvent
from translation_bot.engine.handlers.base import EventHandler

log = structlog.get_logger(__name__)


class TranslationClaimHandler(EventHandler):
    """Handle claim comments on issues awaiting a translator.

    On an issue labelled translation-claim, a claim comment is acknowledged
    and the issue moves from translation-claim to translating.
    """

    async def handle(self, event: ClassifiedEvent) -> None:
        issue, comment = event.issue, event.comment
        if issue is None or comment is None:
            return

        if not issue.has_label(self.labels.translation_claim):
            log.debug("translation_claim_label_missing", issue=issue.number)
            return

        if not self.is_claim(comment.body):
            log.info(
                "translation_claim_not_recognized",
                issue=issue.number,
                sender=event.sender.login,
                comment=comment.body,
            )
            return

        try:
            await asyncio.gather(
                self.tracker.add_comment(
                    issue.number,
                    self.replies.translation_claimed.format(login=comment.user.login, number=issue.number),
                ),
                self.tracker.remove_label(issue.number, self.labels.translation_claim),
                self.tracker.add_labels(issue.number, [self.labels.translating]),
            )
        except Exception as e:
            log.error("translation_claim_failed", issue=issue.number, error=str(e), exc_info=True)
            return

        log.info(
            "translation_claim_accepted",
            issue=issue.number,
            sender=event.sender.login,
            comment=comment.body,
        )
