"""New pull request handler - a translation is submitted for review."""

import asyncio

import structlog

from translation_bot.engine.event_classifier import ClassifiedEvent
from translation_bot.engine.handlers.base import EventHandler
from translation_bot.engine.matching import extract_reference

log = structlog.get_logger(__name__)


class NewPullHandler(EventHandler):
    """Open every new pull request for review claims.

    When the pull request body references an issue, the issue gets a link
    to the pull request and moves from translating to
    please-claim-review-on-pr. The referenced issue's current labels are not
    checked first.
    """

    async def handle(self, event: ClassifiedEvent) -> None:
        pull = event.pull
        if pull is None:
            return

        try:
            log.info("adding_review_claim_label", pull=pull.number, label=self.labels.review_claim)
            await self.tracker.add_labels(pull.number, [self.labels.review_claim])
        except Exception as e:
            log.error("review_claim_label_failed", pull=pull.number, error=str(e), exc_info=True)
            return

        issue_number = extract_reference(pull.body)
        if issue_number is None:
            log.info("no_issue_reference", pull=pull.number)
            return

        log.info("issue_reference_found", pull=pull.number, issue=issue_number)

        reply = self.replies.pull_request_address.format(login=event.sender.login, number=pull.number)

        try:
            await asyncio.gather(
                self.tracker.add_comment(issue_number, reply),
                self.tracker.remove_label(issue_number, self.labels.translating),
                self.tracker.add_labels(issue_number, [self.labels.claim_review_on_pr]),
            )
        except Exception as e:
            log.error(
                "referenced_issue_update_failed",
                pull=pull.number,
                issue=issue_number,
                error=str(e),
                exc_info=True,
            )
            return

        log.info("referenced_issue_updated", pull=pull.number, issue=issue_number)
