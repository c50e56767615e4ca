"""Review claim handler - a reviewer claims a translation pull request."""

import asyncio

import structlog

from translation_bot.engine.event_classifier import ClassifiedEvent
from translation_bot.engine.handlers.base import EventHandler
from translation_bot.engine.matching import extract_reference
from translation_bot.models.domain import IssuePayload

log = structlog.get_logger(__name__)


class ReviewClaimHandler(EventHandler):
    """Handle claim comments on pull requests awaiting reviewers.

    The first reviewer gets the reviewing label added to the pull request;
    the second closes the claim by removing review-claim. The issue the pull
    request references (``#<number>`` in its body) is updated to match.
    """

    async def handle(self, event: ClassifiedEvent) -> None:
        pull, comment = event.issue, event.comment
        if pull is None or comment is None:
            return

        if not pull.has_label(self.labels.review_claim):
            log.debug("review_claim_label_missing", pull=pull.number)
            return

        if not self.is_claim(comment.body):
            log.info(
                "review_claim_not_recognized",
                pull=pull.number,
                sender=event.sender.login,
                comment=comment.body,
            )
            return

        has_reviewer = pull.has_label(self.labels.reviewing)
        login = comment.user.login

        try:
            log.info("updating_pull", pull=pull.number, has_reviewer=has_reviewer)
            if has_reviewer:
                await asyncio.gather(
                    self.tracker.add_comment(
                        pull.number, self.replies.additional_reviewer.format(login=login, number=pull.number)
                    ),
                    self.tracker.remove_label(pull.number, self.labels.review_claim),
                )
            else:
                await asyncio.gather(
                    self.tracker.add_comment(
                        pull.number, self.replies.first_reviewer.format(login=login, number=pull.number)
                    ),
                    self.tracker.add_labels(pull.number, [self.labels.reviewing]),
                )
        except Exception as e:
            log.error("review_claim_failed", pull=pull.number, error=str(e), exc_info=True)
            return

        log.info("pull_updated", pull=pull.number)

        await self._update_referenced_issue(pull, has_reviewer)

        log.info(
            "review_claim_accepted",
            pull=pull.number,
            sender=event.sender.login,
            comment=comment.body,
        )

    async def _update_referenced_issue(self, pull: IssuePayload, has_reviewer: bool) -> None:
        issue_number = extract_reference(pull.body)
        if issue_number is None:
            log.debug("no_issue_reference", pull=pull.number)
            return

        try:
            log.info("updating_referenced_issue", pull=pull.number, issue=issue_number)
            if has_reviewer:
                await self.tracker.remove_label(issue_number, self.labels.claim_review_on_pr)
            else:
                await self.tracker.add_labels(issue_number, [self.labels.reviewing])
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
