"""
Event classification for GitHub webhooks.

Turns the ``X-GitHub-Event`` name, the payload ``action`` and the payload
shape into one closed ``EventKind`` decided once at dispatch entry.

Routing table:

    ==============  =======  ===========  ================
    event           action   target       kind
    ==============  =======  ===========  ================
    issue_comment   created  pull request COMMENT_ON_PULL
    issue_comment   created  issue        COMMENT_ON_ISSUE
    pull_request    opened                PULL_OPENED
    issues          opened                ISSUE_OPENED
    anything else                         UNHANDLED
    ==============  =======  ===========  ================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from translation_bot.models.domain import CommentPayload, IssuePayload, PullRequestPayload, User

log = structlog.get_logger(__name__)


class EventKind(str, Enum):
    """Closed set of event variants the bot reacts to."""

    COMMENT_ON_ISSUE = "comment_on_issue"
    COMMENT_ON_PULL = "comment_on_pull"
    PULL_OPENED = "pull_opened"
    ISSUE_OPENED = "issue_opened"
    UNHANDLED = "unhandled"

    def __str__(self) -> str:
        return self.value


@dataclass
class ClassifiedEvent:
    """Result of event classification."""

    kind: EventKind
    event_name: str | None
    action: str | None
    sender: User
    issue: IssuePayload | None = None
    comment: CommentPayload | None = None
    pull: PullRequestPayload | None = None
    skip_reason: str | None = None

    @property
    def should_process(self) -> bool:
        return self.kind is not EventKind.UNHANDLED


def classify_event(event_name: str | None, payload: Any) -> ClassifiedEvent:
    """Classify an incoming webhook.

    Args:
        event_name: Value of the ``X-GitHub-Event`` header
        payload: Parsed JSON payload

    Returns:
        ClassifiedEvent with the payload views the matching handler needs.
        Payloads missing those fields, or that are not JSON objects,
        classify as UNHANDLED.
    """
    if not isinstance(payload, dict):
        log.warning("non_object_payload", event_name=event_name, payload_type=type(payload).__name__)
        return ClassifiedEvent(
            kind=EventKind.UNHANDLED,
            event_name=event_name,
            action=None,
            sender=User.from_dict(None),
            skip_reason=f"Payload is a JSON {type(payload).__name__}, not an object",
        )

    action = payload.get("action")
    sender = User.from_dict(payload.get("sender"))

    def unhandled(reason: str) -> ClassifiedEvent:
        return ClassifiedEvent(
            kind=EventKind.UNHANDLED,
            event_name=event_name,
            action=action,
            sender=sender,
            skip_reason=reason,
        )

    try:
        if event_name == "issue_comment" and action == "created":
            issue = IssuePayload.from_dict(payload["issue"])
            comment = CommentPayload.from_dict(payload["comment"])
            kind = EventKind.COMMENT_ON_PULL if issue.is_pull_request else EventKind.COMMENT_ON_ISSUE
            return ClassifiedEvent(
                kind=kind,
                event_name=event_name,
                action=action,
                sender=sender,
                issue=issue,
                comment=comment,
            )

        if event_name == "pull_request" and action == "opened":
            return ClassifiedEvent(
                kind=EventKind.PULL_OPENED,
                event_name=event_name,
                action=action,
                sender=sender,
                pull=PullRequestPayload.from_dict(payload["pull_request"]),
            )

        if event_name == "issues" and action == "opened":
            return ClassifiedEvent(
                kind=EventKind.ISSUE_OPENED,
                event_name=event_name,
                action=action,
                sender=sender,
                issue=IssuePayload.from_dict(payload["issue"]),
            )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        log.warning("malformed_payload", event_name=event_name, action=action, error=repr(e))
        return unhandled(f"Malformed {event_name} payload: {e!r}")

    return unhandled(f"No handler for event {event_name} with action {action}")
