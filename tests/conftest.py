"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from translation_bot.config.settings import BotSettings
from translation_bot.providers.base import IssueTracker

REPO_URL = "https://github.com/xitu/gold-miner"


@pytest.fixture
def settings() -> BotSettings:
    """Settings with default labels, replies and keywords."""
    return BotSettings(
        github={
            "token": "test-token",
            "owner": "xitu",
            "repo": "gold-miner",
        },
    )


@pytest.fixture
def tracker() -> AsyncMock:
    """Mock tracker recording every remote call."""
    return AsyncMock(spec=IssueTracker)


@pytest.fixture
def make_issue():
    """Factory for raw issue JSON as GitHub delivers it."""

    def _make_issue(
        number: int = 42,
        labels: list[str] | None = None,
        title: str = "Translate an article",
        body: str = "",
        pull: bool = False,
    ) -> dict[str, Any]:
        kind = "pull" if pull else "issues"
        issue = {
            "number": number,
            "title": title,
            "body": body,
            "labels": [{"name": name} for name in labels or []],
            "html_url": f"{REPO_URL}/{kind}/{number}",
        }
        if pull:
            issue["pull_request"] = {"html_url": f"{REPO_URL}/pull/{number}"}
        return issue

    return _make_issue


@pytest.fixture
def comment_payload(make_issue):
    """Factory for ``issue_comment`` created payloads."""

    def _comment_payload(
        body: str = "认领",
        login: str = "translator",
        issue_body: str = "",
        **issue_kwargs: Any,
    ) -> dict[str, Any]:
        return {
            "action": "created",
            "issue": make_issue(body=issue_body, **issue_kwargs),
            "comment": {"body": body, "user": {"login": login}},
            "sender": {"login": login},
        }

    return _comment_payload


@pytest.fixture
def pull_opened_payload():
    """Factory for ``pull_request`` opened payloads."""

    def _pull_opened_payload(number: int = 100, body: str = "", login: str = "translator") -> dict[str, Any]:
        return {
            "action": "opened",
            "pull_request": {
                "number": number,
                "title": "Translation done",
                "body": body,
                "labels": [],
                "html_url": f"{REPO_URL}/pull/{number}",
            },
            "sender": {"login": login},
        }

    return _pull_opened_payload


@pytest.fixture
def issue_opened_payload(make_issue):
    """Factory for ``issues`` opened payloads."""

    def _issue_opened_payload(title: str, number: int = 7, login: str = "reader") -> dict[str, Any]:
        return {
            "action": "opened",
            "issue": make_issue(number=number, title=title),
            "sender": {"login": login},
        }

    return _issue_opened_payload
