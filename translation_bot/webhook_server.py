"""Webhook server for GitHub translation workflow events."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import BackgroundTasks, FastAPI, HTTPException, Request

from translation_bot.config.settings import BotSettings
from translation_bot.engine.dispatcher import WebhookDispatcher
from translation_bot.providers.base import IssueTracker
from translation_bot.providers.github_rest import GitHubRestProvider

log = structlog.get_logger(__name__)


def create_tracker(settings: BotSettings) -> IssueTracker:
    """Build the GitHub tracker from settings."""
    github = settings.github
    return GitHubRestProvider(
        token=github.token.get_secret_value(),
        owner=github.owner,
        repo=github.repo,
        base_url=github.base_url,
        user_agent=github.user_agent,
    )


def create_app(settings: BotSettings, tracker: IssueTracker | None = None) -> FastAPI:
    """Create the webhook application.

    Args:
        settings: Bot settings
        tracker: Tracker to use instead of the GitHub one built from settings

    Returns:
        FastAPI application with the webhook and health endpoints
    """
    tracker = tracker or create_tracker(settings)
    dispatcher = WebhookDispatcher(tracker, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await tracker.connect()
        log.info("webhook_server_started", webhook_path=settings.server.webhook_path)
        try:
            yield
        finally:
            await tracker.disconnect()
            log.info("webhook_server_stopped")

    app = FastAPI(title="Translation Bot Webhook Server", lifespan=lifespan)
    app.state.settings = settings
    app.state.dispatcher = dispatcher

    async def github_webhook(request: Request, background_tasks: BackgroundTasks) -> dict[str, Any]:
        """Handle GitHub webhook events.

        Handlers run after the response is sent; their outcome never changes
        the status returned to GitHub.
        """
        event_name = request.headers.get("X-GitHub-Event")

        try:
            payload = await request.json()
        except ValueError as e:
            log.warning("webhook_invalid_json", event_name=event_name, error=str(e))
            raise HTTPException(status_code=400, detail="Invalid JSON payload") from e

        if dispatcher.should_ignore(payload):
            log.debug("ignoring_own_event", event_name=event_name)
            return {"status": "ignored", "event": event_name}

        event = dispatcher.classify(event_name, payload)
        background_tasks.add_task(dispatcher.run, event)

        return {"status": "accepted", "event": event_name, "kind": event.kind.value}

    app.add_api_route(settings.server.webhook_path, github_webhook, methods=["POST"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "translation-bot"}

    return app
