"""CLI entry point for translation-bot."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click
import structlog
import yaml

from translation_bot.config.settings import BotSettings
from translation_bot.engine.dispatcher import WebhookDispatcher
from translation_bot.exceptions import ConfigurationError, TranslationBotError
from translation_bot.utils.logging_config import configure_logging
from translation_bot.webhook_server import create_app, create_tracker

log = structlog.get_logger(__name__)


def load_settings(config: str) -> BotSettings:
    """Load settings from the YAML file, or from the environment when it is absent."""
    if Path(config).exists():
        return BotSettings.from_yaml(config)
    return BotSettings.from_env()


@click.group()
@click.option(
    "--config",
    default="translation_bot.yaml",
    show_default=True,
    help="Path to configuration file (settings come from the environment when it does not exist)",
)
@click.option("--log-level", default=None, help="Logging level (overrides the configuration)")
@click.pass_context
def cli(ctx: click.Context, config: str, log_level: str | None) -> None:
    """translation-bot: claim workflow automation for translation repositories."""
    try:
        settings = load_settings(config)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    configure_logging(log_level or settings.logging.level, settings.logging.json_output)
    ctx.obj = {"settings": settings}


@cli.command()
@click.option("--host", default=None, help="Bind address (overrides the configuration)")
@click.option("--port", type=int, default=None, help="Bind port (overrides the configuration)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the webhook server."""
    import uvicorn

    settings: BotSettings = ctx.obj["settings"]
    app = create_app(settings)
    uvicorn.run(
        app,
        host=host or settings.server.host,
        port=port or settings.server.port,
        log_level=settings.logging.level.lower(),
    )


@cli.command()
@click.option("--event", "event_name", required=True, help="GitHub event name (X-GitHub-Event)")
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def dispatch(ctx: click.Context, event_name: str, payload_file: Path) -> None:
    """Replay a saved webhook payload through the handlers."""
    settings: BotSettings = ctx.obj["settings"]

    try:
        payload = json.loads(payload_file.read_text(encoding="utf-8"))
    except ValueError as e:
        click.echo(f"Error: {payload_file} is not valid JSON: {e}", err=True)
        sys.exit(1)
    try:
        kind = asyncio.run(_dispatch_payload(settings, event_name, payload))
    except TranslationBotError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("dispatch_error", exc_info=True)
        sys.exit(1)

    click.echo(f"Dispatched {event_name} as {kind}")


async def _dispatch_payload(settings: BotSettings, event_name: str, payload: Any) -> str:
    tracker = create_tracker(settings)
    await tracker.connect()
    try:
        event = await WebhookDispatcher(tracker, settings).dispatch(event_name, payload)
    finally:
        await tracker.disconnect()
    return "ignored" if event is None else event.kind.value


@cli.command("check-config")
@click.pass_context
def check_config(ctx: click.Context) -> None:
    """Print the effective configuration with secrets redacted."""
    settings: BotSettings = ctx.obj["settings"]
    data = settings.model_dump(mode="json")
    click.echo(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))


if __name__ == "__main__":
    cli()
