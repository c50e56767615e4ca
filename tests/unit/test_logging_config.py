"""Tests for translation_bot/utils/logging_config.py."""

import json

import pytest
import structlog

from translation_bot.utils.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output_keeps_unicode(capsys):
    configure_logging("INFO", json_output=True)

    structlog.get_logger("test").info("claim_accepted", label="翻译认领", issue=42)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "claim_accepted"
    assert record["label"] == "翻译认领"
    assert record["level"] == "info"
    assert "timestamp" in record
    assert "翻译认领" in line


def test_level_filtering(capsys):
    configure_logging("warning", json_output=True)

    log = structlog.get_logger("test")
    log.info("hidden")
    log.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_console_output(capsys):
    configure_logging("DEBUG", json_output=False)

    structlog.get_logger("test").debug("console_event", issue=7)

    assert "console_event" in capsys.readouterr().out
