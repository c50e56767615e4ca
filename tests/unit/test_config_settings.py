"""Tests for translation_bot/config/settings.py.

Tests cover:
- Defaults of the label vocabulary, replies and keywords
- Loading from YAML with environment variable interpolation
- Loading from environment variables
- Error handling
"""

import pytest
from pydantic import SecretStr, ValidationError

from translation_bot.config.settings import BotSettings, GitHubConfig, LabelsConfig, RepliesConfig
from translation_bot.exceptions import ConfigurationError


class TestDefaults:
    def test_label_defaults(self):
        labels = LabelsConfig()

        assert labels.translation_claim == "翻译认领"
        assert labels.translating == "正在翻译"
        assert labels.review_claim == "校对认领"
        assert labels.reviewing == "正在校对"
        assert labels.claim_review_on_pr == "请到对应的 PR 下认领校对"

    def test_reply_templates_format(self):
        replies = RepliesConfig()

        assert replies.translation_claimed.format(login="alice", number=1) == "@alice 棒极啦 :tada:"
        assert replies.pull_request_address.format(login="alice", number=100) == "PR 地址：#100"

    def test_bot_defaults(self, settings):
        assert settings.bot.ignored_login == "sqrthree"
        assert settings.bot.claim_keywords == ["认领", "claim", "Claim"]
        assert settings.bot.recommendation_marker == "推荐优秀英文文章"
        assert settings.server.webhook_path == "/webhook"
        assert settings.logging.json_output is True

    def test_token_is_secret(self, settings):
        assert isinstance(settings.github.token, SecretStr)
        assert settings.github.token.get_secret_value() == "test-token"
        assert "test-token" not in repr(settings.github)

    def test_github_requires_owner_and_repo(self):
        with pytest.raises(ValidationError):
            GitHubConfig(token="t")


class TestFromYaml:
    def test_load_minimal_config(self, tmp_path):
        config_file = tmp_path / "translation_bot.yaml"
        config_file.write_text(
            "github:\n  token: abc\n  owner: xitu\n  repo: gold-miner\n",
            encoding="utf-8",
        )

        settings = BotSettings.from_yaml(str(config_file))

        assert settings.github.owner == "xitu"
        assert settings.labels.translation_claim == "翻译认领"

    def test_env_interpolation(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GOLD_MINER_TOKEN", "from-env")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "# token comes from ${GOLD_MINER_TOKEN}\n"
            "github:\n"
            "  token: ${GOLD_MINER_TOKEN}\n"
            "  owner: ${GOLD_MINER_OWNER:-xitu}\n"
            "  repo: gold-miner\n"
            "bot:\n"
            "  claim_keywords: [认领]\n"
            "labels:\n"
            "  reviewing: in-review\n",
            encoding="utf-8",
        )

        settings = BotSettings.from_yaml(str(config_file))

        assert settings.github.token.get_secret_value() == "from-env"
        assert settings.github.owner == "xitu"
        assert settings.bot.claim_keywords == ["认领"]
        assert settings.labels.reviewing == "in-review"

    def test_missing_env_var(self, tmp_path, monkeypatch):
        monkeypatch.delenv("UNSET_TOKEN_VAR", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text("github:\n  token: ${UNSET_TOKEN_VAR}\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="UNSET_TOKEN_VAR"):
            BotSettings.from_yaml(str(config_file))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            BotSettings.from_yaml(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("github: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            BotSettings.from_yaml(str(config_file))

    def test_scalar_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("just a string\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="YAML object"):
            BotSettings.from_yaml(str(config_file))

    def test_validation_failure(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("github:\n  owner: xitu\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to validate"):
            BotSettings.from_yaml(str(config_file))


class TestFromEnv:
    def test_nested_env_vars(self, monkeypatch):
        monkeypatch.setenv("TRANSLATION_BOT_GITHUB__TOKEN", "env-token")
        monkeypatch.setenv("TRANSLATION_BOT_GITHUB__OWNER", "xitu")
        monkeypatch.setenv("TRANSLATION_BOT_GITHUB__REPO", "gold-miner")
        monkeypatch.setenv("TRANSLATION_BOT_SERVER__PORT", "8080")

        settings = BotSettings.from_env()

        assert settings.github.token.get_secret_value() == "env-token"
        assert settings.server.port == 8080

    def test_missing_required(self, monkeypatch):
        for name in ("TOKEN", "OWNER", "REPO"):
            monkeypatch.delenv(f"TRANSLATION_BOT_GITHUB__{name}", raising=False)

        with pytest.raises(ConfigurationError):
            BotSettings.from_env()
