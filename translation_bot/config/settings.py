"""
Configuration system using Pydantic for type-safe settings management.

Settings cover the GitHub connection, the bot identity and claim keywords,
the label vocabulary, the reply templates, the HTTP server, and logging.
Every section except ``github`` has defaults matching the gold-miner
translation workflow.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from translation_bot.exceptions import ConfigurationError


class GitHubConfig(BaseModel):
    """GitHub connection configuration."""

    token: SecretStr = Field(..., description="Personal access token used for all API calls")
    owner: str = Field(..., description="Repository owner/organization")
    repo: str = Field(..., description="Repository name")
    base_url: str = Field(default="https://api.github.com", description="GitHub API base URL")
    user_agent: str = Field(default="gold-miner-robot", description="User-Agent sent to GitHub")


class BotConfig(BaseModel):
    """Bot identity and comment matching configuration."""

    ignored_login: str = Field(
        default="sqrthree",
        description="Sender login whose events are ignored (the account the token belongs to)",
    )
    claim_keywords: list[str] = Field(
        default_factory=lambda: ["认领", "claim", "Claim"],
        description="Literal, case-sensitive phrases that make a comment a claim",
    )
    recommendation_marker: str = Field(
        default="推荐优秀英文文章",
        description="Issue title marker for article recommendations",
    )


class LabelsConfig(BaseModel):
    """Label vocabulary. Names must match the repository labels exactly."""

    translation_claim: str = Field(default="翻译认领", description="Issue is open for a translator")
    translating: str = Field(default="正在翻译", description="Issue is being translated")
    review_claim: str = Field(default="校对认领", description="Pull request is open for reviewers")
    reviewing: str = Field(default="正在校对", description="Pull request has at least one reviewer")
    claim_review_on_pr: str = Field(
        default="请到对应的 PR 下认领校对",
        description="Issue points reviewers at its pull request",
    )


class RepliesConfig(BaseModel):
    """Reply templates, formatted with ``login`` and ``number`` fields."""

    translation_claimed: str = Field(default="@{login} 棒极啦 :tada:")
    first_reviewer: str = Field(default="@{login} 好的呢 :beer:")
    additional_reviewer: str = Field(default="@{login} 妥妥哒 :beers:")
    pull_request_address: str = Field(default="PR 地址：#{number}")
    recommendation_thanks: str = Field(default=":heart: 感谢有你 ♪(*´▽｀*)ノ")


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind address")  # nosec B104
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port")
    webhook_path: str = Field(default="/webhook", description="Path GitHub delivers webhooks to")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool = Field(default=True, description="Render logs as JSON lines")


class BotSettings(BaseSettings):
    """Main translation-bot settings.

    Values come from a YAML file (see ``from_yaml``) or from environment
    variables such as ``TRANSLATION_BOT_GITHUB__TOKEN``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATION_BOT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    github: GitHubConfig
    bot: BotConfig = Field(default_factory=BotConfig)
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    replies: RepliesConfig = Field(default_factory=RepliesConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str) -> BotSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            BotSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing required fields
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, encoding="utf-8") as f:
                yaml_content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @classmethod
    def from_env(cls) -> BotSettings:
        """Load settings from environment variables only.

        Raises:
            ConfigurationError: If required settings are missing
        """
        try:
            return cls()
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration from environment: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        YAML comment lines are left unchanged.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            stripped = line.lstrip()
            if stripped.startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        lines = content.split("\n")
        return "\n".join(process_line(line) for line in lines)
