"""Configuration for translation-bot.

Key Components:
    - BotSettings: Main configuration container with YAML loading support
    - GitHubConfig: Token, owner and repository
    - LabelsConfig: Label vocabulary of the claim workflow
    - RepliesConfig: Acknowledgement comment templates

Example:
    >>> from translation_bot.config import BotSettings
    >>> settings = BotSettings.from_yaml("translation_bot.yaml")
    >>> settings.labels.translation_claim
    '翻译认领'
"""

from translation_bot.config.settings import (
    BotConfig,
    BotSettings,
    GitHubConfig,
    LabelsConfig,
    LoggingConfig,
    RepliesConfig,
    ServerConfig,
)

__all__ = [
    "BotConfig",
    "BotSettings",
    "GitHubConfig",
    "LabelsConfig",
    "LoggingConfig",
    "RepliesConfig",
    "ServerConfig",
]
