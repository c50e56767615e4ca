"""Custom exception hierarchy for translation-bot.

Exception Hierarchy:
    TranslationBotError (base)
    ├── ConfigurationError
    └── ExternalServiceError

Handler code catches these at the boundary of each label transition and logs
them; nothing below the webhook endpoint is surfaced to the webhook sender.

Example Usage:
    >>> from translation_bot.exceptions import ConfigurationError
    >>> try:
    ...     load_config(path)
    ... except FileNotFoundError as e:
    ...     raise ConfigurationError(f"Config file not found: {path}") from e
"""


class TranslationBotError(Exception):
    """Base exception for all translation-bot errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(TranslationBotError):
    """Configuration-related errors.

    Raised when the configuration file is missing, unreadable, or fails
    validation.
    """

    pass


class ExternalServiceError(TranslationBotError):
    """Issue tracker communication errors.

    Raised when a GitHub API call fails (auth, rate limit, not found,
    network).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
            response_text: Response body text (if applicable)
        """
        self.message = message
        self.status_code = status_code
        self.response_text = response_text

        full_message = message
        if status_code:
            full_message = f"{message} (HTTP {status_code})"

        Exception.__init__(self, full_message)
