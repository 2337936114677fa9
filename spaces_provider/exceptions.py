"""Exception hierarchy for the Spaces upload provider."""


class ProviderError(Exception):
    """Base exception for errors raised by the provider itself."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ProviderError):
    """Raised when provider options are invalid or missing."""


class InputError(ProviderError):
    """Raised when a file descriptor cannot be stored as given."""
