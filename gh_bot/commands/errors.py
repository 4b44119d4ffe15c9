"""Exceptions raised while parsing and validating command arguments."""


class CommandError(Exception):
    """Base class for errors that end a command with a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(CommandError):
    """Missing or insufficient arguments."""


class ValidationError(CommandError):
    """Arguments are present but malformed or out of bounds."""


class InvalidEventTypeError(ValidationError):
    """One or more ``--events`` tokens are outside the allowed vocabulary."""

    def __init__(self, tokens: list[str], message: str):
        super().__init__(message)
        self.tokens = tokens


def external_error_message(error: Exception) -> str:
    """User-facing text for a failure raised by an external service."""
    return f"❌ Error: {str(error) or 'Unknown error'}"
