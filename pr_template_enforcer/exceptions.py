"""Exceptions raised by the PR template enforcer."""


class EnforcerError(Exception):
    """Base class for enforcer errors."""


class ConfigurationError(EnforcerError):
    """Raised when action inputs or the event payload are unusable."""


class InvalidPatternError(ConfigurationError):
    """Raised when the ticket pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid ticket pattern {pattern!r}: {reason}")


class TemplateNotFoundError(EnforcerError):
    """Raised when no PR template exists at any known location."""
