"""Exceptions raised by eventhub."""


class EventHubError(Exception):
    """Base error for all eventhub exceptions."""


class InvalidArgument(EventHubError, ValueError):
    """Raised when a registry operation receives a bad event name or callback."""


class ConfigurationError(EventHubError):
    """Raised when configuration values are invalid."""
