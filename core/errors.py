"""Exceptions raised by the core engine."""


class InvalidConfigurationError(ValueError):
    """Raised when a shoe or trainer is configured with unsupported values."""
