"""Custom exceptions for currency-input."""


class ConfigurationError(Exception):
    """Raised when the widget is given an inconsistent configuration."""
