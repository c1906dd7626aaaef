"""Custom exceptions for the money input formatter."""


class InvalidConfiguration(ValueError):
    """Raised when a formatter is built with an unusable configuration."""
