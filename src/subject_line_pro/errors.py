"""Exceptions raised by Subject Line Pro."""


class InvalidInputError(ValueError):
    """Raised when a subject line is missing, not a string, or empty."""
