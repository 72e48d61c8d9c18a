"""Domain errors raised by the content repositories."""

from typing import Any


class ContentError(Exception):
    """Base class for content repository errors."""


class ValidationError(ContentError):
    """Input is missing, malformed or out of range."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class NotFoundError(ContentError):
    """No row matches the requested ID."""


class StorageError(ContentError):
    """The database call failed or returned an unexpected shape."""
