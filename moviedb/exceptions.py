"""Error kinds surfaced by the movie service."""

from typing import Optional


class MovieServiceError(Exception):
    """Base class for errors raised by the movie service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MovieServiceError):
    """A candidate movie violates a field constraint."""


class NotFoundError(MovieServiceError):
    """No movie exists with the requested id."""

    def __init__(self, message: str = "Movie not found"):
        super().__init__(message)


class StorageFault(MovieServiceError):
    """The record store is unavailable or a write failed."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original
