"""Error taxonomy shared by the store, services and HTTP handlers."""

from typing import Self


class DietTrackerError(Exception):
    """Base error carrying the HTTP status it is reported with."""

    status_code = 400

    def wrap(self, context: str) -> Self:
        """Return a same-typed error whose message is prefixed with context."""
        wrapped = type(self)(f"{context}: {self}")
        wrapped.__cause__ = self
        return wrapped


class DecodeError(DietTrackerError):
    """Malformed or missing request body."""


class AuthContextError(DietTrackerError):
    """No authenticated identity is available for the request."""

    status_code = 401


class AuthorizationError(DietTrackerError):
    """The caller does not own the target entry."""

    status_code = 401


class StoreError(DietTrackerError):
    """Persistence failure such as a constraint violation."""


class NotFoundError(DietTrackerError):
    """The target row does not exist."""

    status_code = 404


class DataIntegrityError(DietTrackerError):
    """A primary-key lookup matched more than one row."""

    status_code = 500
