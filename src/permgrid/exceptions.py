"""Exception hierarchy for permgrid.

Every error carries a stable ``code`` string. A grid that is not ready yet
is signalled by ``None``, never by an exception.

Usage:
    from permgrid.exceptions import PermGridError, PermissionsApiError
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PermGridError",
    "NotLoadedError",
    "UnknownDatabaseError",
    "PermissionsApiError",
]


class PermGridError(Exception):
    """Base exception for permgrid.

    Attributes:
        code: Stable error code string (e.g. "UNKNOWN_DATABASE").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class NotLoadedError(PermGridError):
    """An operation needs data that has not been loaded yet."""

    code: str = "NOT_LOADED"
    message: str = "Permissions have not been loaded"


class UnknownDatabaseError(PermGridError):
    """A location names a database that is not in the loaded metadata."""

    code: str = "UNKNOWN_DATABASE"

    def __init__(self, database_id: Any, **kwargs: Any) -> None:
        super().__init__(f"Unknown database: {database_id}", database_id=database_id, **kwargs)
        self.database_id = database_id


class PermissionsApiError(PermGridError):
    """The permissions backend rejected a request.

    ``data`` is the backend's error payload, surfaced to the user as is.
    """

    code: str = "PERMISSIONS_API_ERROR"

    def __init__(self, message: str | None = None, data: Any = None, **kwargs: Any) -> None:
        super().__init__(message or "Permissions request failed", **kwargs)
        self.data = data
