"""
Exceptions raised by the pagination core.

They carry no HTTP details. The service layer maps them onto the API error
envelope in ``app.models.errors``.
"""

from typing import Any, Optional


class PaginationError(Exception):
    """Base exception for pagination link planning."""


class ConfigurationError(PaginationError):
    """
    Pagination option that can never produce a valid link set.

    Raised before any token is planned. It is a programming or configuration
    mistake, so it is never corrected silently.
    """

    def __init__(
        self,
        field: str,
        value: Any = None,
        message: Optional[str] = None,
        reason: Optional[str] = None
    ):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for option '{field}'"
        self.reason = reason
        super().__init__(self.message)


def create_distance_error(distance: Any) -> ConfigurationError:
    """Create the error raised for a distance below one or of the wrong type."""
    return ConfigurationError(
        field="distance",
        value=distance,
        message="Distance cannot be less than one.",
        reason=f"Distance must be a positive integer, got {distance!r}."
    )
