"""
Error handling and exception classes for the Pagination Links Service.

This module provides custom exceptions and the structured error responses
returned by the API.
"""

from typing import List, Optional

from fastapi import status
from pydantic import BaseModel, ConfigDict

from app.core.exceptions import ConfigurationError


class ErrorKind:
    """Error kinds returned in the errors envelope."""
    INVALID_ROUTE = "InvalidRoute"
    INVALID_PARAMETERS = "InvalidParameters"
    INVALID_CONFIGURATION = "InvalidConfiguration"
    INTERNAL_SERVER_ERROR = "InternalServerError"


class ErrorDetail(BaseModel):
    """Individual error detail model.

    Fields vary by error kind:
    - InvalidRoute: kind, method, message
    - InvalidParameters: kind, parameters, message, reason
    - InvalidConfiguration: kind, field, message, reason
    """

    model_config = ConfigDict(exclude_none=True)

    kind: str
    message: Optional[str] = None
    # InvalidRoute fields
    method: Optional[str] = None
    # InvalidParameters fields
    parameters: Optional[List[str]] = None
    # InvalidConfiguration fields
    field: Optional[str] = None
    reason: Optional[str] = None


class ErrorsResponse(BaseModel):
    """Error response model."""
    model_config = ConfigDict(exclude_none=True)

    errors: List[ErrorDetail]


class LinkServiceException(Exception):
    """Base exception for the Pagination Links Service."""

    def __init__(
        self,
        kind: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        method: Optional[str] = None,
        parameters: Optional[List[str]] = None,
        field: Optional[str] = None,
        message: Optional[str] = None,
        reason: Optional[str] = None
    ):
        """Initialize service exception."""
        self.kind = kind
        self.status_code = status_code
        self.method = method
        self.parameters = parameters or []
        self.field = field
        self.message = message or self._generate_message()
        self.reason = reason
        super().__init__(self.message)

    def _generate_message(self) -> str:
        """Generate error message from error details."""
        if self.kind == ErrorKind.INVALID_ROUTE:
            return "Invalid route requested."
        elif self.kind == ErrorKind.INVALID_PARAMETERS:
            param_list = "', '".join(self.parameters) if self.parameters else ""
            return f"Invalid parameter{'s' if len(self.parameters) > 1 else ''} '{param_list}'"
        elif self.kind == ErrorKind.INVALID_CONFIGURATION:
            return f"Invalid value for option '{self.field}'"
        else:
            return "An error occurred."

    def to_error_detail(self) -> ErrorDetail:
        """Convert exception to error detail."""
        return ErrorDetail(
            kind=self.kind,
            method=self.method,
            parameters=self.parameters if self.parameters else None,
            field=self.field,
            message=self.message,
            reason=self.reason
        )


class InvalidRouteError(LinkServiceException):
    """
    Invalid API route error.

    The requested path is logged by the handler but never echoed back.
    """

    def __init__(
        self,
        method: str,
        status_code: int = status.HTTP_404_NOT_FOUND,
        message: Optional[str] = None
    ):
        super().__init__(
            kind=ErrorKind.INVALID_ROUTE,
            status_code=status_code,
            method=method,
            message=message
        )


class InvalidParametersError(LinkServiceException):
    """Invalid query parameters error."""

    def __init__(
        self,
        parameters: List[str],
        message: Optional[str] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        reason: Optional[str] = None
    ):
        if message is None:
            message = "Invalid query parameter(s) provided."
        if reason is None:
            reason = "The parameter value is invalid or incorrectly formatted."
        super().__init__(
            kind=ErrorKind.INVALID_PARAMETERS,
            status_code=status_code,
            parameters=parameters,
            message=message,
            reason=reason
        )


class InvalidConfigurationError(LinkServiceException):
    """Pagination option rejected by the core, reported to the API caller."""

    def __init__(
        self,
        field: str,
        message: Optional[str] = None,
        reason: Optional[str] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ):
        if reason is None:
            reason = "The option value is outside its allowed range."
        super().__init__(
            kind=ErrorKind.INVALID_CONFIGURATION,
            status_code=status_code,
            field=field,
            message=message,
            reason=reason
        )

    @classmethod
    def from_configuration_error(cls, exc: ConfigurationError) -> "InvalidConfigurationError":
        return cls(field=exc.field, message=exc.message, reason=exc.reason)


class InternalServerError(LinkServiceException):
    """Internal server error."""

    def __init__(
        self,
        message: Optional[str] = None
    ):
        if message is None:
            message = "An internal server error occurred"
        super().__init__(
            kind=ErrorKind.INTERNAL_SERVER_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=message
        )


# Utility functions for common error scenarios

def create_distance_limit_error(distance: int, max_distance: int) -> InvalidParametersError:
    """Create the error raised when a caller asks for a window wider than allowed."""
    return InvalidParametersError(
        parameters=["distance"],
        message="Invalid query parameter(s) provided.",
        reason=f"Invalid value for parameter 'distance': {distance} exceeds the maximum of {max_distance}."
    )
