"""Custom exception hierarchy for Zoho Desk operations."""
from typing import Any


class ZohoDeskError(Exception):
    """Base exception for Zoho Desk operations."""
    pass


class InvalidRequestException(ZohoDeskError):
    """The API gateway answered with an error status, or no usable response."""

    def __init__(self, message: str, status_code: int | None = None, response_body: Any = None):
        """
        Initialize an invalid request error.

        Args:
            message: Aggregated, human-readable error message
            status_code: HTTP status code if available
            response_body: Parsed response body if available
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    @classmethod
    def create_request_error_exception(cls, message: str, code: int = 0) -> "RequestError":
        """Build the exception raised when the transport itself failed."""
        return RequestError(message, code)


class RequestError(InvalidRequestException):
    """Transport-level failure (DNS, connection refused, TLS, timeout)."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.code = code
