"""
Custom exceptions for the Zipic MCP server.
"""

from typing import Optional


class ZipicMcpError(Exception):
    """Base class for all Zipic MCP server specific errors."""
    pass


class ApplicationUnavailable(ZipicMcpError):
    """Raised when the Zipic application is not installed on the host."""
    pass


class ValidationError(ZipicMcpError):
    """Base class for request parameters that fail validation.

    ``field`` names the offending request field so the message returned to
    the caller can point at it.
    """

    def __init__(self, field: str, message: str, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class EmptyTargetsError(ValidationError):
    """Raised when a request names no targets."""

    def __init__(self, field: str = "targets", message: Optional[str] = None) -> None:
        super().__init__(field, message or f"'{field}' must contain at least one path")


class OutOfRangeError(ValidationError):
    """Raised when a value lies outside the range accepted for its field."""
    pass


class BadTypeError(ValidationError):
    """Raised when a value cannot be coerced to the type of its field."""
    pass


class ConflictError(ValidationError):
    """Raised when two fields are supplied that cannot be used together."""
    pass


class EncodingFailure(ZipicMcpError):
    """Raised when encoded parameters do not form a valid request URI."""
    pass


class DispatchRejected(ZipicMcpError):
    """Raised when the host refuses to hand a request URI to the application."""
    pass
