"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception.

    Each subclass maps to the HTTP status it is rendered with.
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppException):
    """Malformed book id or request body."""

    status_code = 400

    def __init__(self, message: str = "Invalid request", field: Optional[str] = None):
        super().__init__(
            message,
            error_code="BAD_REQUEST",
            details={"field": field} if field else {},
        )


class NotFoundError(AppException):
    """Resource not found errors."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class MethodNotAllowedError(AppException):
    """HTTP method not supported on a known route."""

    status_code = 405

    def __init__(self, method: Optional[str] = None):
        super().__init__(
            "Method not allowed",
            error_code="METHOD_NOT_ALLOWED",
            details={"method": method} if method else {},
        )
