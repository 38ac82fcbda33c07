"""Core utilities."""
from bookstore.core.exceptions import (
    AppException,
    BadRequestError,
    MethodNotAllowedError,
    NotFoundError,
)
from bookstore.core.logging import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "AppException",
    "BadRequestError",
    "NotFoundError",
    "MethodNotAllowedError",
]
