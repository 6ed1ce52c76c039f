"""Error handling module with RFC 7807 Problem Details."""

from qrmenu.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PayloadTooLargeError,
    UnauthorizedError,
    UpstreamServiceError,
    ValidationError,
)
from qrmenu.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "ConflictError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "PayloadTooLargeError",
    "ProblemDetail",
    "UnauthorizedError",
    "UpstreamServiceError",
    "ValidationError",
    "register_exception_handlers",
]
