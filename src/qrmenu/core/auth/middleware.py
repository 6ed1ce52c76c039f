"""Request identity and tracing middleware.

This module provides middleware for:
- Binding the caller's identity to the log context
- Request tracing with unique IDs

Neither middleware rejects requests; enforcement lives in the route
dependencies.
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from qrmenu.core.auth.backend import decode_token


if TYPE_CHECKING:
    from starlette.types import ASGIApp


logger = structlog.get_logger()


class IdentityContextMiddleware(BaseHTTPMiddleware):
    """Middleware that binds the token identity to logs.

    Extracts account_id and role from a valid bearer token (if present)
    and adds them to request.state and the structlog context.

    Attributes:
        exclude_paths: Paths that never carry a useful identity
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
            "/api/auth/login",
            "/api/auth/register",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and bind identity context.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response from the handler
        """
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token_data = decode_token(auth_header.split(" ", 1)[1])

            if token_data:
                request.state.account_id = token_data.account_id
                request.state.role = token_data.role.value

                structlog.contextvars.bind_contextvars(
                    account_id=str(token_data.account_id),
                    role=token_data.role.value,
                )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and add request ID.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response with X-Request-ID header
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "account_id", "role", "shop_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
