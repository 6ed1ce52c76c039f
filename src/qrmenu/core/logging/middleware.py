"""Access log for the API.

One ``request_started`` and one ``request_completed`` event per request.
The request ID is already in the structlog context (``RequestIdMiddleware``
runs outside this one); the completion event adds who called and which
shop the access-control chain resolved.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp


logger = structlog.get_logger()

# Probes and docs are polled constantly and carry nothing worth logging
QUIET_PATHS = ("/health/live", "/health/ready", "/docs", "/redoc", "/openapi.json")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each API request with status, duration and caller."""

    def __init__(self, app: ASGIApp, quiet_paths: tuple[str, ...] = QUIET_PATHS) -> None:
        super().__init__(app)
        self.quiet_paths = quiet_paths

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.startswith(self.quiet_paths):
            return await call_next(request)

        started = time.perf_counter()
        base: dict[str, Any] = {"method": request.method, "path": request.url.path}

        logger.info(
            "request_started",
            **base,
            query=request.url.query or None,
            client_ip=get_client_ip(request),
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_failed",
                **base,
                duration_ms=_elapsed_ms(started),
                error=str(exc),
            )
            raise

        log = _log_method(response.status_code)
        log(
            "request_completed",
            **base,
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            **caller_fields(request),
        )
        return response


def caller_fields(request: Request) -> dict[str, str]:
    """Account, role and shop attached to the request, if any.

    ``account_id`` and ``role`` come from ``IdentityContextMiddleware``;
    ``shop`` is set by the ``OwnedShop`` dependency.
    """
    fields: dict[str, str] = {}
    if account_id := getattr(request.state, "account_id", None):
        fields["account_id"] = str(account_id)
    if role := getattr(request.state, "role", None):
        fields["role"] = role
    if (shop := getattr(request.state, "shop", None)) is not None:
        fields["shop_id"] = str(shop.id)
    return fields


def get_client_ip(request: Request) -> str | None:
    """Client address, preferring proxy headers.

    The first ``X-Forwarded-For`` entry wins, then ``X-Real-IP``, then
    the socket peer.
    """
    if forwarded := request.headers.get("X-Forwarded-For"):
        return forwarded.split(",")[0].strip()
    if real_ip := request.headers.get("X-Real-IP"):
        return real_ip
    return request.client.host if request.client else None


def _log_method(status_code: int) -> Any:
    if status_code >= 500:
        return logger.error
    if status_code >= 400:
        return logger.warning
    return logger.info


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
