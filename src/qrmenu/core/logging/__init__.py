"""Logging module with structured logging and request tracking."""

from qrmenu.core.logging.middleware import RequestLoggingMiddleware
from qrmenu.core.logging.setup import configure_logging


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
