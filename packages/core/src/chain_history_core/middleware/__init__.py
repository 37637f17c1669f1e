"""Middleware components."""

from .logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
