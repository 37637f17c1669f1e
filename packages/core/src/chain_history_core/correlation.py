"""Correlation ID management — fundamental to request tracing."""

from __future__ import annotations

import contextlib
import uuid
from contextvars import ContextVar
from typing import Any

# ContextVar for correlation tracking across async boundaries.
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


class CorrelationIdPropagator:
    """Middleware that ensures correlation_id flows end-to-end.

    A message without a correlation id gets the one active in the context,
    or a freshly generated one.
    """

    def __init__(self, correlation_id_key: str = "correlation_id") -> None:
        self._key = correlation_id_key

    async def __call__(self, message: Any, next_handler: Any) -> Any:
        cid = getattr(message, self._key, None) or get_correlation_id()
        if not cid:
            cid = generate_correlation_id()

        # Inject correlation ID into message.
        if getattr(message, self._key, None) != cid:
            if hasattr(message, "model_copy"):
                message = message.model_copy(update={self._key: cid})
            else:
                with contextlib.suppress(AttributeError, TypeError):
                    object.__setattr__(message, self._key, cid)

        set_correlation_id(cid)
        return await next_handler(message)
