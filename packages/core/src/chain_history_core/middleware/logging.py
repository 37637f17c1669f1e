"""LoggingMiddleware — logs query execution time."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..ports.middleware import IMiddleware

if TYPE_CHECKING:
    from ..cqrs.query import Query
    from ..cqrs.response import QueryResponse
    from ..ports.middleware import NextHandler

logger = logging.getLogger("chain_history.middleware")


class LoggingMiddleware(IMiddleware):
    """Logs query execution — name, duration, correlation_id."""

    def __init__(self, route: str | None = None) -> None:
        self._route = route

    async def __call__(
        self,
        query: Query[Any],
        next_handler: NextHandler,
    ) -> QueryResponse[Any]:
        name = self._route or type(query).__name__
        logger.info("Handling %s (correlation_id=%s)", name, query.correlation_id)
        start = time.perf_counter()
        try:
            response = await next_handler(query)
        except Exception:
            elapsed = (time.perf_counter() - start) * 1000
            logger.exception("%s failed after %.2fms", name, elapsed)
            raise
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("%s completed in %.2fms", name, elapsed)
        return response
