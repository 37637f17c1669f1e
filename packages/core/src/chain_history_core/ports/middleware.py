"""IMiddleware — a cross-cutting step around query dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ..cqrs.query import Query
    from ..cqrs.response import QueryResponse

    NextHandler = Callable[[Query[Any]], Awaitable[QueryResponse[Any]]]


@runtime_checkable
class IMiddleware(Protocol):
    """Runs around a query handler: correlation ids, timing logs.

    Implementations must await *next_handler* exactly once and return its
    response unchanged; errors propagate to the caller.
    """

    async def __call__(
        self,
        query: Query[Any],
        next_handler: NextHandler,
    ) -> QueryResponse[Any]: ...
