"""Middleware chain around the transfer lookup handler."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from chain_history_core.cqrs.response import QueryResponse
    from chain_history_core.ports.middleware import IMiddleware

    from .models import TransfersResponse
    from .query import GetTransfers

    TransfersHandle = Callable[
        [GetTransfers], Awaitable[QueryResponse[TransfersResponse]]
    ]


def wrap_handler(
    handle: TransfersHandle,
    middlewares: Sequence[IMiddleware],
) -> TransfersHandle:
    """Nest *handle* inside *middlewares*; the first one runs outermost."""
    for middleware in reversed(middlewares):
        handle = functools.partial(middleware, next_handler=handle)
    return handle
