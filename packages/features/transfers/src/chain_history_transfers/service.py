"""TransferHistoryService — entry point used by the transport layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chain_history_core.correlation import CorrelationIdPropagator
from chain_history_core.middleware.logging import LoggingMiddleware

from .handler import GetTransfersHandler
from .pipeline import wrap_handler
from .query import GetTransfers

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chain_history_core.ports.chain import IChainInfo
    from chain_history_core.ports.middleware import IMiddleware
    from chain_history_core.ports.search import IActionSearch

    from .config import TransferHistorySettings

ROUTE_NAME = "get_transfers"


class TransferHistoryService:
    """Runs :class:`GetTransfersHandler` behind correlation and timing middleware."""

    def __init__(
        self,
        handler: GetTransfersHandler,
        middlewares: list[IMiddleware] | None = None,
    ) -> None:
        self._handler = handler
        if middlewares is None:
            middlewares = [CorrelationIdPropagator(), LoggingMiddleware(ROUTE_NAME)]
        self._pipeline = wrap_handler(handler.handle, middlewares)

    @classmethod
    def create(
        cls,
        search: IActionSearch,
        chain: IChainInfo,
        settings: TransferHistorySettings | None = None,
    ) -> TransferHistoryService:
        return cls(GetTransfersHandler(search, chain, settings=settings))

    async def get_transfers(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Return the response payload for one request's query params."""
        response = await self._pipeline(GetTransfers.from_params(params))
        return response.result.to_payload()
