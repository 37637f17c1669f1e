"""ElasticsearchActionSearch — run compiled searches on an AsyncElasticsearch client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from elasticsearch import ApiError, TransportError

from chain_history_core.ports.search import IActionSearch
from chain_history_core.primitives.exceptions import SearchBackendError

if TYPE_CHECKING:
    from elasticsearch import AsyncElasticsearch

logger = logging.getLogger("chain_history.elasticsearch")


class ElasticsearchActionSearch(IActionSearch):
    """Wrap an injected client; connection lifecycle stays with the caller."""

    def __init__(self, client: AsyncElasticsearch) -> None:
        self._client = client

    async def search(
        self,
        index: str,
        body: dict[str, Any],
        *,
        from_: int,
        size: int,
    ) -> dict[str, Any]:
        try:
            response = await self._client.search(
                index=index, from_=from_, size=size, **body
            )
        except (ApiError, TransportError) as e:
            logger.error("Search on %s failed: %s", index, e)
            raise SearchBackendError(str(e)) from e
        return response["hits"]
