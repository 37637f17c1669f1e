"""GetTransfersHandler — compile, search, project."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from chain_history_core.cqrs.handler import QueryHandler
from chain_history_core.cqrs.response import QueryResponse
from chain_history_filtering.compiler import QueryCompiler
from chain_history_filtering.pagination import PaginationValidator
from chain_history_filtering.whitelist import FieldWhitelist

from .config import TransferHistorySettings
from .models import TransfersResponse
from .projector import ResultProjector

if TYPE_CHECKING:
    from chain_history_core.ports.chain import IChainInfo
    from chain_history_core.ports.search import IActionSearch

    from .query import GetTransfers

logger = logging.getLogger("chain_history.transfers")


class GetTransfersHandler(QueryHandler[TransfersResponse]):
    """Token transfer history lookup.

    Parameter errors are raised before any I/O. The search and, when
    ``checkLib`` is set, the LIB fetch run concurrently; a failure of either
    aborts the request.
    """

    def __init__(
        self,
        search: IActionSearch,
        chain: IChainInfo,
        *,
        settings: TransferHistorySettings | None = None,
        compiler: QueryCompiler | None = None,
        projector: ResultProjector | None = None,
    ) -> None:
        self._search = search
        self._chain = chain
        self._settings = settings or TransferHistorySettings()
        self._compiler = compiler or QueryCompiler(
            FieldWhitelist(
                primary_terms=self._settings.primary_terms,
                extended_actions=self._settings.extended_actions,
            ),
            pagination=PaginationValidator(
                default_limit=self._settings.default_limit
            ),
            default_track_total_hits=self._settings.default_track_total_hits,
        )
        self._projector = projector or ResultProjector(
            truncate_threshold=self._settings.truncate_threshold,
            truncate_keep=self._settings.truncate_keep,
        )

    async def handle(self, query: GetTransfers) -> QueryResponse[TransfersResponse]:
        compiled = self._compiler.compile(query.params)
        search = self._search.search(
            self._settings.index_pattern,
            **compiled.search_kwargs(self._settings.max_results),
        )
        lib: int | None = None
        if query.check_lib:
            hits, lib = await asyncio.gather(
                search, self._chain.get_last_irreversible_block()
            )
        else:
            hits = await search

        records: list[dict[str, Any]] = [
            hit["_source"] for hit in hits.get("hits") or []
        ]
        logger.debug(
            "Fetched %d action(s) from %s", len(records), self._settings.index_pattern
        )
        response = TransfersResponse(
            lib=lib or 0,
            total=hits.get("total"),
            simple=query.simple,
            records=self._projector.project(
                records, simple=query.simple, no_binary=query.no_binary, lib=lib
            ),
        )
        return QueryResponse(result=response, correlation_id=query.correlation_id)
