"""Handler base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .query import Query
    from .response import QueryResponse

TResult = TypeVar("TResult")  # Result type


class QueryHandler(ABC, Generic[TResult]):
    """Base class for query handlers.

    Collaborators (search backend, chain RPC) are constructor-injected.

    Usage::

        class GetTransfersHandler(QueryHandler[TransfersResponse]):
            async def handle(
                self, query: GetTransfers
            ) -> QueryResponse[TransfersResponse]:
                ...
    """

    @abstractmethod
    async def handle(self, query: Query[TResult]) -> QueryResponse[TResult]:
        """Execute the query and return a QueryResponse."""
        ...
