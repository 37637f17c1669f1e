"""CQRS primitives: queries, handlers, responses."""

from __future__ import annotations

from .handler import QueryHandler
from .query import Query
from .response import QueryResponse

__all__ = [
    "Query",
    "QueryHandler",
    "QueryResponse",
]
