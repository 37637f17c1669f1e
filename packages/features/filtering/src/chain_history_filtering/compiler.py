"""QueryCompiler — query params -> boolean search body + paging."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .clauses import BooleanQuery
from .exceptions import InvalidParameterError
from .injector import TokenFilterInjector
from .pagination import PaginationValidator
from .raw_query import RawQuery
from .sort import DEFAULT_SORT_FIELD, get_sort_direction, resolve_sort
from .time_window import apply_time_filter
from .tracking import DEFAULT_TRACK_TOTAL_HITS, get_track_total_hits
from .translator import GenericFilterTranslator

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .pagination import PageSpec
    from .sort import SortSpec
    from .whitelist import FieldWhitelist

logger = logging.getLogger("chain_history.filtering")

T = TypeVar("T")


@dataclass(frozen=True)
class CompiledSearch:
    """Everything the search collaborator needs for one request."""

    query: BooleanQuery
    sort: SortSpec
    page: PageSpec
    track_total_hits: bool | int

    def body(self) -> dict[str, Any]:
        return {
            "track_total_hits": self.track_total_hits,
            "query": self.query.to_dict(),
            "sort": self.sort.to_dict(),
        }

    def search_kwargs(self, max_results: int) -> dict[str, Any]:
        """``from_``/``size``/``body`` with ``size`` capped at *max_results*."""
        return {
            "from_": self.page.skip,
            "size": self.page.effective_limit(max_results),
            "body": self.body(),
        }


@dataclass(frozen=True)
class CompilationResult(Generic[T]):
    """Either a value or the parameter error that prevented it."""

    value: T | None = None
    error: InvalidParameterError | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class QueryCompiler:
    """Runs pagination, sort, token filters, generic filters, time window.

    Compilation is synchronous and pure: the same params always compile to
    the same clause lists, and the params are never modified.
    """

    def __init__(
        self,
        whitelist: FieldWhitelist | None = None,
        *,
        injector: TokenFilterInjector | None = None,
        pagination: PaginationValidator | None = None,
        default_sort_field: str = DEFAULT_SORT_FIELD,
        default_track_total_hits: int = DEFAULT_TRACK_TOTAL_HITS,
    ) -> None:
        self._translator = GenericFilterTranslator(whitelist)
        self._injector = injector or TokenFilterInjector()
        self._pagination = pagination or PaginationValidator()
        self._default_sort_field = default_sort_field
        self._default_track_total_hits = default_track_total_hits

    def compile(self, params: Mapping[str, Any]) -> CompiledSearch:
        """Raise an :class:`InvalidParameterError` variant on bad paging/sort/track."""
        query = RawQuery.of(params)
        page = self._pagination.parse(query)
        direction = get_sort_direction(query)

        bool_query = BooleanQuery()
        consumed = self._injector.inject(query, bool_query)
        self._translator.apply(query, bool_query, exclude=consumed)
        apply_time_filter(query, bool_query)

        compiled = CompiledSearch(
            query=bool_query,
            sort=resolve_sort(query, direction, self._default_sort_field),
            page=page,
            track_total_hits=get_track_total_hits(
                query, self._default_track_total_hits
            ),
        )
        logger.debug(
            "Compiled query: must=%d must_not=%d filter=%d sort=%s",
            len(bool_query.must),
            len(bool_query.must_not),
            len(bool_query.filter),
            compiled.sort.to_dict(),
        )
        return compiled

    def try_compile(
        self, params: Mapping[str, Any]
    ) -> CompilationResult[CompiledSearch]:
        """Like :meth:`compile` but returns the error variant instead of raising."""
        try:
            return CompilationResult(value=self.compile(params))
        except InvalidParameterError as e:
            return CompilationResult(error=e)
