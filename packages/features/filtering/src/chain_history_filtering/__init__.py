"""Filter compilation — ad-hoc field filters, token shortcuts, time window, sort, paging."""

from __future__ import annotations

from .clauses import BooleanQuery, Or, QueryClause, Range, Term
from .compiler import CompilationResult, CompiledSearch, QueryCompiler
from .exceptions import (
    InvalidLimitError,
    InvalidParameterError,
    InvalidSkipError,
    InvalidSortDirectionError,
    InvalidTrackError,
)
from .injector import TokenFilterInjector
from .multi_value import partition, resolve_multi_value
from .pagination import PageSpec, PaginationValidator
from .ranges import is_range, parse_range
from .raw_query import RawQuery
from .sort import SortSpec, get_sort_direction, resolve_sort
from .time_window import apply_time_filter
from .tracking import get_track_total_hits
from .translator import GenericFilterTranslator
from .whitelist import FieldDescriptor, FieldWhitelist

__all__ = [
    "BooleanQuery",
    "CompilationResult",
    "CompiledSearch",
    "FieldDescriptor",
    "FieldWhitelist",
    "GenericFilterTranslator",
    "InvalidLimitError",
    "InvalidParameterError",
    "InvalidSkipError",
    "InvalidSortDirectionError",
    "InvalidTrackError",
    "Or",
    "PageSpec",
    "PaginationValidator",
    "QueryClause",
    "QueryCompiler",
    "Range",
    "RawQuery",
    "SortSpec",
    "Term",
    "TokenFilterInjector",
    "apply_time_filter",
    "get_sort_direction",
    "get_track_total_hits",
    "is_range",
    "parse_range",
    "partition",
    "resolve_multi_value",
]
