"""PaginationValidator — skip/limit from query params."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from .exceptions import InvalidLimitError, InvalidSkipError

if TYPE_CHECKING:
    from collections.abc import Mapping

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: str | None) -> int | None:
    """Parse leading digits like a browser ``parseInt``; ``None`` when none."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class PageSpec(NamedTuple):
    skip: int
    limit: int

    def effective_limit(self, max_results: int) -> int:
        return min(self.limit, max_results)


class PaginationValidator:
    """Validate skip/limit; the upper bound is applied at search time."""

    def __init__(self, *, default_limit: int = 10) -> None:
        self._default_limit = default_limit

    def parse(
        self,
        query_params: Mapping[str, str],
        *,
        skip_key: str = "skip",
        limit_key: str = "limit",
    ) -> PageSpec:
        skip = parse_int(query_params.get(skip_key))
        if skip is not None and skip < 0:
            raise InvalidSkipError(query_params.get(skip_key))
        limit = parse_int(query_params.get(limit_key))
        if limit is not None and limit < 1:
            raise InvalidLimitError(query_params.get(limit_key))
        return PageSpec(
            skip=skip or 0,
            limit=limit if limit is not None else self._default_limit,
        )
