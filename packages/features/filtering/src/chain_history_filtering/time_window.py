"""Time window: ``after``/``before`` as a non-scoring timestamp range."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clauses import Range

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .clauses import BooleanQuery

TIMESTAMP_FIELD = "@timestamp"
ZONE_MARKER = "Z"
OPEN_LOWER = "0"
OPEN_UPPER = "now"


def complete_zone(value: str) -> str:
    """Append the UTC marker when missing. No other date validation."""
    return value if value.endswith(ZONE_MARKER) else value + ZONE_MARKER


def apply_time_filter(
    query: Mapping[str, str],
    target: BooleanQuery,
    field: str = TIMESTAMP_FIELD,
) -> None:
    after = query.get("after")
    before = query.get("before")
    if not (after or before):
        return
    lower = complete_zone(after) if after else OPEN_LOWER
    upper = complete_zone(before) if before else OPEN_UPPER
    target.filter.append(Range(field, lower, upper))
