"""Sort resolution: explicit ``sortedBy`` or the global sequence order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidSortDirectionError

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_SORT_FIELD = "global_sequence"

_DIRECTIONS: dict[str, str] = {
    "asc": "asc",
    "1": "asc",
    "desc": "desc",
    "-1": "desc",
}


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: str | None

    def to_dict(self) -> dict[str, Any]:
        return {self.field: self.direction}


def get_sort_direction(query: Mapping[str, str]) -> str:
    """``sort`` absent -> desc; asc/1 -> asc; desc/-1 -> desc."""
    raw = query.get("sort")
    if not raw:
        return "desc"
    try:
        return _DIRECTIONS[raw]
    except KeyError:
        raise InvalidSortDirectionError(raw) from None


def resolve_sort(
    query: Mapping[str, str],
    direction: str,
    default_field: str = DEFAULT_SORT_FIELD,
) -> SortSpec:
    """``sortedBy=field:direction`` wins; its direction is not validated."""
    sorted_by = query.get("sortedBy")
    if sorted_by:
        opts = sorted_by.split(":")
        return SortSpec(opts[0], opts[1] if len(opts) > 1 else None)
    return SortSpec(default_field, direction)
