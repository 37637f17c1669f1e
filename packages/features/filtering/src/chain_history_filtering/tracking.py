"""Total-hits tracking directive."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import InvalidTrackError
from .pagination import parse_int

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TRACK_TOTAL_HITS = 10000


def get_track_total_hits(
    query: Mapping[str, str], default: int = DEFAULT_TRACK_TOTAL_HITS
) -> bool | int:
    """``true``/``false`` or a positive hit count; *default* when absent."""
    track = query.get("track")
    if not track:
        return default
    if track == "true":
        return True
    if track == "false":
        return False
    parsed = parse_int(track)
    if parsed is None or parsed < 1:
        raise InvalidTrackError(track)
    return parsed
