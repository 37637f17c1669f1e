"""RawQuery — immutable view over caller-supplied parameters."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RawQuery(Mapping[str, str]):
    """Insertion-ordered, read-only ``name -> text`` mapping.

    Values that a transport already coerced (booleans, integers) are stored
    in their text form; ``None`` values are dropped. Nothing downstream
    mutates it: parameters consumed by the token filters are excluded by
    name instead of being deleted.
    """

    __slots__ = ("_data",)

    def __init__(self, params: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, str] = {
            str(k): _as_text(v) for k, v in (params or {}).items() if v is not None
        }

    @classmethod
    def of(cls, params: Mapping[str, Any] | RawQuery | None) -> RawQuery:
        """Return *params* unchanged when it is already a RawQuery."""
        if isinstance(params, RawQuery):
            return params
        return cls(params)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RawQuery({self._data!r})"
