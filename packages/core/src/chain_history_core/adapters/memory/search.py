"""InMemoryActionSearch — testing implementation of IActionSearch."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...ports.search import IActionSearch

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class SearchCall:
    index: str
    body: dict[str, Any]
    from_: int
    size: int


class InMemoryActionSearch(IActionSearch):
    """Returns a fixed page of documents and records every search request.

    The query body is not evaluated: the configured documents are returned
    as-is, sliced by ``from_``/``size``.
    """

    def __init__(
        self,
        documents: Sequence[dict[str, Any]] | None = None,
        *,
        total: dict[str, Any] | None = None,
    ) -> None:
        self._documents = [copy.deepcopy(d) for d in documents or []]
        self._total = total
        self.calls: list[SearchCall] = []

    async def search(
        self,
        index: str,
        body: dict[str, Any],
        *,
        from_: int,
        size: int,
    ) -> dict[str, Any]:
        self.calls.append(SearchCall(index, body, from_, size))
        page = self._documents[from_ : from_ + size]
        total = self._total or {"value": len(self._documents), "relation": "eq"}
        return {"total": total, "hits": [{"_source": doc} for doc in page]}
