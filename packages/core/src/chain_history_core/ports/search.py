"""IActionSearch — Protocol for the document search backend."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IActionSearch(Protocol):
    """
    Executes a compiled boolean search against the action indices.
    Connection management and query execution belong to the implementation.
    """

    async def search(
        self,
        index: str,
        body: dict[str, Any],
        *,
        from_: int,
        size: int,
    ) -> dict[str, Any]:
        """
        Run *body* against *index* and return the ``hits`` section:
        ``{"total": <total-hits descriptor>, "hits": [{"_source": {...}}, ...]}``.
        Failures propagate; there is no partial result.
        """
        ...
