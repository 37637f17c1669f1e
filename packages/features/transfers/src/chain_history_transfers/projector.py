"""ResultProjector — raw action records to response records."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from .metadata import ActionMetaMerger
from .models import SimpleAction

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .metadata import IActionMetaMerger

ELLIPSIS = "..."


class ResultProjector:
    """Maps each record, in input order, to a simple or full response record.

    Records are copied before enrichment; the search response is read-only.
    """

    def __init__(
        self,
        merger: IActionMetaMerger | None = None,
        *,
        truncate_threshold: int = 256,
        truncate_keep: int = 32,
    ) -> None:
        self._merger = merger or ActionMetaMerger()
        self._truncate_threshold = truncate_threshold
        self._truncate_keep = truncate_keep

    def project(
        self,
        records: Iterable[Mapping[str, Any]],
        *,
        simple: bool = True,
        no_binary: bool = False,
        lib: int | None = None,
    ) -> list[dict[str, Any]]:
        """*lib* is the last irreversible block, or ``None`` when not fetched."""
        return [
            self.project_one(record, simple=simple, no_binary=no_binary, lib=lib)
            for record in records
        ]

    def project_one(
        self,
        record: Mapping[str, Any],
        *,
        simple: bool = True,
        no_binary: bool = False,
        lib: int | None = None,
    ) -> dict[str, Any]:
        action = copy.deepcopy(dict(record))
        self._merger.merge(action)
        act = action.get("act") or {}
        if no_binary and isinstance(act.get("data"), dict):
            self.truncate_payload(act["data"])
        if not simple:
            return action
        return SimpleAction(
            block=action.get("block_num"),
            irreversible=is_irreversible(action.get("block_num"), lib),
            timestamp=action.get("@timestamp"),
            transaction_id=action.get("trx_id"),
            actors=format_actors(act.get("authorization") or []),
            notified=",".join(action.get("notified") or []),
            contract=act.get("account"),
            action=act.get("name"),
            data=act.get("data"),
        ).to_dict()

    def truncate_payload(self, data: dict[str, Any]) -> None:
        """Shorten oversized text values in place; other values are untouched."""
        for key, value in data.items():
            if isinstance(value, str) and len(value) > self._truncate_threshold:
                data[key] = value[: self._truncate_keep] + ELLIPSIS


def format_actors(authorization: Iterable[Mapping[str, Any]]) -> str:
    """``[{actor, permission}, ...]`` -> ``"actor@permission,..."``."""
    return ",".join(f"{a['actor']}@{a['permission']}" for a in authorization)


def is_irreversible(block_num: Any, lib: int | None) -> bool | None:
    """``None`` when no LIB was fetched; a record without a block is never final."""
    if lib is None:
        return None
    return isinstance(block_num, int) and block_num < lib
