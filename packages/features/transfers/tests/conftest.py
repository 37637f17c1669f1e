"""Shared fixtures for transfer lookup tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


def _make_action(
    block_num: int,
    *,
    name: str = "transfer",
    data: dict[str, Any] | None = None,
    authorization: list[dict[str, str]] | None = None,
    notified: list[str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    action: dict[str, Any] = {
        "@timestamp": f"2021-01-01T00:00:{block_num % 60:02d}.000",
        "block_num": block_num,
        "trx_id": f"trx{block_num}",
        "global_sequence": block_num * 10,
        "act": {
            "account": "eosio.token",
            "name": name,
            "authorization": authorization
            if authorization is not None
            else [{"actor": "alice", "permission": "active"}],
            "data": data if data is not None else {"memo": "hi"},
        },
        "notified": notified if notified is not None else ["eosio.token", "bob"],
    }
    action.update(extra)
    return action


@pytest.fixture
def make_action() -> Callable[..., dict[str, Any]]:
    return _make_action


@pytest.fixture
def actions() -> list[dict[str, Any]]:
    return [_make_action(100), _make_action(200), _make_action(300)]
