"""Tests for ResultProjector and the metadata merger."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from chain_history_transfers.metadata import ActionMetaMerger, deep_merge
from chain_history_transfers.projector import ResultProjector, format_actors

ActionFactory = Callable[..., dict[str, Any]]


def test_simple_projection_shape(make_action: ActionFactory) -> None:
    action = make_action(
        150,
        authorization=[
            {"actor": "a", "permission": "active"},
            {"actor": "b", "permission": "owner"},
        ],
        notified=["x", "y", "z"],
    )
    [record] = ResultProjector().project([action])
    assert record == {
        "block": 150,
        "timestamp": action["@timestamp"],
        "transaction_id": "trx150",
        "actors": "a@active,b@owner",
        "notified": "x,y,z",
        "contract": "eosio.token",
        "action": "transfer",
        "data": {"memo": "hi"},
    }
    assert "irreversible" not in record


def test_irreversible_flag_when_lib_known(actions: list[dict[str, Any]]) -> None:
    records = ResultProjector().project(actions, lib=200)
    assert [r["irreversible"] for r in records] == [True, False, False]


def test_irreversible_present_even_for_zero_lib(actions: list[dict[str, Any]]) -> None:
    records = ResultProjector().project(actions, lib=0)
    assert all(r["irreversible"] is False for r in records)


def test_full_projection_returns_enriched_record(actions: list[dict[str, Any]]) -> None:
    records = ResultProjector().project(actions, simple=False)
    assert [r["block_num"] for r in records] == [100, 200, 300]
    assert records[0]["timestamp"] == records[0]["@timestamp"]
    assert records[0]["act"]["authorization"] == [
        {"actor": "alice", "permission": "active"}
    ]


def test_output_order_matches_input_in_both_modes(
    actions: list[dict[str, Any]],
) -> None:
    shuffled = [actions[2], actions[0], actions[1]]
    projector = ResultProjector()
    assert [r["block"] for r in projector.project(shuffled)] == [300, 100, 200]
    assert [r["block_num"] for r in projector.project(shuffled, simple=False)] == [
        300,
        100,
        200,
    ]


def test_no_binary_truncates_long_text(make_action: ActionFactory) -> None:
    long_value = "x" * 300
    medium_value = "y" * 200
    action = make_action(
        1, data={"hex": long_value, "memo": medium_value, "amount": 12345}
    )
    [record] = ResultProjector().project([action], no_binary=True)
    assert record["data"]["hex"] == long_value[:32] + "..."
    assert len(record["data"]["hex"]) == 35
    assert record["data"]["memo"] == medium_value
    assert record["data"]["amount"] == 12345


def test_long_text_kept_without_no_binary(make_action: ActionFactory) -> None:
    action = make_action(1, data={"hex": "x" * 300})
    [record] = ResultProjector().project([action])
    assert len(record["data"]["hex"]) == 300


def test_truncation_threshold_is_exclusive(make_action: ActionFactory) -> None:
    action = make_action(1, data={"a": "z" * 256, "b": "z" * 257})
    [record] = ResultProjector().project([action], no_binary=True)
    assert len(record["data"]["a"]) == 256
    assert len(record["data"]["b"]) == 35


def test_input_records_are_not_mutated(make_action: ActionFactory) -> None:
    action = make_action(
        1, data={"hex": "x" * 300}, **{"@transfer": {"from": "alice"}}
    )
    snapshot = copy.deepcopy(action)
    ResultProjector().project([action], no_binary=True, simple=False)
    assert action == snapshot


def test_custom_merger_is_invoked_per_record(actions: list[dict[str, Any]]) -> None:
    seen: list[int] = []

    class Recorder:
        def merge(self, action: dict[str, Any]) -> None:
            seen.append(action["block_num"])
            action["act"]["name"] = "renamed"

    records = ResultProjector(Recorder()).project(actions)
    assert seen == [100, 200, 300]
    assert {r["action"] for r in records} == {"renamed"}


def test_format_actors_empty() -> None:
    assert format_actors([]) == ""


def test_empty_authorization_and_notified(make_action: ActionFactory) -> None:
    [record] = ResultProjector().project([make_action(1, authorization=[], notified=[])])
    assert record["actors"] == ""
    assert record["notified"] == ""


# --- ActionMetaMerger ---


def test_merger_folds_extended_payload_into_data(make_action: ActionFactory) -> None:
    action = make_action(
        1,
        data={"memo": "from data"},
        **{"@transfer": {"from": "alice", "to": "bob", "memo": "from meta"}},
    )
    ActionMetaMerger().merge(action)
    assert action["act"]["data"] == {"from": "alice", "to": "bob", "memo": "from data"}
    assert "@transfer" not in action
    assert action["timestamp"] == action["@timestamp"]


def test_merger_keep_source(make_action: ActionFactory) -> None:
    action = make_action(1, **{"@transfer": {"from": "alice"}})
    ActionMetaMerger(keep_source=True).merge(action)
    assert action["@transfer"] == {"from": "alice"}


def test_merger_without_extended_payload(make_action: ActionFactory) -> None:
    action = make_action(1, name="issue")
    ActionMetaMerger().merge(action)
    assert action["act"]["data"] == {"memo": "hi"}


def test_deep_merge_nested() -> None:
    assert deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}}) == {
        "a": {"x": 1, "y": 3},
        "b": 1,
    }


def test_record_without_block_is_not_irreversible(
    make_action: ActionFactory,
) -> None:
    missing = make_action(1)
    del missing["block_num"]
    nulled = make_action(2)
    nulled["block_num"] = None
    records = ResultProjector().project([missing, nulled], lib=100)
    assert [(r["block"], r["irreversible"]) for r in records] == [
        (None, False),
        (None, False),
    ]
