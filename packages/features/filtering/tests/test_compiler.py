"""Tests for QueryCompiler."""

from __future__ import annotations

import logging

import pytest

from chain_history_core.primitives.exceptions import ValidationError
from chain_history_filtering import (
    CompiledSearch,
    FieldWhitelist,
    InvalidLimitError,
    InvalidSkipError,
    InvalidSortDirectionError,
    Or,
    QueryCompiler,
    Range,
    RawQuery,
    Term,
)


@pytest.fixture
def compiler() -> QueryCompiler:
    return QueryCompiler()


def test_compile_full_body(compiler: QueryCompiler) -> None:
    compiled = compiler.compile(
        {
            "smAccount": "eosio.token",
            "act.name": "transfer",
            "after": "2021-01-01",
            "sort": "asc",
            "skip": "5",
            "limit": "20",
        }
    )
    assert compiled.body() == {
        "track_total_hits": 10000,
        "query": {
            "bool": {
                "must": [
                    {"term": {"act.account": "eosio.token"}},
                    {"term": {"act.name": "transfer"}},
                ],
                "must_not": [],
                "filter": [
                    {"range": {"@timestamp": {"gte": "2021-01-01Z", "lte": "now"}}}
                ],
                "boost": 1.0,
            }
        },
        "sort": {"global_sequence": "asc"},
    }
    assert compiled.search_kwargs(1000)["from_"] == 5
    assert compiled.search_kwargs(1000)["size"] == 20
    assert compiled.search_kwargs(10)["size"] == 10


def test_defaults(compiler: QueryCompiler) -> None:
    compiled = compiler.compile({})
    assert compiled.query.is_empty
    assert compiled.sort.to_dict() == {"global_sequence": "desc"}
    assert compiled.search_kwargs(1000)["from_"] == 0
    assert compiled.search_kwargs(1000)["size"] == 10


def test_consumed_shortcuts_are_not_translated_again() -> None:
    whitelist = FieldWhitelist(primary_terms={"smAccount", "symbol"})
    compiled = QueryCompiler(whitelist).compile({"smAccount": "alice", "symbol": "EOS"})
    assert compiled.query.must == [
        Term("act.account", "alice"),
        Term("@transfer.symbol", "EOS"),
    ]


def test_token_filters_come_first(compiler: QueryCompiler) -> None:
    compiled = compiler.compile({"act.name": "transfer", "canAccount": "bob"})
    assert isinstance(compiled.query.must[0], Or)
    assert compiled.query.must[1] == Term("act.name", "transfer")


def test_params_are_not_mutated(compiler: QueryCompiler) -> None:
    params = {"smAccount": "alice", "canAccount": "bob", "symbol": "EOS"}
    compiler.compile(params)
    assert params == {"smAccount": "alice", "canAccount": "bob", "symbol": "EOS"}


def test_compile_time_window_with_both_bounds(compiler: QueryCompiler) -> None:
    compiled = compiler.compile(
        {"after": "2021-01-01", "before": "2021-02-01", "act.name": "transfer"}
    )
    assert compiled.query.filter == [
        Range("@timestamp", "2021-01-01Z", "2021-02-01Z")
    ]
    assert compiled.query.must == [Term("act.name", "transfer")]


def test_compile_keeps_existing_zone_marker(compiler: QueryCompiler) -> None:
    compiled = compiler.compile({"before": "2021-02-01T00:00:00Z"})
    assert compiled.query.filter == [
        Range("@timestamp", "0", "2021-02-01T00:00:00Z")
    ]


def test_compile_is_deterministic(compiler: QueryCompiler) -> None:
    query = RawQuery(
        {
            "act.name": "transfer,!issue",
            "global_sequence": "1-9",
            "notified": "a b",
            "canAccount": "bob",
            "before": "2022-01-01",
        }
    )
    first = compiler.compile(query)
    second = compiler.compile(query)
    assert first.query == second.query
    assert first.body() == second.body()
    assert first.query.must_not == [Term("act.name", "issue")]
    assert Range("global_sequence", "1", "9") in first.query.must
    assert first.query.filter == [Range("@timestamp", "0", "2022-01-01Z")]


def test_compile_accepts_coerced_values(compiler: QueryCompiler) -> None:
    compiled = compiler.compile({"skip": 0, "limit": 3, "checkLib": True})
    assert isinstance(compiled, CompiledSearch)
    assert compiled.page.limit == 3


@pytest.mark.parametrize(
    ("params", "error"),
    [
        ({"skip": "-1"}, InvalidSkipError),
        ({"limit": "0"}, InvalidLimitError),
        ({"sort": "sideways"}, InvalidSortDirectionError),
    ],
)
def test_compile_raises_variants(
    compiler: QueryCompiler, params: dict[str, str], error: type[Exception]
) -> None:
    with pytest.raises(error):
        compiler.compile(params)


def test_errors_are_validation_errors(compiler: QueryCompiler) -> None:
    with pytest.raises(ValidationError):
        compiler.compile({"skip": "-1"})


def test_try_compile_ok(compiler: QueryCompiler) -> None:
    result = compiler.try_compile({"act.name": "transfer"})
    assert result.is_ok
    assert result.unwrap().query.must == [Term("act.name", "transfer")]


def test_try_compile_error(compiler: QueryCompiler) -> None:
    result = compiler.try_compile({"limit": "-4"})
    assert not result.is_ok
    assert isinstance(result.error, InvalidLimitError)
    assert str(result.error) == "invalid limit parameter"
    with pytest.raises(InvalidLimitError):
        result.unwrap()


def test_compile_logs_clause_counts(compiler: QueryCompiler, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="chain_history.filtering")
    compiler.compile({"act.name": "!transfer"})
    assert "must=0 must_not=1 filter=0" in caplog.text
