"""Comma-separated values: OR across positives, OR across negations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clauses import Or, Term

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .clauses import BooleanQuery, QueryClause

NEGATION_PREFIX = "!"


def strip_negation(token: str) -> str:
    """Remove the first ``!`` of a negated token."""
    return token.replace(NEGATION_PREFIX, "", 1)


def partition(tokens: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *tokens* into ``(positive, negated)``, keeping order in each."""
    positive: list[str] = []
    negated: list[str] = []
    for token in tokens:
        if token.startswith(NEGATION_PREFIX):
            negated.append(strip_negation(token))
        else:
            positive.append(token)
    return positive, negated


def _any_of(field: str, values: list[str]) -> QueryClause:
    if len(values) > 1:
        return Or(tuple(Term(field, v) for v in values))
    return Term(field, values[0])


def resolve_multi_value(
    target: BooleanQuery, field: str, tokens: Sequence[str]
) -> None:
    """Append the positive group to ``must`` and the negated one to ``must_not``."""
    positive, negated = partition(tokens)
    if positive:
        target.must.append(_any_of(field, positive))
    if negated:
        target.must_not.append(_any_of(field, negated))
