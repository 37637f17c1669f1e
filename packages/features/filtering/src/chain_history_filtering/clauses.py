"""Query clauses and the boolean query they are collected into.

Clauses are immutable; :class:`BooleanQuery` is a per-request builder whose
lists keep insertion order so the rendered body is reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Term:
    """Equality match of *field* against one literal value."""

    field: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"term": {self.field: self.value}}


@dataclass(frozen=True)
class Range:
    """Inclusive ``gte``/``lte`` match. Bounds are passed through as text."""

    field: str
    lower: str
    upper: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": {self.field: {"gte": self.lower, "lte": self.upper}}}


@dataclass(frozen=True)
class Or:
    """Matches when any of *terms* matches."""

    terms: tuple[QueryClause, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"bool": {"should": [t.to_dict() for t in self.terms]}}


QueryClause = Union[Term, Range, Or]


def _clause_list() -> list[QueryClause]:
    return []


@dataclass
class BooleanQuery:
    """must (AND, scored), must_not (AND NOT), filter (AND, unscored)."""

    must: list[QueryClause] = field(default_factory=_clause_list)
    must_not: list[QueryClause] = field(default_factory=_clause_list)
    filter: list[QueryClause] = field(default_factory=_clause_list)
    boost: float = 1.0

    @property
    def is_empty(self) -> bool:
        return not (self.must or self.must_not or self.filter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bool": {
                "must": [c.to_dict() for c in self.must],
                "must_not": [c.to_dict() for c in self.must_not],
                "filter": [c.to_dict() for c in self.filter],
                "boost": self.boost,
            }
        }
