"""GenericFilterTranslator — ad-hoc field filters to boolean clauses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clauses import Term
from .multi_value import NEGATION_PREFIX, resolve_multi_value, strip_negation
from .ranges import is_range, parse_range
from .whitelist import FieldWhitelist

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .clauses import BooleanQuery
    from .whitelist import FieldDescriptor

MULTI_SEPARATOR = ","
AND_SEPARATOR = " "


class GenericFilterTranslator:
    """Translate every filterable parameter into ``must``/``must_not`` clauses.

    Value syntax, first match wins:

    1. ``lo-hi``   range (a hyphen anywhere, even next to commas)
    2. ``a,!b``    OR of positives, OR of negations
    3. ``a b``     one term clause per space-separated token (AND)
    4. ``!a``      negated term
    5. ``a``       term
    """

    def __init__(self, whitelist: FieldWhitelist | None = None) -> None:
        self._whitelist = whitelist or FieldWhitelist()

    def apply(
        self,
        query: Mapping[str, str],
        target: BooleanQuery,
        exclude: Iterable[str] = (),
    ) -> None:
        for descriptor in self._whitelist.resolve(query, exclude):
            self._translate(descriptor, target)

    def _translate(self, descriptor: FieldDescriptor, target: BooleanQuery) -> None:
        field, value = descriptor.storage_key, descriptor.value
        if is_range(value):
            target.must.append(parse_range(field, value))
            return
        parts = value.split(MULTI_SEPARATOR)
        if len(parts) > 1:
            resolve_multi_value(target, field, parts)
            return
        and_parts = parts[0].split(AND_SEPARATOR)
        if len(and_parts) > 1:
            target.must.extend(Term(field, token) for token in and_parts)
        elif value.startswith(NEGATION_PREFIX):
            target.must_not.append(Term(field, strip_negation(value)))
        else:
            target.must.append(Term(field, value))
