"""FieldWhitelist — which parameters are ad-hoc filters, and where they live."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

FIELD_SEPARATOR = "."
EXTENDED_PREFIX = "@"

DEFAULT_PRIMARY_TERMS: tuple[str, ...] = (
    "notified",
    "block_num",
    "global_sequence",
    "producer",
    "@timestamp",
    "creator_action_ordinal",
    "action_ordinal",
    "cpu_usage_us",
    "net_usage_words",
    "trx_id",
)

DEFAULT_EXTENDED_ACTIONS: frozenset[str] = frozenset(
    {
        "transfer",
        "newaccount",
        "updateauth",
        "buyram",
        "buyrambytes",
        "delegatebw",
        "undelegatebw",
    }
)


class FieldDescriptor(NamedTuple):
    """A filterable parameter resolved against the whitelist."""

    name: str
    storage_key: str
    value: str


class FieldWhitelist:
    """Top-level filterable names plus the extended (``@``-prefixed) groups.

    A parameter is filterable when its name is qualified (contains a dot)
    or is one of the primary terms. Qualified names whose first segment is
    an extended action are stored under ``@<name>``.
    """

    def __init__(
        self,
        *,
        primary_terms: Iterable[str] | None = None,
        extended_actions: Iterable[str] | None = None,
    ) -> None:
        self.primary_terms = frozenset(
            DEFAULT_PRIMARY_TERMS if primary_terms is None else primary_terms
        )
        self.extended_actions = frozenset(
            DEFAULT_EXTENDED_ACTIONS if extended_actions is None else extended_actions
        )

    def is_filterable(self, name: str) -> bool:
        return FIELD_SEPARATOR in name or name in self.primary_terms

    def storage_key(self, name: str) -> str:
        group, sep, _ = name.partition(FIELD_SEPARATOR)
        if sep and group in self.extended_actions:
            return EXTENDED_PREFIX + name
        return name

    def resolve(
        self,
        query: Mapping[str, str],
        exclude: Iterable[str] = (),
    ) -> tuple[FieldDescriptor, ...]:
        """Return the filterable parameters of *query* in insertion order.

        Names in *exclude* (already consumed by token filters) and names that
        are not filterable are skipped without error.
        """
        skipped = frozenset(exclude)
        return tuple(
            FieldDescriptor(name, self.storage_key(name), value)
            for name, value in query.items()
            if name not in skipped and self.is_filterable(name)
        )
