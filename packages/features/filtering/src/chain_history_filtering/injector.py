"""TokenFilterInjector — fixed clauses for the token transfer shortcuts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clauses import Or, Term

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .clauses import BooleanQuery

SM_ACCOUNT = "smAccount"
CAN_ACCOUNT = "canAccount"
SYMBOL = "symbol"


class TokenFilterInjector:
    """Appends the shortcut clauses before generic translation.

    * ``smAccount`` - the contract that executed the action
    * ``canAccount`` - sender or receiver of the transfer
    * ``symbol`` - the transferred token symbol

    :meth:`inject` returns the names it consumed so the generic translator
    can leave them alone.
    """

    def __init__(
        self,
        *,
        contract_field: str = "act.account",
        from_field: str = "@transfer.from",
        to_field: str = "@transfer.to",
        symbol_field: str = "@transfer.symbol",
    ) -> None:
        self._contract_field = contract_field
        self._from_field = from_field
        self._to_field = to_field
        self._symbol_field = symbol_field

    def inject(self, query: Mapping[str, str], target: BooleanQuery) -> frozenset[str]:
        consumed: list[str] = []
        contract = query.get(SM_ACCOUNT)
        if contract:
            target.must.append(Term(self._contract_field, contract))
            consumed.append(SM_ACCOUNT)
        account = query.get(CAN_ACCOUNT)
        if account:
            target.must.append(
                Or((Term(self._from_field, account), Term(self._to_field, account)))
            )
            consumed.append(CAN_ACCOUNT)
        symbol = query.get(SYMBOL)
        if symbol:
            target.must.append(Term(self._symbol_field, symbol))
            consumed.append(SYMBOL)
        return frozenset(consumed)
