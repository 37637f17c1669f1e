"""Response models for the transfer lookup."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SimpleAction(BaseModel):
    """Compact projection of one action record."""

    model_config = ConfigDict(frozen=True)

    block: int | None = None
    irreversible: bool | None = None
    timestamp: str | None = None
    transaction_id: str | None = None
    actors: str = ""
    notified: str = ""
    contract: str | None = None
    action: str | None = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """``irreversible`` is left out when no LIB was fetched."""
        exclude = {"irreversible"} if self.irreversible is None else None
        return self.model_dump(exclude=exclude)


class TransfersResponse(BaseModel):
    """Response payload: ``simple_actions`` or ``actions``, never both."""

    cached: bool = False
    lib: int = 0
    total: Any = None
    simple: bool = True
    records: list[dict[str, Any]] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        key = "simple_actions" if self.simple else "actions"
        return {
            "cached": self.cached,
            "lib": self.lib,
            "total": self.total,
            key: self.records,
        }
