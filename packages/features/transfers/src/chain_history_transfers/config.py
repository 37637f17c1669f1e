"""TransferHistorySettings — limits and field groups for the transfer lookup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chain_history_filtering.whitelist import (
    DEFAULT_EXTENDED_ACTIONS,
    DEFAULT_PRIMARY_TERMS,
)


class TransferHistorySettings(BaseModel):
    """Process-wide, read-only settings.

    ``max_results`` caps the page size sent to the search backend whatever
    ``limit`` the caller asked for.
    """

    model_config = ConfigDict(frozen=True)

    chain: str = "eos"
    max_results: int = Field(default=1000, ge=1)
    default_limit: int = Field(default=10, ge=1)
    default_track_total_hits: int = Field(default=10000, ge=1)
    truncate_threshold: int = Field(default=256, ge=0)
    truncate_keep: int = Field(default=32, ge=0)
    primary_terms: tuple[str, ...] = DEFAULT_PRIMARY_TERMS
    extended_actions: frozenset[str] = DEFAULT_EXTENDED_ACTIONS

    @property
    def index_pattern(self) -> str:
        return f"{self.chain}-action-*"
