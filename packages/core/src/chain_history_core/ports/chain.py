"""IChainInfo - Protocol for the blockchain RPC collaborator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IChainInfo(Protocol):
    """Reads chain state needed to annotate action finality."""

    async def get_last_irreversible_block(self) -> int:
        """Return the highest block number that can no longer be reverted."""
        ...
