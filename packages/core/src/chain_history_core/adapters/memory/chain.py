"""InMemoryChainInfo — fixed chain head for tests and offline use."""

from __future__ import annotations

from ...ports.chain import IChainInfo


class InMemoryChainInfo(IChainInfo):
    def __init__(self, last_irreversible_block: int = 0) -> None:
        self.last_irreversible_block = last_irreversible_block
        self.calls = 0

    async def get_last_irreversible_block(self) -> int:
        self.calls += 1
        return self.last_irreversible_block
