"""ChainRpcClient — ``/v1/chain/get_info`` over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chain_history_core.ports.chain import IChainInfo
from chain_history_core.primitives.exceptions import ChainRpcError

logger = logging.getLogger("chain_history.rpc")

GET_INFO_PATH = "/v1/chain/get_info"


class ChainRpcClient(IChainInfo):
    """Reads chain head information from a node's HTTP API."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8888",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self.client = client

    async def connect(self) -> httpx.AsyncClient:
        if self.client is None:
            self.client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self.client

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    async def get_info(self) -> dict[str, Any]:
        client = await self.connect()
        try:
            resp = await client.post(GET_INFO_PATH)
            resp.raise_for_status()
            return resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("get_info failed: %s", e)
            raise ChainRpcError(f"get_info failed: {e}") from e

    async def get_last_irreversible_block(self) -> int:
        info = await self.get_info()
        try:
            return int(info["last_irreversible_block_num"])
        except (KeyError, TypeError, ValueError) as e:
            raise ChainRpcError("get_info response has no last_irreversible_block_num") from e
