"""Chain RPC client used for finality checks."""

from __future__ import annotations

from .client import ChainRpcClient

__all__ = ["ChainRpcClient"]
