"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    ChainHistoryError,
    ChainRpcError,
    InfrastructureError,
    SearchBackendError,
    ValidationError,
)

__all__ = [
    "ChainHistoryError",
    "ChainRpcError",
    "InfrastructureError",
    "SearchBackendError",
    "ValidationError",
]
