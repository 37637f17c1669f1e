"""Validation and infrastructure exceptions for chain-history-core."""

from __future__ import annotations


class ChainHistoryError(Exception):
    """Root exception for the entire chain-history toolkit."""


class ValidationError(ChainHistoryError):
    """Raised when request parameters fail validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class InfrastructureError(ChainHistoryError):
    """Base class for all infrastructure-related errors."""


class SearchBackendError(InfrastructureError):
    """Raised when the document search backend fails to answer a query."""


class ChainRpcError(InfrastructureError):
    """Raised when the blockchain RPC endpoint cannot be queried."""
