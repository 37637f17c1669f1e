"""chain-history-core — Foundation package for the chain history lookup toolkit.

Zero infrastructure dependencies. Pydantic for query messages.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryActionSearch, InMemoryChainInfo
from .correlation import (
    CorrelationIdPropagator,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

# ── CQRS ─────────────────────────────────────────────────────────
from .cqrs import Query, QueryHandler, QueryResponse

# ── Middleware ───────────────────────────────────────────────────
from .middleware import LoggingMiddleware

# ── Ports ────────────────────────────────────────────────────────
from .ports import IActionSearch, IChainInfo, IMiddleware

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    ChainHistoryError,
    ChainRpcError,
    InfrastructureError,
    SearchBackendError,
    ValidationError,
)

__all__ = [
    # Adapters
    "InMemoryActionSearch",
    "InMemoryChainInfo",
    # Correlation
    "CorrelationIdPropagator",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    # CQRS
    "Query",
    "QueryHandler",
    "QueryResponse",
    # Middleware
    "LoggingMiddleware",
    # Ports
    "IActionSearch",
    "IChainInfo",
    "IMiddleware",
    # Primitives
    "ChainHistoryError",
    "ChainRpcError",
    "InfrastructureError",
    "SearchBackendError",
    "ValidationError",
]
