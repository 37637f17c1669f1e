"""Query base class — immutable request for data."""

from __future__ import annotations

import uuid
from typing import Generic

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeVar

from ..correlation import get_correlation_id

TResult = TypeVar("TResult", default=None)


class Query(BaseModel, Generic[TResult]):
    """Base class for all Queries.

    Queries represent a request for data and **must** be immutable.
    Each query carries tracing metadata for correlation.

    The ``correlation_id`` is automatically inherited from the current context
    (see :func:`~chain_history_core.correlation.get_correlation_id`). If no
    correlation ID is active in the context, it defaults to ``None`` and the
    :class:`~chain_history_core.correlation.CorrelationIdPropagator` will
    generate one at dispatch time.
    """

    model_config = ConfigDict(frozen=True)

    query_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    correlation_id: str | None = Field(default_factory=get_correlation_id)
