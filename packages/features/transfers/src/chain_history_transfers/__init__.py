"""Token transfer history lookup — settings, projection and the query handler."""

from __future__ import annotations

from .config import TransferHistorySettings
from .handler import GetTransfersHandler
from .metadata import ActionMetaMerger, IActionMetaMerger, deep_merge
from .models import SimpleAction, TransfersResponse
from .pipeline import wrap_handler
from .projector import ResultProjector, format_actors
from .query import GetTransfers
from .service import TransferHistoryService

__all__ = [
    "ActionMetaMerger",
    "GetTransfers",
    "GetTransfersHandler",
    "IActionMetaMerger",
    "ResultProjector",
    "SimpleAction",
    "TransferHistoryService",
    "TransfersResponse",
    "deep_merge",
    "format_actors",
    "wrap_handler",
]
