"""Action metadata merging.

Indexed actions of extended groups keep their decoded payload under
``@<action name>``; merging folds it back into ``act.data``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IActionMetaMerger(Protocol):
    """Enriches an action record in place."""

    def merge(self, action: dict[str, Any]) -> None: ...


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into a copy of *base*; *override* wins."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ActionMetaMerger:
    """Default merger: ``@<name>`` into ``act.data``, ``@timestamp`` to ``timestamp``."""

    def __init__(self, *, keep_source: bool = False) -> None:
        self._keep_source = keep_source

    def merge(self, action: dict[str, Any]) -> None:
        act = action.get("act") or {}
        meta_key = f"@{act.get('name')}"
        meta = action.get(meta_key)
        if isinstance(meta, dict):
            act["data"] = deep_merge(meta, act.get("data") or {})
            if not self._keep_source:
                del action[meta_key]
        if "@timestamp" in action:
            action["timestamp"] = action["@timestamp"]
