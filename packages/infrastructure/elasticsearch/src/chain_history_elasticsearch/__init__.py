"""Elasticsearch adapter for the action search port."""

from __future__ import annotations

from .search import ElasticsearchActionSearch

__all__ = ["ElasticsearchActionSearch"]
