"""Range syntax: ``lo-hi`` on any filterable field."""

from __future__ import annotations

from .clauses import Range

RANGE_SEPARATOR = "-"


def is_range(value: str) -> bool:
    """A value is a range as soon as it contains a hyphen."""
    return RANGE_SEPARATOR in value


def parse_range(field: str, value: str) -> Range:
    """Split *value* on hyphens and keep the first two parts as bounds.

    Bounds are not checked as numbers or dates. Extra hyphens shift the
    split: ``"-5-10"`` gives lower ``""`` and upper ``"5"``, and ``"5-"``
    gives upper ``""``.
    """
    parts = value.split(RANGE_SEPARATOR)
    return Range(field, parts[0], parts[1])
