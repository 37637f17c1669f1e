"""Filtering package exceptions.

Each invalid parameter has its own variant so callers can branch on the
type; ``str(error)`` is the message surfaced to the caller.
"""

from __future__ import annotations

from chain_history_core.primitives.exceptions import ValidationError


class InvalidParameterError(ValidationError):
    """Raised when a single query parameter is invalid."""

    parameter: str = "__root__"
    message: str = "invalid parameter"

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__({self.parameter: [self.message]})

    def __str__(self) -> str:
        return self.message


class InvalidSkipError(InvalidParameterError):
    """Raised when ``skip`` is negative."""

    parameter = "skip"
    message = "invalid skip parameter"


class InvalidLimitError(InvalidParameterError):
    """Raised when ``limit`` is lower than one."""

    parameter = "limit"
    message = "invalid limit parameter"


class InvalidSortDirectionError(InvalidParameterError):
    """Raised when ``sort`` is not one of asc, desc, 1, -1."""

    parameter = "sort"
    message = "invalid sort direction"


class InvalidTrackError(InvalidParameterError):
    """Raised when ``track`` is neither boolean-like nor a positive integer."""

    parameter = "track"
    message = "failed to parse track param"
