"""GetTransfers — the transfer history lookup request."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ConfigDict, Field

from chain_history_core.cqrs.query import Query

from .models import TransfersResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

_FLAG_ALIASES = ("simple", "checkLib", "noBinary")


class GetTransfers(Query[TransfersResponse]):
    """Raw filter params plus the projection flags.

    Flags accept the lax boolean forms (``true``/``1``/``yes``/``on`` and
    their negatives); anything else fails model validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    params: dict[str, Any] = Field(default_factory=dict)
    simple: bool = True
    check_lib: bool = Field(default=False, alias="checkLib")
    no_binary: bool = Field(default=False, alias="noBinary")

    @classmethod
    def from_params(cls, params: Mapping[str, Any], **kwargs: Any) -> GetTransfers:
        """Build from one flat param mapping; flags are read from it too."""
        flags = {
            k: params[k] for k in _FLAG_ALIASES if params.get(k) not in (None, "")
        }
        return cls(params=dict(params), **flags, **kwargs)
