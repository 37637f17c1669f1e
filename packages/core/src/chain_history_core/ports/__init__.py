from .chain import IChainInfo
from .middleware import IMiddleware
from .search import IActionSearch

__all__ = [
    "IActionSearch",
    "IChainInfo",
    "IMiddleware",
]
