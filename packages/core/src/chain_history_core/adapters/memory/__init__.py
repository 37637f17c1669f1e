from .chain import InMemoryChainInfo
from .search import InMemoryActionSearch, SearchCall

__all__ = [
    "InMemoryActionSearch",
    "InMemoryChainInfo",
    "SearchCall",
]
