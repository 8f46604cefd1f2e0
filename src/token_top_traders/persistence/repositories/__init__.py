"""Repository interfaces and implementations."""

from token_top_traders.persistence.repositories.in_memory import InMemoryTopTradersCache
from token_top_traders.persistence.repositories.interfaces import ITopTradersCache

__all__ = [
    "ITopTradersCache",
    "InMemoryTopTradersCache",
]
