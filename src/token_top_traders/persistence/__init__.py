"""Persistence layer (repositories, etc.)."""

from token_top_traders.persistence.repositories import (
    InMemoryTopTradersCache,
    ITopTradersCache,
)

__all__ = [
    "ITopTradersCache",
    "InMemoryTopTradersCache",
]
