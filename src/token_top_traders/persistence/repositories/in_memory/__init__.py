"""In-memory repository implementations."""

from token_top_traders.persistence.repositories.in_memory.top_traders_cache import (
    InMemoryTopTradersCache,
)

__all__ = ["InMemoryTopTradersCache"]
