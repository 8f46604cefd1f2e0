"""Repository interfaces (abstract)."""

from token_top_traders.persistence.repositories.interfaces.top_traders_cache import (
    ITopTradersCache,
)

__all__ = ["ITopTradersCache"]
