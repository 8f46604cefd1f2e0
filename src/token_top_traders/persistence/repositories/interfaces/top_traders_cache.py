"""Abstract interface for the top-traders result cache (in-memory, shared store, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from token_top_traders.models.cache_entry import CacheLookup, CacheStats
from token_top_traders.models.result import TopTradersResult


class ITopTradersCache(ABC):
    """TTL cache of TopTradersResult by chain:token key, with request coalescing."""

    @abstractmethod
    async def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Awaitable[TopTradersResult]],
    ) -> CacheLookup:
        """Return the cached result for key, join the computation in flight, or start one.

        At most one compute runs per key at a time. Exceptions from compute
        propagate to every caller waiting on it and nothing is stored.
        """
        ...

    @abstractmethod
    def stats(self) -> CacheStats:
        """Current size, in-flight count and hit/miss/coalesced counters."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every stored entry. Computations in flight are left running."""
        ...
