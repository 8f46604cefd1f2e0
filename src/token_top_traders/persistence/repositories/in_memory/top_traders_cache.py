# -*- coding: utf-8 -*-
"""In-memory top-traders cache (cachetools TTLCache plus an in-flight task map)."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

import structlog
from cachetools import TTLCache

from token_top_traders.models.cache_entry import CacheEntry, CacheLookup, CacheStats, CacheStatus
from token_top_traders.models.result import TopTradersResult
from token_top_traders.persistence.repositories.interfaces.top_traders_cache import ITopTradersCache


class InMemoryTopTradersCache(ITopTradersCache):
    """In-memory implementation of ITopTradersCache.

    Entries expire ttl_seconds after they are stored and are evicted lazily on
    the next access. Only results with at least one trader are stored, so an
    exhausted lookup is retried on the next call.

    Single event loop only: the lookup and the in-flight registration happen
    with no await in between, which is what makes coalescing race-free.
    """

    def __init__(
        self,
        ttl_seconds: float,
        maxsize: int = 1024,
        *,
        timer: Callable[[], float] = time.monotonic,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            ttl_seconds: Lifetime of a stored result.
            maxsize: Maximum number of keys kept (oldest evicted first when full).
            timer: Clock used for expiry and entry age (injectable for tests).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._timer = timer
        self._entries: TTLCache[str, CacheEntry] = TTLCache(
            maxsize=max(1, maxsize), ttl=ttl_seconds, timer=timer
        )
        self._in_flight: dict[str, asyncio.Task[TopTradersResult]] = {}
        self._hits = 0
        self._misses = 0
        self._coalesced = 0
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Awaitable[TopTradersResult]],
    ) -> CacheLookup:
        entry = self._entries.get(key)
        if entry is not None:
            self._hits += 1
            return CacheLookup(entry.result, CacheStatus.HIT, self._timer() - entry.stored_at)

        task = self._in_flight.get(key)
        if task is not None:
            self._coalesced += 1
            self._logger.debug("top_traders_cache_coalesced", cache_key=key)
            return CacheLookup(await asyncio.shield(task), CacheStatus.COALESCED)

        self._misses += 1
        task = asyncio.ensure_future(compute())
        self._in_flight[key] = task
        # Registered before any waiter so the entry is stored before they resume.
        task.add_done_callback(partial(self._on_done, key))
        return CacheLookup(await asyncio.shield(task), CacheStatus.MISS)

    def _on_done(self, key: str, task: asyncio.Task[TopTradersResult]) -> None:
        self._in_flight.pop(key, None)
        if task.cancelled() or task.exception() is not None:
            return
        result = task.result()
        if not result.traders:
            self._logger.debug("top_traders_cache_skip_empty", cache_key=key)
            return
        self._entries[key] = CacheEntry(key=key, result=result, stored_at=self._timer())

    def stats(self) -> CacheStats:
        # TTLCache only drops expired items on access; expire() makes size exact.
        self._entries.expire()
        return CacheStats(
            size=len(self._entries),
            in_flight=len(self._in_flight),
            hits=self._hits,
            misses=self._misses,
            coalesced=self._coalesced,
        )

    def clear(self) -> None:
        self._entries.clear()
