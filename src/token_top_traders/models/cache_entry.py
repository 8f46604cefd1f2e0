# -*- coding: utf-8 -*-
"""Cache entry and lookup outcome for the top-traders cache."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from token_top_traders.models.result import TopTradersResult


class CacheStatus(StrEnum):
    HIT = "hit"
    MISS = "miss"
    """This caller ran the computation."""
    COALESCED = "coalesced"
    """Joined a computation already in flight for the same key."""


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Stored result for one chain:token key. stored_at is on the cache's own timer."""

    key: str
    result: TopTradersResult
    stored_at: float


@dataclass(frozen=True, slots=True)
class CacheLookup:
    result: TopTradersResult
    status: CacheStatus
    age_seconds: float = 0.0


@dataclass(frozen=True, slots=True)
class CacheStats:
    size: int
    in_flight: int
    hits: int
    misses: int
    coalesced: int
