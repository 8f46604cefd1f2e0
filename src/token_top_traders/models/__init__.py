# -*- coding: utf-8 -*-
"""Domain models."""

from token_top_traders.models.cache_entry import CacheEntry, CacheLookup, CacheStats, CacheStatus
from token_top_traders.models.result import (
    DISCLAIMERS,
    Attempt,
    ConfidenceTier,
    TopTradersMeta,
    TopTradersResult,
)
from token_top_traders.models.trade_event import TradeEvent, TradeSide
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.models.wallet_ledger import Lot, WalletLedger

__all__ = [
    "Attempt",
    "CacheEntry",
    "CacheLookup",
    "CacheStats",
    "CacheStatus",
    "ConfidenceTier",
    "DISCLAIMERS",
    "Lot",
    "TopTradersMeta",
    "TopTradersResult",
    "TradeEvent",
    "TradeSide",
    "TraderRankEntry",
    "WalletLedger",
]
