# -*- coding: utf-8 -*-
"""Trader sources, tried by the orchestrator in priority order."""

from token_top_traders.services.sources.base import TradeLedgerSource, TraderSource
from token_top_traders.services.sources.birdeye_source import BirdeyeTradeSource, parse_birdeye_trade
from token_top_traders.services.sources.demo_source import DemoSource, demo_traders
from token_top_traders.services.sources.dexscreener_estimated_source import (
    DexScreenerEstimatedSource,
    estimate_traders,
)
from token_top_traders.services.sources.geckoterminal_source import (
    GeckoTerminalTradeSource,
    parse_gecko_trade,
)
from token_top_traders.services.sources.solana_tracker_source import (
    SolanaTrackerSource,
    parse_solana_tracker_trader,
)

__all__ = [
    "BirdeyeTradeSource",
    "DemoSource",
    "DexScreenerEstimatedSource",
    "GeckoTerminalTradeSource",
    "SolanaTrackerSource",
    "TradeLedgerSource",
    "TraderSource",
    "demo_traders",
    "estimate_traders",
    "parse_birdeye_trade",
    "parse_gecko_trade",
    "parse_solana_tracker_trader",
]
