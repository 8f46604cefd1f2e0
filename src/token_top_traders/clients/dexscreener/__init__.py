"""DexScreener client."""

from token_top_traders.clients.dexscreener.dexscreener import DexScreenerClient, PairStats
from token_top_traders.clients.dexscreener.schema import DexPairSchema

__all__ = ["DexPairSchema", "DexScreenerClient", "PairStats"]
