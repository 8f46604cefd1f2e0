"""HTTP and API clients."""

from token_top_traders.clients.birdeye import BirdeyeClient
from token_top_traders.clients.dexpaprika import DexPaprikaClient
from token_top_traders.clients.dexscreener import DexScreenerClient, PairStats
from token_top_traders.clients.geckoterminal import GeckoTerminalClient
from token_top_traders.clients.http import AsyncHttpClient
from token_top_traders.clients.solana_rpc import SolanaRpcClient, TokenHolder
from token_top_traders.clients.solana_tracker import SolanaTrackerClient

__all__ = [
    "AsyncHttpClient",
    "BirdeyeClient",
    "DexPaprikaClient",
    "DexScreenerClient",
    "GeckoTerminalClient",
    "PairStats",
    "SolanaRpcClient",
    "SolanaTrackerClient",
    "TokenHolder",
]
