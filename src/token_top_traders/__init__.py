"""Token top traders: FIFO P&L ranking of a token's traders from multiple market-data sources."""

from token_top_traders.clients import (
    AsyncHttpClient,
    BirdeyeClient,
    DexScreenerClient,
    GeckoTerminalClient,
)
from token_top_traders.config import get_settings
from token_top_traders.DI import Container
from token_top_traders.services import TopTradersService

__version__ = "0.1.0"
__all__ = [
    "AsyncHttpClient",
    "BirdeyeClient",
    "DexScreenerClient",
    "GeckoTerminalClient",
    "Container",
    "TopTradersService",
    "get_settings",
]
