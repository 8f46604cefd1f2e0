"""GeckoTerminal client."""

from token_top_traders.clients.geckoterminal.geckoterminal import (
    GeckoTerminalClient,
    is_base_token,
    pool_liquidity,
    pool_volume_24h,
    token_id_address,
)
from token_top_traders.clients.geckoterminal.schema import GeckoPoolSchema, GeckoTradeSchema

__all__ = [
    "GeckoPoolSchema",
    "GeckoTerminalClient",
    "GeckoTradeSchema",
    "is_base_token",
    "pool_liquidity",
    "pool_volume_24h",
    "token_id_address",
]
