"""Birdeye client."""

from token_top_traders.clients.birdeye.birdeye import BirdeyeClient
from token_top_traders.clients.birdeye.schema import (
    BirdeyeTokenLegSchema,
    BirdeyeTradeSchema,
    BirdeyeTradesPageSchema,
)

__all__ = [
    "BirdeyeClient",
    "BirdeyeTokenLegSchema",
    "BirdeyeTradeSchema",
    "BirdeyeTradesPageSchema",
]
