"""Birdeye response types (keys match API response, camelCase)."""

from __future__ import annotations

from typing import TypedDict


class BirdeyeTokenLegSchema(TypedDict, total=False):
    """One side ("from" or "to") of a Birdeye swap record."""

    address: str
    symbol: str
    decimals: int
    amount: str
    uiAmount: float
    price: float | None
    nearestPrice: float | None
    type: str


# Functional form: "from" is a Python keyword.
BirdeyeTradeSchema = TypedDict(
    "BirdeyeTradeSchema",
    {
        "txHash": str,
        "source": str,
        "blockUnixTime": int,
        "txType": str,
        "owner": str,
        "side": str,
        "volumeUSD": float,
        "poolId": str,
        "from": BirdeyeTokenLegSchema,
        "to": BirdeyeTokenLegSchema,
    },
    total=False,
)
"""GET /defi/txs/token item (swap)."""


class BirdeyeTradesPageSchema(TypedDict, total=False):
    items: list[BirdeyeTradeSchema]
    hasNext: bool
