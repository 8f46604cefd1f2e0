"""DexScreener response types (keys match API response, camelCase)."""

from __future__ import annotations

from typing import TypedDict


class DexTokenRefSchema(TypedDict, total=False):
    address: str
    name: str
    symbol: str


class DexTxnCountSchema(TypedDict, total=False):
    buys: int
    sells: int


class DexTxnsSchema(TypedDict, total=False):
    m5: DexTxnCountSchema
    h1: DexTxnCountSchema
    h6: DexTxnCountSchema
    h24: DexTxnCountSchema


class DexWindowSchema(TypedDict, total=False):
    m5: float
    h1: float
    h6: float
    h24: float


class DexLiquiditySchema(TypedDict, total=False):
    usd: float
    base: float
    quote: float


class DexPairSchema(TypedDict, total=False):
    """GET /latest/dex/tokens/{address} pairs[] item."""

    chainId: str
    dexId: str
    url: str
    pairAddress: str
    baseToken: DexTokenRefSchema
    quoteToken: DexTokenRefSchema
    priceNative: str
    priceUsd: str
    txns: DexTxnsSchema
    volume: DexWindowSchema
    priceChange: DexWindowSchema
    liquidity: DexLiquiditySchema
    fdv: float
    marketCap: float
    pairCreatedAt: int
