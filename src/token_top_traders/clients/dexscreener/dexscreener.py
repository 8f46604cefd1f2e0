# -*- coding: utf-8 -*-
"""DexScreener public API client (pair aggregates)."""

from __future__ import annotations

import structlog
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, cast

from token_top_traders.clients.dexscreener.schema import DexPairSchema
from token_top_traders.config import Settings
from token_top_traders.utils.validation import mask_address, positive_float, same_address, to_float

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient


@dataclass(frozen=True)
class PairStats:
    """24h aggregate activity of a token's most liquid pair."""

    pair_address: str
    volume_24h_usd: float
    buys_24h: int
    sells_24h: int
    liquidity_usd: float
    price_usd: float | None
    """USD price of the requested token, or None when the pair does not quote it directly."""


def _parse_pair_stats(pair: DexPairSchema, token_address: str) -> PairStats:
    h24 = pair.get("txns", {}).get("h24", {})
    price = positive_float(pair.get("priceUsd"))
    if not same_address(pair.get("baseToken", {}).get("address"), token_address):
        # priceUsd is always the base token's price.
        price = None
    return PairStats(
        pair_address=str(pair.get("pairAddress") or ""),
        volume_24h_usd=to_float(pair.get("volume", {}).get("h24")) or 0.0,
        buys_24h=int(to_float(h24.get("buys")) or 0),
        sells_24h=int(to_float(h24.get("sells")) or 0),
        liquidity_usd=to_float(pair.get("liquidity", {}).get("usd")) or 0.0,
        price_usd=price,
    )


class DexScreenerClient:
    """Client for DexScreener /latest/dex/tokens."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses api.dexscreener_host).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.dexscreener_host.rstrip("/")

    async def get_token_pairs(self, token_address: str) -> List[DexPairSchema]:
        """All pairs for a token across chains."""
        url = f"{self._base_url()}/latest/dex/tokens/{token_address}"
        data = await self._http.get(url)
        body = cast(Dict[str, Any], data) if isinstance(data, dict) else {}
        pairs = body.get("pairs")
        if not isinstance(pairs, list):
            self._logger.debug(
                "dexscreener_no_pairs",
                dexscreener_token_masked=mask_address(token_address),
            )
            return []
        return [cast(DexPairSchema, p) for p in cast(List[Any], pairs) if isinstance(p, dict)]

    async def get_top_pair_stats(self, chain: str, token_address: str) -> Optional[PairStats]:
        """Aggregates for the most liquid pair of a token on one chain, or None if it has none."""
        pairs = [
            p for p in await self.get_token_pairs(token_address)
            if str(p.get("chainId", "")).lower() == chain.lower()
        ]
        if not pairs:
            return None
        best = max(pairs, key=lambda p: to_float(p.get("liquidity", {}).get("usd")) or 0.0)
        stats = _parse_pair_stats(best, token_address)
        self._logger.debug(
            "dexscreener_top_pair",
            dexscreener_pair=stats.pair_address,
            dexscreener_volume_24h_usd=stats.volume_24h_usd,
            dexscreener_liquidity_usd=stats.liquidity_usd,
        )
        return stats
