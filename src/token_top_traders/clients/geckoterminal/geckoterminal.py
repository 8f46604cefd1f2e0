# -*- coding: utf-8 -*-
"""GeckoTerminal public API client (pools, pool trades)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple, cast
from cachetools import TTLCache
from structlog.contextvars import bound_contextvars

from token_top_traders.clients.geckoterminal.schema import GeckoPoolSchema, GeckoTradeSchema
from token_top_traders.config import Settings
from token_top_traders.utils.validation import mask_address, same_address, to_float

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient

_HEADERS = {"Accept": "application/json;version=20230302"}


def pool_liquidity(pool: GeckoPoolSchema) -> float:
    return to_float(pool.get("attributes", {}).get("reserve_in_usd")) or 0.0


def pool_volume_24h(pool: GeckoPoolSchema) -> float:
    volume = pool.get("attributes", {}).get("volume_usd") or {}
    return to_float(volume.get("h24")) or 0.0


def token_id_address(token_id: str | None) -> str | None:
    """Strip the network prefix from a relationship id ("solana_<mint>" -> "<mint>")."""
    if not token_id:
        return None
    # Network slugs may contain "_" (polygon_pos); addresses never do.
    _, sep, address = token_id.rpartition("_")
    return address if sep else token_id


def is_base_token(pool: GeckoPoolSchema, token_address: str) -> bool | None:
    """True if token is the pool's base token, False if quote, None if neither/unknown."""
    rel = pool.get("relationships", {})
    base = token_id_address(rel.get("base_token", {}).get("data", {}).get("id"))
    quote = token_id_address(rel.get("quote_token", {}).get("data", {}).get("id"))
    if same_address(base, token_address):
        return True
    if same_address(quote, token_address):
        return False
    return None


class GeckoTerminalClient:
    """Client for GeckoTerminal /networks/... endpoints."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        pools_ttl_seconds: float = 30.0,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            settings: Application settings (uses api.geckoterminal_host).
            pools_ttl_seconds: How long a token's pool list is reused, so the price
                lookup and the pool trade source share one request.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._pools: TTLCache[Tuple[str, str], List[GeckoPoolSchema]] = TTLCache(
            maxsize=256, ttl=pools_ttl_seconds
        )
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.geckoterminal_host.rstrip("/")

    async def get_token_pools(self, network: str, token_address: str) -> List[GeckoPoolSchema]:
        """List pools trading a token on a network (top pools first, as returned by the API).

        Non-empty lists are reused for pools_ttl_seconds.
        """
        key = (network, token_address.lower())
        cached = self._pools.get(key)
        if cached is not None:
            self._logger.debug("geckoterminal_pools_cache_hit", geckoterminal_network=network)
            return cached
        url = f"{self._base_url()}/networks/{network}/tokens/{token_address}/pools"
        data = await self._http.get(url, headers=_HEADERS)
        pools = cast(List[GeckoPoolSchema], self._data_list(data, "geckoterminal_pools_non_list"))
        if pools:
            self._pools[key] = pools
        return pools

    async def get_best_pool(
        self,
        network: str,
        token_address: str,
        *,
        min_liquidity_usd: float = 0.0,
    ) -> Optional[GeckoPoolSchema]:
        """Highest-liquidity pool for a token, ties (within $1k) broken by 24h volume.

        Returns None when no pool meets min_liquidity_usd.
        """
        with bound_contextvars(
            geckoterminal_network=network,
            geckoterminal_token_masked=mask_address(token_address),
        ):
            pools = await self.get_token_pools(network, token_address)
            eligible = [p for p in pools if pool_liquidity(p) >= min_liquidity_usd]
            if not eligible:
                self._logger.info(
                    "geckoterminal_no_eligible_pool",
                    geckoterminal_pools_count=len(pools),
                    geckoterminal_min_liquidity_usd=min_liquidity_usd,
                )
                return None
            # Liquidity buckets of $1k so near-equal pools fall back to volume.
            best = max(
                eligible,
                key=lambda p: (round(pool_liquidity(p) / 1_000.0), pool_volume_24h(p)),
            )
            self._logger.debug(
                "geckoterminal_best_pool",
                geckoterminal_pool=best.get("attributes", {}).get("address"),
                geckoterminal_liquidity_usd=pool_liquidity(best),
            )
            return best

    async def get_pool_trades(
        self,
        network: str,
        pool_address: str,
        *,
        limit: int = 200,
    ) -> List[GeckoTradeSchema]:
        """Most recent trades for a pool (API returns at most 300, newest first), truncated to limit."""
        url = f"{self._base_url()}/networks/{network}/pools/{pool_address}/trades"
        data = await self._http.get(url, headers=_HEADERS)
        trades = cast(List[GeckoTradeSchema], self._data_list(data, "geckoterminal_trades_non_list"))
        return trades[: max(0, limit)]

    def _data_list(self, data: Any, warn_event: str) -> List[Dict[str, Any]]:
        body = cast(Dict[str, Any], data) if isinstance(data, dict) else {}
        arr = body.get("data")
        if not isinstance(arr, list):
            self._logger.warning(warn_event, geckoterminal_response_type=type(data).__name__)
            return []
        return [cast(Dict[str, Any], x) for x in cast(List[Any], arr) if isinstance(x, dict)]
