# -*- coding: utf-8 -*-
"""Current USD price of a token from a short cascade of sources."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from token_top_traders.clients.geckoterminal import is_base_token
from token_top_traders.models.result import Attempt
from token_top_traders.utils.validation import mask_address, positive_float

if TYPE_CHECKING:
    from token_top_traders.clients.dexpaprika import DexPaprikaClient
    from token_top_traders.clients.dexscreener import DexScreenerClient
    from token_top_traders.clients.geckoterminal import GeckoTerminalClient
    from token_top_traders.config import ChainInfo, Settings


@dataclass(frozen=True)
class PriceResolution:
    """Resolved price (0.0 = unavailable), which lookup produced it, and every lookup tried."""

    price_usd: float
    source: str | None
    attempts: tuple[Attempt, ...]


class PriceResolver:
    """Tries pool price, then token-aggregate prices; first positive value wins.

    Never raises: every failed lookup is recorded as an Attempt and the
    resolver falls through to the next one, ending at 0.0.
    """

    def __init__(
        self,
        geckoterminal: GeckoTerminalClient,
        dexpaprika: DexPaprikaClient,
        dexscreener: DexScreenerClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._geckoterminal = geckoterminal
        self._dexpaprika = dexpaprika
        self._dexscreener = dexscreener
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def resolve(self, chain: ChainInfo, token_address: str) -> PriceResolution:
        lookups: list[tuple[str, Callable[[], Awaitable[float | None]]]] = [
            ("geckoterminal-pool", lambda: self._pool_price(chain, token_address)),
            ("dexpaprika-token", lambda: self._dexpaprika.get_price_usd(chain.dexpaprika_network, token_address)),
            ("dexscreener-pair", lambda: self._pair_price(chain, token_address)),
        ]
        timeout = self._settings.traders.adapter_timeout_seconds
        attempts: list[Attempt] = []
        for name, lookup in lookups:
            try:
                price = await asyncio.wait_for(lookup(), timeout=timeout)
            except TimeoutError:
                attempts.append(Attempt("price_lookup", {"source": name, "ok": False, "reason": "timeout"}))
                continue
            except Exception as e:
                self._logger.info(
                    "price_lookup_failed",
                    price_source=name,
                    token_masked=mask_address(token_address),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                attempts.append(
                    Attempt("price_lookup", {"source": name, "ok": False, "reason": "upstream_error", "error": str(e)})
                )
                continue
            if price is not None and price > 0:
                attempts.append(Attempt("price_lookup", {"source": name, "ok": True, "priceUsd": price}))
                return PriceResolution(price_usd=price, source=name, attempts=tuple(attempts))
            attempts.append(Attempt("price_lookup", {"source": name, "ok": False, "reason": "no_data"}))

        self._logger.warning(
            "price_unavailable",
            chain=chain.chain_id,
            token_masked=mask_address(token_address),
        )
        attempts.append(Attempt("price_unavailable", {"priceUsd": 0.0}))
        return PriceResolution(price_usd=0.0, source=None, attempts=tuple(attempts))

    async def _pool_price(self, chain: ChainInfo, token_address: str) -> float | None:
        pool = await self._geckoterminal.get_best_pool(
            chain.geckoterminal_network,
            token_address,
            min_liquidity_usd=self._settings.traders.pool_min_liquidity_usd,
        )
        if pool is None:
            return None
        attrs = pool.get("attributes", {})
        side = is_base_token(pool, token_address)
        if side is False:
            return positive_float(attrs.get("quote_token_price_usd"))
        # Unknown side: GeckoTerminal lists a token's pools with the token as base by default.
        return positive_float(attrs.get("base_token_price_usd"))

    async def _pair_price(self, chain: ChainInfo, token_address: str) -> float | None:
        stats = await self._dexscreener.get_top_pair_stats(chain.dexscreener_chain, token_address)
        return stats.price_usd if stats is not None else None
