# -*- coding: utf-8 -*-
"""DexPaprika public API client (token price summary)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, TypedDict, cast

from token_top_traders.config import Settings
from token_top_traders.utils.validation import positive_float

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient


class DexPaprikaSummarySchema(TypedDict, total=False):
    price_usd: float
    fdv: float
    liquidity_usd: float


class DexPaprikaTokenSchema(TypedDict, total=False):
    """GET /networks/{network}/tokens/{token}."""

    id: str
    name: str
    symbol: str
    chain: str
    decimals: int
    last_updated: str
    summary: DexPaprikaSummarySchema


class DexPaprikaClient:
    """Client for DexPaprika token lookups."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _base_url(self) -> str:
        return self._settings.api.dexpaprika_host.rstrip("/")

    async def get_token(self, network: str, token_address: str) -> DexPaprikaTokenSchema:
        url = f"{self._base_url()}/networks/{network}/tokens/{token_address}"
        data = await self._http.get(url)
        if not isinstance(data, dict):
            return {}
        return cast(DexPaprikaTokenSchema, cast(Dict[str, Any], data))

    async def get_price_usd(self, network: str, token_address: str) -> Optional[float]:
        """Current USD price from the token summary, or None when absent/non-positive."""
        token = await self.get_token(network, token_address)
        return positive_float(token.get("summary", {}).get("price_usd"))
