# -*- coding: utf-8 -*-
"""Solana Tracker data API client (pre-aggregated top traders)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, List, Optional, TypedDict, cast

from token_top_traders.config import Settings
from token_top_traders.exceptions import MissingRequiredConfigError
from token_top_traders.utils.validation import mask_address

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient


class SolanaTrackerTraderSchema(TypedDict, total=False):
    """GET /top-traders/{token} item. Amounts in tokens, P&L in USD."""

    wallet: str
    held: float
    sold: float
    holding: float
    realized: float
    unrealized: float
    total: float
    total_invested: float


class SolanaTrackerClient:
    """Client for Solana Tracker /top-traders. Requires an API key."""

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
        return self._settings.api.solana_tracker_host.rstrip("/")

    async def get_top_traders(self, token_address: str) -> List[SolanaTrackerTraderSchema]:
        """Pre-aggregated trader P&L for a token.

        Raises:
            MissingRequiredConfigError: If no Solana Tracker API key is configured.
            UpstreamAPIError: If the request fails.
        """
        api_key = self._settings.providers.solana_tracker_api_key
        if not api_key:
            raise MissingRequiredConfigError("PROVIDERS__SOLANA_TRACKER_API_KEY")
        url = f"{self._base_url()}/top-traders/{token_address}"
        data = await self._http.get(url, headers={"x-api-key": api_key, "Accept": "application/json"})
        if not isinstance(data, list):
            self._logger.warning(
                "solana_tracker_top_traders_non_list",
                token_masked=mask_address(token_address),
                solana_tracker_response_type=type(data).__name__,
            )
            return []
        return [cast(SolanaTrackerTraderSchema, x) for x in cast(List[Any], data) if isinstance(x, dict)]
