# -*- coding: utf-8 -*-
"""Birdeye public API client (token trade history)."""

from __future__ import annotations

import structlog
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, cast
from structlog.contextvars import bound_contextvars

from token_top_traders.clients.birdeye.schema import BirdeyeTradeSchema
from token_top_traders.config import Settings
from token_top_traders.exceptions import MissingRequiredConfigError
from token_top_traders.utils.validation import mask_address

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient

# Birdeye caps /defi/txs/token at 50 items per page.
PAGE_SIZE = 50


class BirdeyeClient:
    """Client for Birdeye /defi/txs/token (recent swaps for a token). Requires an API key."""

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
            settings: Application settings (uses api.birdeye_host and providers.birdeye_api_key).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def has_api_key(self) -> bool:
        return bool(self._settings.providers.birdeye_api_key)

    def _base_url(self) -> str:
        return self._settings.api.birdeye_host.rstrip("/")

    def _headers(self, chain: str) -> Dict[str, str]:
        api_key = self._settings.providers.birdeye_api_key
        if not api_key:
            raise MissingRequiredConfigError("PROVIDERS__BIRDEYE_API_KEY")
        return {"Accept": "application/json", "X-API-KEY": api_key, "x-chain": chain}

    async def get_token_trades(
        self,
        token_address: str,
        *,
        chain: str = "solana",
        limit: int = 300,
    ) -> List[BirdeyeTradeSchema]:
        """Fetch up to `limit` most recent swaps touching a token, newest first.

        Pages through the endpoint PAGE_SIZE at a time and stops early when
        the API reports no further pages.

        Raises:
            MissingRequiredConfigError: If no Birdeye API key is configured.
            UpstreamAPIError: If a page request fails.
        """
        headers = self._headers(chain)
        url = f"{self._base_url()}/defi/txs/token"
        out: List[BirdeyeTradeSchema] = []
        offset = 0
        with bound_contextvars(
            birdeye_token_masked=mask_address(token_address),
            birdeye_chain=chain,
            birdeye_limit=limit,
        ):
            while offset < limit:
                page_size = min(PAGE_SIZE, limit - offset)
                params: Dict[str, Any] = {
                    "address": token_address,
                    "offset": offset,
                    "limit": page_size,
                    "tx_type": "swap",
                    "sort_type": "desc",
                }
                data = await self._http.get(url, params=params, headers=headers)
                items, has_next = self._parse_page(data)
                out.extend(items)
                self._logger.debug(
                    "birdeye_trades_page_fetched",
                    birdeye_offset=offset,
                    birdeye_page_items=len(items),
                )
                if not has_next or len(items) < page_size:
                    break
                offset += page_size
        return out[:limit]

    def _parse_page(self, data: Any) -> tuple[List[BirdeyeTradeSchema], bool]:
        if not isinstance(data, dict):
            self._logger.warning(
                "birdeye_trades_non_dict",
                birdeye_response_type=type(data).__name__,
            )
            return [], False
        body = cast(Dict[str, Any], data)
        if body.get("success") is False:
            self._logger.warning("birdeye_trades_unsuccessful", birdeye_message=body.get("message"))
            return [], False
        page = body.get("data")
        if not isinstance(page, dict):
            return [], False
        raw_items = cast(Dict[str, Any], page).get("items")
        if not isinstance(raw_items, list):
            return [], False
        items = [cast(BirdeyeTradeSchema, x) for x in cast(List[Any], raw_items) if isinstance(x, dict)]
        return items, bool(cast(Dict[str, Any], page).get("hasNext"))
