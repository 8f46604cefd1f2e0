"""Solana JSON-RPC client for on-chain reads (largest token accounts)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import structlog

from token_top_traders.utils.validation import mask_address, to_float

if TYPE_CHECKING:
    from token_top_traders.clients.http import AsyncHttpClient
    from token_top_traders.config import Settings


@dataclass(frozen=True)
class TokenHolder:
    """A token account and its human-readable balance."""

    address: str
    ui_amount: float


class SolanaRpcClient:
    """Client for Solana JSON-RPC. Used for the top-holder snapshot of a mint."""

    def __init__(
        self,
        http_client: AsyncHttpClient,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the RPC client.

        Args:
            http_client: HTTP client for POST requests (JSON-RPC).
            settings: Configuration (uses api.solana_rpc_url, providers.helius_api_key).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._http = http_client
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def _rpc_url(self) -> str:
        url = self._settings.api.solana_rpc_url.rstrip("/")
        api_key = self._settings.providers.helius_api_key
        if api_key:
            sep = "&" if "?" in url else "/?"
            url = f"{url}{sep}api-key={api_key}"
        return url

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call and return its "result".

        Raises:
            UpstreamAPIError: If the HTTP request fails.
            ValueError: If the RPC response is malformed or contains an error.
        """
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        response = await self._http.post(self._rpc_url(), json=payload)
        if not isinstance(response, dict):
            raise ValueError(f"Unexpected RPC response type: {type(response)}")
        resp_dict = cast(dict[str, Any], response)
        if "error" in resp_dict:
            err = resp_dict["error"]
            if isinstance(err, dict):
                err_d = cast(dict[str, Any], err)
                msg = str(err_d.get("message", err_d))
            else:
                msg = str(err)
            raise ValueError(f"RPC error: {msg}")
        return resp_dict.get("result")

    async def get_largest_holders(self, mint: str, *, limit: int = 20) -> list[TokenHolder]:
        """Largest token accounts of a mint (RPC returns up to 20), biggest first."""
        result = await self.call("getTokenLargestAccounts", [mint])
        value = cast(dict[str, Any], result).get("value") if isinstance(result, dict) else None
        holders: list[TokenHolder] = []
        for item in cast(list[Any], value) if isinstance(value, list) else []:
            if not isinstance(item, dict):
                continue
            entry = cast(dict[str, Any], item)
            address = entry.get("address")
            amount = to_float(entry.get("uiAmount"))
            if amount is None:
                amount = to_float(entry.get("uiAmountString"))
            if not address or amount is None or amount <= 0:
                continue
            holders.append(TokenHolder(address=str(address), ui_amount=amount))
        holders.sort(key=lambda h: h.ui_amount, reverse=True)
        self._logger.debug(
            "solana_rpc_largest_holders",
            mint_masked=mask_address(mint),
            holders_count=len(holders),
        )
        return holders[:limit]
