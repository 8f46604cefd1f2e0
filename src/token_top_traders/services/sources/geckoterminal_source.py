# -*- coding: utf-8 -*-
"""GeckoTerminal live-pool source: best pool on the network, then its recent trades."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from token_top_traders.clients.geckoterminal import GeckoTradeSchema, is_base_token
from token_top_traders.exceptions import FailureReason, TraderSourceError
from token_top_traders.models.result import ConfidenceTier
from token_top_traders.models.trade_event import TradeEvent, TradeSide
from token_top_traders.services.sources.base import TradeLedgerSource
from token_top_traders.utils.validation import mask_address, positive_float, same_address

if TYPE_CHECKING:
    from token_top_traders.clients.geckoterminal import GeckoTerminalClient
    from token_top_traders.config import ChainInfo, Settings
    from token_top_traders.services.ledger import FifoLedgerService
    from token_top_traders.services.ranking import RankingService


def _parse_timestamp(value: Any) -> int:
    if not isinstance(value, str) or not value:
        return 0
    try:
        return int(datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp())
    except ValueError:
        return 0


def parse_gecko_trade(
    item: GeckoTradeSchema,
    token_address: str,
    *,
    token_is_base: bool | None,
    max_trade_usd: float,
) -> TradeEvent | None:
    """Normalize one pool trade into a TradeEvent for the target token, or None to skip it.

    kind is relative to the pool's base token, so it is flipped when the target
    token is the quote side. Explicit from/to token addresses take precedence
    over kind when the payload carries them.
    """
    attrs = item.get("attributes") or {}
    wallet = attrs.get("tx_from_address")
    if not isinstance(wallet, str) or not wallet.strip():
        return None

    if same_address(attrs.get("to_token_address"), token_address):
        side = TradeSide.BUY
    elif same_address(attrs.get("from_token_address"), token_address):
        side = TradeSide.SELL
    else:
        kind = str(attrs.get("kind") or "").lower()
        if kind not in (TradeSide.BUY, TradeSide.SELL):
            return None
        side = TradeSide(kind)
        if token_is_base is False:
            side = TradeSide.SELL if side is TradeSide.BUY else TradeSide.BUY

    amount_field = "to_token_amount" if side is TradeSide.BUY else "from_token_amount"
    token_amount = positive_float(attrs.get(amount_field))
    usd_value = positive_float(attrs.get("volume_in_usd"))
    if token_amount is None or usd_value is None or usd_value > max_trade_usd:
        return None

    return TradeEvent(
        wallet=wallet.strip(),
        side=side,
        token_amount=token_amount,
        usd_value=usd_value,
        timestamp=_parse_timestamp(attrs.get("block_timestamp")),
    )


class GeckoTerminalTradeSource(TradeLedgerSource):
    """Recent trades in the token's most liquid pool, aggregated through the FIFO ledger."""

    name = "geckoterminal"
    label = "live"
    tier = ConfidenceTier.LIVE_POOL

    def __init__(
        self,
        client: GeckoTerminalClient,
        ledger: FifoLedgerService,
        ranking: RankingService,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        super().__init__(ledger, ranking, get_logger=get_logger, logger_name=logger_name)
        self._client = client
        self._settings = settings

    async def fetch_trades(self, chain: ChainInfo, token_address: str) -> list[TradeEvent]:
        traders = self._settings.traders
        network = chain.geckoterminal_network
        with bound_contextvars(
            source=self.name,
            geckoterminal_network=network,
            token_masked=mask_address(token_address),
        ):
            pool = await self._client.get_best_pool(
                network, token_address, min_liquidity_usd=traders.pool_min_liquidity_usd
            )
            pool_address = (pool or {}).get("attributes", {}).get("address")
            if pool is None or not pool_address:
                raise TraderSourceError(FailureReason.NO_DATA, f"no pool on {network}")

            limit = min(traders.geckoterminal_trades_limit, traders.geckoterminal_trades_max)
            raw = await self._client.get_pool_trades(network, pool_address, limit=limit)
            if not raw:
                raise TraderSourceError(FailureReason.NO_DATA, "pool returned no trades")

            token_is_base = is_base_token(pool, token_address)
            # Feed is newest first.
            events = [
                e for e in (
                    parse_gecko_trade(
                        item,
                        token_address,
                        token_is_base=token_is_base,
                        max_trade_usd=traders.max_trade_usd,
                    )
                    for item in reversed(raw)
                )
                if e is not None
            ]
            self._logger.info(
                "geckoterminal_trades_normalized",
                geckoterminal_pool=pool_address,
                raw_count=len(raw),
                usable_count=len(events),
            )
        if not events:
            raise TraderSourceError(FailureReason.NO_DATA, f"{len(raw)} trades, none usable")
        return events
