# -*- coding: utf-8 -*-
"""Birdeye trade-history source (Solana only, API key required)."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from token_top_traders.clients.birdeye import BirdeyeTokenLegSchema, BirdeyeTradeSchema
from token_top_traders.exceptions import FailureReason, MissingRequiredConfigError, TraderSourceError
from token_top_traders.models.result import ConfidenceTier
from token_top_traders.models.trade_event import TradeEvent, TradeSide
from token_top_traders.services.sources.base import TradeLedgerSource
from token_top_traders.utils.validation import mask_address, positive_float, same_address, to_float

if TYPE_CHECKING:
    from token_top_traders.clients.birdeye import BirdeyeClient
    from token_top_traders.config import ChainInfo, Settings
    from token_top_traders.services.ledger import FifoLedgerService
    from token_top_traders.services.ranking import RankingService


def _leg_usd(leg: BirdeyeTokenLegSchema) -> float | None:
    amount = positive_float(leg.get("uiAmount"))
    price = positive_float(leg.get("price")) or positive_float(leg.get("nearestPrice"))
    if amount is None or price is None:
        return None
    return amount * price


def parse_birdeye_trade(
    item: BirdeyeTradeSchema,
    token_address: str,
    *,
    max_trade_usd: float,
) -> TradeEvent | None:
    """Normalize one Birdeye swap into a TradeEvent for the target token, or None to skip it.

    The wallet bought if the token is on the "to" leg and sold if it is on the
    "from" leg. Records without a wallet, a positive token amount or a positive
    USD value, and records above max_trade_usd, are skipped.
    """
    wallet = item.get("owner")
    if not isinstance(wallet, str) or not wallet.strip():
        return None
    from_leg: BirdeyeTokenLegSchema = item.get("from") or {}
    to_leg: BirdeyeTokenLegSchema = item.get("to") or {}

    if same_address(to_leg.get("address"), token_address):
        side, token_leg, counter_leg = TradeSide.BUY, to_leg, from_leg
    elif same_address(from_leg.get("address"), token_address):
        side, token_leg, counter_leg = TradeSide.SELL, from_leg, to_leg
    else:
        return None

    token_amount = positive_float(token_leg.get("uiAmount"))
    if token_amount is None:
        return None
    usd_value = positive_float(item.get("volumeUSD")) or _leg_usd(token_leg) or _leg_usd(counter_leg)
    if usd_value is None or usd_value > max_trade_usd:
        return None

    timestamp = to_float(item.get("blockUnixTime"))
    return TradeEvent(
        wallet=wallet.strip(),
        side=side,
        token_amount=token_amount,
        usd_value=usd_value,
        timestamp=int(timestamp) if timestamp and timestamp > 0 else 0,
    )


class BirdeyeTradeSource(TradeLedgerSource):
    """Recent swaps from Birdeye, aggregated through the FIFO ledger."""

    name = "birdeye"
    label = "aggregated"
    tier = ConfidenceTier.REAL_AGGREGATED

    def __init__(
        self,
        client: BirdeyeClient,
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

    def supports(self, chain: ChainInfo) -> bool:
        return chain.birdeye_chain is not None

    async def fetch_trades(self, chain: ChainInfo, token_address: str) -> list[TradeEvent]:
        if not self._client.has_api_key:
            raise MissingRequiredConfigError("PROVIDERS__BIRDEYE_API_KEY")
        traders = self._settings.traders
        with bound_contextvars(source=self.name, token_masked=mask_address(token_address)):
            raw = await self._client.get_token_trades(
                token_address,
                chain=chain.birdeye_chain or chain.chain_id,
                limit=traders.birdeye_trades_limit,
            )
            # Feed is newest first.
            events = [
                e for e in (
                    parse_birdeye_trade(item, token_address, max_trade_usd=traders.max_trade_usd)
                    for item in reversed(raw)
                )
                if e is not None
            ]
            self._logger.info(
                "birdeye_trades_normalized",
                raw_count=len(raw),
                usable_count=len(events),
                skipped_count=len(raw) - len(events),
            )
        if not events:
            raise TraderSourceError(FailureReason.NO_DATA, f"{len(raw)} records, none usable")
        return events
