# -*- coding: utf-8 -*-
"""Solana Tracker source: upstream already aggregates P&L per wallet."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from token_top_traders.clients.solana_tracker import SolanaTrackerTraderSchema
from token_top_traders.exceptions import FailureReason, TraderSourceError
from token_top_traders.models.result import ConfidenceTier
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.services.sources.base import TraderSource
from token_top_traders.utils.validation import to_float

if TYPE_CHECKING:
    from token_top_traders.clients.solana_tracker import SolanaTrackerClient
    from token_top_traders.config import ChainInfo
    from token_top_traders.services.ranking import RankingService


def parse_solana_tracker_trader(item: SolanaTrackerTraderSchema, price_usd: float) -> TraderRankEntry | None:
    """Unranked entry from one pre-aggregated record; None if the wallet or P&L is missing.

    The records carry no trade count or trade timestamps, so trade_count and
    last_active stay 0 (shown as unknown by the CLI and as null lastActive in JSON).
    """
    wallet = item.get("wallet")
    realized = to_float(item.get("realized"))
    if not isinstance(wallet, str) or not wallet or realized is None:
        return None
    invested = max(0.0, to_float(item.get("total_invested")) or 0.0)
    holding = max(0.0, to_float(item.get("holding")) or 0.0)
    # Proceeds are not reported; invested + realized is what came back out.
    sold_usd = max(0.0, invested + realized)
    return TraderRankEntry(
        rank=0,
        wallet=wallet,
        profit_usd=realized,
        volume_usd=invested + sold_usd,
        position_tokens=holding,
        position_value_usd=holding * price_usd,
        trade_count=0,
        last_active=0,
        buy_volume=invested,
        sell_volume=sold_usd,
        unrealized_profit_usd=to_float(item.get("unrealized")) or 0.0,
    )


class SolanaTrackerSource(TraderSource):
    name = "solanatracker"
    label = "aggregated"
    tier = ConfidenceTier.REAL_AGGREGATED

    def __init__(
        self,
        client: SolanaTrackerClient,
        ranking: RankingService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        super().__init__(get_logger=get_logger, logger_name=logger_name)
        self._client = client
        self._ranking = ranking

    def supports(self, chain: ChainInfo) -> bool:
        return chain.is_solana

    async def _fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        raw = await self._client.get_top_traders(token_address)
        entries = [e for e in (parse_solana_tracker_trader(item, price_usd) for item in raw) if e is not None]
        if not entries:
            raise TraderSourceError(FailureReason.NO_DATA, f"{len(raw)} records, none usable")
        return self._ranking.rank(entries)
