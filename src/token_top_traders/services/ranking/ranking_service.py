# -*- coding: utf-8 -*-
"""Ranking & guard filter: turns wallet ledgers into the final top-N trader list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.models.wallet_ledger import WalletLedger

if TYPE_CHECKING:
    from token_top_traders.config import TradersSettings


class RankingService:
    """Builds, filters, sorts and ranks TraderRankEntry lists."""

    def __init__(self, settings: TradersSettings) -> None:
        """Initialize with bounds from settings (min_volume_usd, max_abs_profit_usd, top_n)."""
        self._min_volume_usd = settings.min_volume_usd
        self._max_abs_profit_usd = settings.max_abs_profit_usd
        self._top_n = settings.top_n

    @staticmethod
    def entry_from_ledger(ledger: WalletLedger, price_usd: float) -> TraderRankEntry:
        """Unranked entry for one ledger; open position valued at price_usd."""
        position_tokens = max(0.0, ledger.buy_tokens - ledger.sell_tokens)
        position_value = position_tokens * price_usd
        unrealized = 0.0
        open_tokens = ledger.open_tokens
        if price_usd > 0 and position_tokens > 0 and open_tokens > 0:
            avg_open_cost = ledger.open_cost_usd / open_tokens
            unrealized = (price_usd - avg_open_cost) * position_tokens
        return TraderRankEntry(
            rank=0,
            wallet=ledger.wallet,
            profit_usd=ledger.realized_pnl,
            volume_usd=ledger.buy_usd + ledger.sell_usd,
            position_tokens=position_tokens,
            position_value_usd=position_value,
            trade_count=ledger.trade_count,
            last_active=ledger.last_trade_time,
            buy_volume=ledger.buy_usd,
            sell_volume=ledger.sell_usd,
            unrealized_profit_usd=unrealized,
        )

    def rank_ledgers(self, ledgers: Iterable[WalletLedger], price_usd: float) -> list[TraderRankEntry]:
        """Entries for eligible ledgers, filtered and ranked."""
        return self.rank(self.entry_from_ledger(ledger, price_usd) for ledger in ledgers)

    def rank(self, entries: Iterable[TraderRankEntry]) -> list[TraderRankEntry]:
        """Drop dust and outliers, then sort by profit and assign ranks."""
        kept = [
            e for e in entries
            if e.volume_usd > self._min_volume_usd and abs(e.profit_usd) < self._max_abs_profit_usd
        ]
        return self.assign_ranks(kept)

    def assign_ranks(self, entries: Iterable[TraderRankEntry]) -> list[TraderRankEntry]:
        """Sort by profit descending, keep top_n, number them 1..n. No filtering."""
        ordered = sorted(entries, key=lambda e: e.profit_usd, reverse=True)[: self._top_n]
        return [e.with_rank(i) for i, e in enumerate(ordered, start=1)]
