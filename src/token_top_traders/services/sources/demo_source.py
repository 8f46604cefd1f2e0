# -*- coding: utf-8 -*-
"""Demo source: deterministic placeholder traders, seeded by token address and price."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from token_top_traders.models.result import ConfidenceTier
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.services.sources.base import TraderSource
from token_top_traders.utils.seeded import fake_wallet, seeded_rng

if TYPE_CHECKING:
    from token_top_traders.config import ChainInfo
    from token_top_traders.services.ranking import RankingService

_WEEK_SECONDS = 7 * 86_400


def demo_traders(
    chain: ChainInfo,
    token_address: str,
    price_usd: float,
    *,
    now: int,
    count: int,
) -> list[TraderRankEntry]:
    """Unranked demo entries. Same token, price and now always give the same list."""
    rng = seeded_rng("demo", token_address.lower(), f"{price_usd:.10g}")
    entries: list[TraderRankEntry] = []
    for _ in range(count):
        wallet = fake_wallet(rng, solana=chain.is_solana)
        buy_usd = rng.uniform(200.0, 50_000.0)
        profit = buy_usd * rng.uniform(-0.5, 2.5)
        sell_usd = buy_usd + profit
        position_tokens = buy_usd * rng.uniform(0.0, 0.5) / price_usd
        entries.append(
            TraderRankEntry(
                rank=0,
                wallet=wallet,
                profit_usd=profit,
                volume_usd=buy_usd + sell_usd,
                position_tokens=position_tokens,
                position_value_usd=position_tokens * price_usd,
                trade_count=rng.randint(2, 40),
                last_active=now - rng.randint(60, _WEEK_SECONDS),
                buy_volume=buy_usd,
                sell_volume=sell_usd,
                demo=True,
            )
        )
    return entries


class DemoSource(TraderSource):
    """Final fallback. Needs a price; otherwise never fails."""

    name = "demo"
    label = "data"
    tier = ConfidenceTier.DEMO
    requires_price = True

    def __init__(
        self,
        ranking: RankingService,
        *,
        count: int = 20,
        clock: Callable[[], float] = time.time,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        super().__init__(get_logger=get_logger, logger_name=logger_name)
        self._ranking = ranking
        self._count = count
        self._clock = clock

    async def _fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        entries = demo_traders(chain, token_address, price_usd, now=int(self._clock()), count=self._count)
        self._logger.info("demo_traders_generated", chain=chain.chain_id, entries_count=len(entries))
        return self._ranking.assign_ranks(entries)
