# -*- coding: utf-8 -*-
"""Estimated source: approximate per-wallet figures from 24h pair aggregates.

Used when no individual trade list is obtainable. Output does not go through
the FIFO ledger and every entry is flagged estimated.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from token_top_traders.exceptions import FailureReason, TraderSourceError, UpstreamAPIError
from token_top_traders.models.result import ConfidenceTier
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.services.sources.base import TraderSource
from token_top_traders.utils.seeded import fake_wallet, seeded_rng
from token_top_traders.utils.validation import mask_address

if TYPE_CHECKING:
    from token_top_traders.clients.dexscreener import DexScreenerClient, PairStats
    from token_top_traders.clients.solana_rpc import SolanaRpcClient, TokenHolder
    from token_top_traders.config import ChainInfo, Settings
    from token_top_traders.services.ranking import RankingService

_DAY_SECONDS = 86_400


def estimate_traders(
    stats: PairStats,
    holders: list[TokenHolder],
    price_usd: float,
    *,
    chain: ChainInfo,
    token_address: str,
    now: int,
    slots: int,
) -> list[TraderRankEntry]:
    """Unranked estimated entries, one per holder (or per synthetic slot when there are none).

    Profit is a seeded baseline fraction of 24h volume scaled by the wallet's
    share (position value / 24h volume, clamped to [0.001, 1]). Buy and sell
    volume are split so that sell - buy equals the estimated profit.
    """
    rng = seeded_rng("estimated", chain.chain_id, token_address.lower())
    volume = stats.volume_24h_usd
    txns = stats.buys_24h + stats.sells_24h
    avg_trade_usd = volume / max(txns, 1)

    if holders:
        positions = [(h.address, h.ui_amount) for h in holders[:slots]]
    else:
        positions = [
            (fake_wallet(rng, solana=chain.is_solana), avg_trade_usd * rng.uniform(0.5, 5.0) / price_usd)
            for _ in range(slots)
        ]

    entries: list[TraderRankEntry] = []
    for wallet, tokens in positions:
        position_value = tokens * price_usd
        share = min(max(position_value / volume, 0.001), 1.0)
        profit = rng.uniform(-0.2, 0.6) * share * volume
        trade_count = rng.randint(2, 12)
        wallet_volume = max(avg_trade_usd * trade_count, abs(profit) * 2)
        entries.append(
            TraderRankEntry(
                rank=0,
                wallet=wallet,
                profit_usd=profit,
                volume_usd=wallet_volume,
                position_tokens=tokens,
                position_value_usd=position_value,
                trade_count=trade_count,
                last_active=now - rng.randint(0, _DAY_SECONDS),
                buy_volume=(wallet_volume - profit) / 2,
                sell_volume=(wallet_volume + profit) / 2,
                estimated=True,
            )
        )
    return entries


class DexScreenerEstimatedSource(TraderSource):
    name = "dexscreener"
    label = "estimated"
    tier = ConfidenceTier.ESTIMATED

    def __init__(
        self,
        dexscreener: DexScreenerClient,
        solana_rpc: SolanaRpcClient,
        ranking: RankingService,
        settings: Settings,
        *,
        clock: Callable[[], float] = time.time,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        super().__init__(get_logger=get_logger, logger_name=logger_name)
        self._dexscreener = dexscreener
        self._solana_rpc = solana_rpc
        self._ranking = ranking
        self._settings = settings
        self._clock = clock

    async def _fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        traders = self._settings.traders
        stats = await self._dexscreener.get_top_pair_stats(chain.dexscreener_chain, token_address)
        if stats is None:
            raise TraderSourceError(FailureReason.NO_DATA, f"no pair on {chain.dexscreener_chain}")
        # Zero volume gives no share to scale by, whatever the configured floor.
        if stats.volume_24h_usd <= 0 or stats.volume_24h_usd < traders.estimated_min_volume_usd:
            raise TraderSourceError(
                FailureReason.INSUFFICIENT_ACTIVITY,
                f"24h volume {stats.volume_24h_usd:.2f} below {traders.estimated_min_volume_usd:.2f}",
            )
        price = price_usd if price_usd > 0 else (stats.price_usd or 0.0)
        if price <= 0:
            raise TraderSourceError(FailureReason.NO_PRICE)

        holders: list[TokenHolder] = []
        if chain.is_solana:
            try:
                holders = await self._solana_rpc.get_largest_holders(
                    token_address, limit=traders.holders_limit
                )
            except (UpstreamAPIError, ValueError) as e:
                self._logger.warning(
                    "estimated_holders_unavailable",
                    token_masked=mask_address(token_address),
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

        entries = estimate_traders(
            stats,
            holders,
            price,
            chain=chain,
            token_address=token_address,
            now=int(self._clock()),
            slots=traders.holders_limit,
        )
        self._logger.info(
            "estimated_traders_built",
            token_masked=mask_address(token_address),
            volume_24h_usd=stats.volume_24h_usd,
            holders_count=len(holders),
            entries_count=len(entries),
        )
        return self._ranking.assign_ranks(entries)
