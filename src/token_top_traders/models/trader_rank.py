# -*- coding: utf-8 -*-
"""Ranked trader output record."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class TraderRankEntry:
    """One wallet in the ranked top-traders list.

    profit_usd is the realized figure the list is sorted by. Open positions are
    valued at the resolved current price in position_value_usd; the gain or loss
    on them versus remaining cost basis is reported separately in
    unrealized_profit_usd and never affects the ranking.
    """

    rank: int
    wallet: str
    profit_usd: float
    volume_usd: float
    position_tokens: float
    position_value_usd: float
    trade_count: int
    last_active: int
    """Unix seconds of the wallet's latest observed trade (0 if unknown)."""
    buy_volume: float
    sell_volume: float
    unrealized_profit_usd: float = 0.0
    estimated: bool = False
    """Synthesized from aggregate stats rather than individual trades."""
    demo: bool = False
    """Placeholder data with no real signal behind it."""

    def with_rank(self, rank: int) -> TraderRankEntry:
        """Return a copy with rank set."""
        return replace(self, rank=rank)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping with camelCase keys."""
        last_active = (
            datetime.fromtimestamp(self.last_active, UTC).isoformat()
            if self.last_active > 0
            else None
        )
        return {
            "rank": self.rank,
            "wallet": self.wallet,
            "profitUsd": round(self.profit_usd, 2),
            "realizedProfitUsd": round(self.profit_usd, 2),
            "unrealizedProfitUsd": round(self.unrealized_profit_usd, 2),
            "volumeUsd": round(self.volume_usd, 2),
            "positionTokens": self.position_tokens,
            "positionValueUsd": round(self.position_value_usd, 2),
            "tradeCount": self.trade_count,
            "lastActive": last_active,
            "buyVolume": round(self.buy_volume, 2),
            "sellVolume": round(self.sell_volume, 2),
            "estimated": self.estimated,
            "demo": self.demo,
        }
