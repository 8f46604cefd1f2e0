# -*- coding: utf-8 -*-
"""Top-traders result, provenance metadata and the attempts diagnostic trail."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from token_top_traders.models.trader_rank import TraderRankEntry


class ConfidenceTier(StrEnum):
    """How trustworthy a ranking is, by the kind of source that produced it."""

    REAL_AGGREGATED = "real-aggregated"
    LIVE_POOL = "live-pool"
    ESTIMATED = "estimated"
    DEMO = "demo"
    NONE = "none"


DISCLAIMERS: dict[ConfidenceTier, str] = {
    ConfidenceTier.REAL_AGGREGATED: (
        "Profit computed from recent on-chain swaps with FIFO cost basis. "
        "Only trades inside the sampled window are counted."
    ),
    ConfidenceTier.LIVE_POOL: (
        "Profit computed from the most recent trades in the token's most liquid pool. "
        "Activity in other pools is not included."
    ),
    ConfidenceTier.ESTIMATED: (
        "Estimated from 24h pool volume and holder balances. "
        "Figures are approximate and not based on individual trades."
    ),
    ConfidenceTier.DEMO: (
        "Demo data. No trading data was available for this token; "
        "these wallets and figures are placeholders."
    ),
    ConfidenceTier.NONE: "No trader data is available for this token right now.",
}


@dataclass(frozen=True, slots=True)
class Attempt:
    """One entry in the diagnostics trail (cache lookup, price lookup, source try, outcome)."""

    type: str
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.context}


@dataclass(frozen=True, slots=True)
class TopTradersMeta:
    """Provenance of a top-traders result."""

    chain_id: str
    token_address: str
    price_usd: float
    source: str
    tier: ConfidenceTier
    attempts: tuple[Attempt, ...] = ()
    supported: bool = True
    supported_chains: tuple[str, ...] | None = None
    fetched_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    count: int = 0

    @property
    def disclaimer(self) -> str:
        return DISCLAIMERS[self.tier]

    def with_attempts_prefixed(self, *attempts: Attempt) -> TopTradersMeta:
        """Return a copy whose trail starts with the given attempts."""
        return replace(self, attempts=(*attempts, *self.attempts))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "chainId": self.chain_id,
            "tokenAddress": self.token_address,
            "priceUsd": self.price_usd,
            "source": self.source,
            "tier": self.tier.value,
            "disclaimer": self.disclaimer,
            "count": self.count,
            "supported": self.supported,
            "fetchedAt": self.fetched_at.isoformat(),
            "attempts": [a.to_dict() for a in self.attempts],
        }
        if self.supported_chains is not None:
            out["supportedChains"] = list(self.supported_chains)
        return out


@dataclass(frozen=True, slots=True)
class TopTradersResult:
    """Ranked traders plus provenance. from_cache is False only for the caller that computed it."""

    traders: tuple[TraderRankEntry, ...]
    meta: TopTradersMeta
    from_cache: bool = False

    def as_cached(self, *attempts: Attempt) -> TopTradersResult:
        """Copy tagged from_cache, optionally with extra attempts at the head of the trail."""
        meta = self.meta.with_attempts_prefixed(*attempts) if attempts else self.meta
        return replace(self, meta=meta, from_cache=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "traders": [t.to_dict() for t in self.traders],
            "meta": self.meta.to_dict(),
            "fromCache": self.from_cache,
        }
