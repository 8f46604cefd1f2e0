# -*- coding: utf-8 -*-
"""Unit tests for TopTradersResult / TopTradersMeta / TraderRankEntry serialization."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from token_top_traders.models.result import (
    DISCLAIMERS,
    Attempt,
    ConfidenceTier,
    TopTradersMeta,
    TopTradersResult,
)
from token_top_traders.models.trader_rank import TraderRankEntry


def _meta(**overrides: object) -> TopTradersMeta:
    values: dict[str, object] = {
        "chain_id": "solana",
        "token_address": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
        "price_usd": 0.000021,
        "source": "geckoterminal-live-solana",
        "tier": ConfidenceTier.LIVE_POOL,
        "attempts": (Attempt("cache_miss", {"key": "solana:dez"}),),
        "fetched_at": datetime(2026, 2, 13, 12, tzinfo=UTC),
        "count": 1,
    }
    values.update(overrides)
    return TopTradersMeta(**values)  # type: ignore[arg-type]


def test_entry_to_dict_uses_camel_case_and_iso_last_active(
    entry_factory: Callable[..., TraderRankEntry],
) -> None:
    entry = entry_factory(rank=1, profit_usd=123.456, unrealized_profit_usd=-4.444)

    payload = entry.to_dict()

    assert payload["rank"] == 1
    assert payload["profitUsd"] == payload["realizedProfitUsd"] == 123.46
    assert payload["unrealizedProfitUsd"] == -4.44
    assert payload["lastActive"] == "2026-02-13T12:00:00+00:00"
    assert payload["estimated"] is False and payload["demo"] is False
    assert set(payload) >= {"volumeUsd", "positionTokens", "positionValueUsd", "tradeCount", "buyVolume", "sellVolume"}


def test_unknown_last_active_serializes_as_null(entry_factory: Callable[..., TraderRankEntry]) -> None:
    assert entry_factory(last_active=0).to_dict()["lastActive"] is None


def test_meta_to_dict(entry_factory: Callable[..., TraderRankEntry]) -> None:
    payload = TopTradersResult(traders=(entry_factory(rank=1),), meta=_meta()).to_dict()

    meta = payload["meta"]
    assert payload["fromCache"] is False
    assert meta["chainId"] == "solana"
    assert meta["tier"] == "live-pool"
    assert meta["disclaimer"] == DISCLAIMERS[ConfidenceTier.LIVE_POOL]
    assert meta["fetchedAt"] == "2026-02-13T12:00:00+00:00"
    assert meta["attempts"] == [{"type": "cache_miss", "key": "solana:dez"}]
    assert "supportedChains" not in meta
    assert len(payload["traders"]) == 1


def test_every_tier_has_a_disclaimer() -> None:
    assert set(DISCLAIMERS) == set(ConfidenceTier)


def test_as_cached_prefixes_attempts_without_mutating_original(
    entry_factory: Callable[..., TraderRankEntry],
) -> None:
    original = TopTradersResult(traders=(entry_factory(rank=1),), meta=_meta())

    cached = original.as_cached(Attempt("cache_hit", {"ageSeconds": 12.0}))

    assert cached.from_cache is True
    assert [a.type for a in cached.meta.attempts] == ["cache_hit", "cache_miss"]
    assert cached.traders is original.traders
    assert original.from_cache is False
    assert [a.type for a in original.meta.attempts] == ["cache_miss"]


def test_as_cached_without_attempts_keeps_meta(entry_factory: Callable[..., TraderRankEntry]) -> None:
    original = TopTradersResult(traders=(entry_factory(rank=1),), meta=_meta())

    assert original.as_cached().meta is original.meta
