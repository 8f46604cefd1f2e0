# -*- coding: utf-8 -*-
"""Unit tests for TopTradersService (orchestration, fallback chain, caching)."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from token_top_traders.config import ChainInfo
from token_top_traders.exceptions import FailureReason, TraderSourceError
from token_top_traders.models.result import Attempt, ConfidenceTier
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.persistence.repositories.in_memory import InMemoryTopTradersCache
from token_top_traders.services.pricing import PriceResolution
from token_top_traders.services.sources import TraderSource
from token_top_traders.services.top_traders import TopTradersService


class _FakeSource(TraderSource):
    """Scripted source: returns `result` or raises `error`, optionally after `delay` seconds."""

    def __init__(
        self,
        name: str,
        *,
        result: Sequence[TraderRankEntry] = (),
        error: Exception | None = None,
        label: str = "live",
        tier: ConfidenceTier = ConfidenceTier.LIVE_POOL,
        supported: bool = True,
        requires_price: bool = False,
        delay: float = 0.0,
    ) -> None:
        super().__init__()
        self.name = name
        self.label = label
        self.tier = tier
        self.requires_price = requires_price
        self._result = list(result)
        self._error = error
        self._supported = supported
        self._delay = delay
        self.calls = 0

    def supports(self, chain: ChainInfo) -> bool:
        return self._supported

    async def _fetch_traders(self, chain: ChainInfo, token_address: str, price_usd: float) -> list[TraderRankEntry]:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return list(self._result)


def _resolver(price: float = 1.25) -> Any:
    attempts = (Attempt("price_lookup", {"source": "geckoterminal-pool", "ok": price > 0}),)
    return SimpleNamespace(
        resolve=AsyncMock(return_value=PriceResolution(price_usd=price, source="geckoterminal-pool", attempts=attempts))
    )


def _settings(timeout: float = 5.0) -> Any:
    return SimpleNamespace(traders=SimpleNamespace(adapter_timeout_seconds=timeout))


def _service(
    sources: Sequence[TraderSource],
    *,
    resolver: Any = None,
    cache: Any = None,
    timeout: float = 5.0,
) -> TopTradersService:
    return TopTradersService(
        price_resolver=resolver or _resolver(),
        sources=sources,
        cache=cache or InMemoryTopTradersCache(ttl_seconds=180),
        settings=_settings(timeout),
    )


@pytest.fixture
def ranked(entry_factory: Callable[..., TraderRankEntry]) -> list[TraderRankEntry]:
    return [
        entry_factory(rank=1, wallet="w1", profit_usd=300.0),
        entry_factory(rank=2, wallet="w2", profit_usd=100.0),
    ]


async def test_unsupported_chain_short_circuits_without_network(token: str) -> None:
    resolver = _resolver()
    source = _FakeSource("geckoterminal")
    service = _service([source], resolver=resolver)

    result = await service.get_top_traders("unknownchain", token)

    assert result.traders == ()
    assert result.meta.supported is False
    assert result.meta.supported_chains is not None and "solana" in result.meta.supported_chains
    assert result.meta.source == "none"
    assert result.meta.tier is ConfidenceTier.NONE
    assert [a.type for a in result.meta.attempts] == ["validation"]
    assert result.meta.attempts[0].context["reason"] == FailureReason.UNSUPPORTED_CHAIN.value
    resolver.resolve.assert_not_awaited()
    assert source.calls == 0
    payload = result.to_dict()
    assert payload["meta"]["supported"] is False
    assert "supportedChains" in payload["meta"]


async def test_blank_token_is_rejected_without_network() -> None:
    resolver = _resolver()
    result = await _service([_FakeSource("geckoterminal")], resolver=resolver).get_top_traders("solana", "  ")

    assert result.traders == ()
    assert result.meta.supported is True
    resolver.resolve.assert_not_awaited()


async def test_sources_tried_in_order_until_first_non_empty(
    token: str,
    ranked: list[TraderRankEntry],
) -> None:
    birdeye = _FakeSource(
        "birdeye",
        label="aggregated",
        error=TraderSourceError(FailureReason.MISSING_API_KEY, "PROVIDERS__BIRDEYE_API_KEY"),
    )
    gecko = _FakeSource("geckoterminal", result=[])
    estimated = _FakeSource("dexscreener", label="estimated", tier=ConfidenceTier.ESTIMATED, result=ranked)
    demo = _FakeSource("demo", label="data", tier=ConfidenceTier.DEMO, result=ranked)
    service = _service([birdeye, gecko, estimated, demo])

    result = await service.get_top_traders("solana", token)

    assert result.from_cache is False
    assert result.traders == tuple(ranked)
    assert result.meta.source == "dexscreener-estimated-solana"
    assert result.meta.tier is ConfidenceTier.ESTIMATED
    assert result.meta.count == 2
    assert result.meta.price_usd == 1.25
    assert (birdeye.calls, gecko.calls, estimated.calls, demo.calls) == (1, 1, 1, 0)
    assert [a.type for a in result.meta.attempts] == [
        "cache_miss",
        "price_lookup",
        "source_failed",
        "source_failed",
        "source_succeeded",
        "outcome",
    ]
    failures = [a.context for a in result.meta.attempts if a.type == "source_failed"]
    assert [(f["source"], f["reason"]) for f in failures] == [
        ("birdeye-aggregated-solana", "missing_api_key"),
        ("geckoterminal-live-solana", "no_data"),
    ]


async def test_unsupported_and_price_dependent_sources_are_skipped(
    token: str,
    ranked: list[TraderRankEntry],
) -> None:
    birdeye = _FakeSource("birdeye", label="aggregated", supported=False, result=ranked)
    demo = _FakeSource("demo", label="data", tier=ConfidenceTier.DEMO, requires_price=True, result=ranked)
    service = _service([birdeye, demo], resolver=_resolver(price=0.0))

    result = await service.get_top_traders("ethereum", token)

    assert (birdeye.calls, demo.calls) == (0, 0)
    skipped = [a.context["reason"] for a in result.meta.attempts if a.type == "source_skipped"]
    assert skipped == ["unsupported_chain", "no_price"]
    assert result.meta.source == "none"
    assert result.meta.attempts[-1].context == {"source": "none", "tier": "none", "count": 0}


async def test_slow_source_times_out_and_chain_advances(
    token: str,
    ranked: list[TraderRankEntry],
) -> None:
    slow = _FakeSource("birdeye", label="aggregated", delay=1.0, result=ranked)
    fallback = _FakeSource("geckoterminal", result=ranked)

    result = await _service([slow, fallback], timeout=0.05).get_top_traders("solana", token)

    assert result.meta.source == "geckoterminal-live-solana"
    failed = next(a for a in result.meta.attempts if a.type == "source_failed")
    assert failed.context["reason"] == "timeout"


async def test_unexpected_source_exception_is_recorded(token: str, ranked: list[TraderRankEntry]) -> None:
    broken = _FakeSource("birdeye", label="aggregated", error=RuntimeError("bug"))
    fallback = _FakeSource("geckoterminal", result=ranked)

    result = await _service([broken, fallback]).get_top_traders("solana", token)

    assert result.meta.source == "geckoterminal-live-solana"
    failed = next(a for a in result.meta.attempts if a.type == "source_failed")
    assert failed.context["reason"] == "upstream_error"


async def test_total_exhaustion_is_not_cached(token: str) -> None:
    failing = _FakeSource("geckoterminal", error=TraderSourceError(FailureReason.UPSTREAM_ERROR, "502"))
    service = _service([failing])

    first = await service.get_top_traders("solana", token)
    second = await service.get_top_traders("solana", token)

    assert first.traders == () and first.meta.source == "none"
    assert first.meta.disclaimer
    assert second.from_cache is False
    assert failing.calls == 2


async def test_second_call_is_served_from_cache(token: str, ranked: list[TraderRankEntry]) -> None:
    source = _FakeSource("geckoterminal", result=ranked)
    service = _service([source])

    first = await service.get_top_traders("solana", token)
    second = await service.get_top_traders("SOL", token.lower())

    assert source.calls == 1
    assert first.from_cache is False
    assert second.from_cache is True
    assert second.traders == first.traders
    assert second.meta.attempts[0].type == "cache_hit"
    assert second.meta.chain_id == "solana"


async def test_concurrent_requests_coalesce(token: str, ranked: list[TraderRankEntry]) -> None:
    resolver = _resolver()
    source = _FakeSource("geckoterminal", result=ranked, delay=0.01)
    service = _service([source], resolver=resolver)

    results = await asyncio.gather(*(service.get_top_traders("solana", token) for _ in range(6)))

    assert source.calls == 1
    resolver.resolve.assert_awaited_once()
    assert [r.from_cache for r in results].count(False) == 1
    assert all(r.traders is results[0].traders for r in results)
    computed = next(r for r in results if not r.from_cache)
    joined = [r for r in results if r.from_cache]
    assert computed.meta.attempts[0].type == "cache_miss"
    for r in joined:
        assert [a.type for a in r.meta.attempts[:2]] == ["cache_coalesced", "cache_miss"]
        assert r.meta.attempts[0].context == {"key": computed.meta.attempts[0].context["key"]}


async def test_runs_are_idempotent_without_cache(token: str, ranked: list[TraderRankEntry]) -> None:
    def _run_once() -> Any:
        sources = [
            _FakeSource("birdeye", label="aggregated", error=TraderSourceError(FailureReason.NO_DATA)),
            _FakeSource("geckoterminal", result=ranked),
        ]
        return _service(sources).get_top_traders("solana", token)

    first = await _run_once()
    second = await _run_once()

    assert first.traders == second.traders
    assert [a.to_dict() for a in first.meta.attempts] == [a.to_dict() for a in second.meta.attempts]


async def test_never_raises_when_cache_layer_fails(token: str) -> None:
    cache: Any = SimpleNamespace(get_or_compute=AsyncMock(side_effect=RuntimeError("cache exploded")))

    result = await _service([_FakeSource("geckoterminal")], cache=cache).get_top_traders("solana", token)

    assert result.traders == ()
    assert result.meta.tier is ConfidenceTier.NONE
    assert result.meta.attempts[0].type == "internal_error"
