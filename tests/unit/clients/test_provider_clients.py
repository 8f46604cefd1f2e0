# -*- coding: utf-8 -*-
"""Unit tests for provider clients against a stubbed AsyncHttpClient."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from token_top_traders.clients.birdeye import BirdeyeClient
from token_top_traders.clients.dexscreener import DexScreenerClient
from token_top_traders.clients.geckoterminal import GeckoTerminalClient
from token_top_traders.clients.geckoterminal.geckoterminal import is_base_token, token_id_address
from token_top_traders.clients.solana_rpc import SolanaRpcClient
from token_top_traders.config import Settings
from token_top_traders.exceptions import MissingRequiredConfigError


def _http(**methods: Any) -> Any:
    return SimpleNamespace(**methods)


def _gecko_pool(address: str, liquidity: str, volume: str) -> dict[str, Any]:
    return {
        "attributes": {"address": address, "reserve_in_usd": liquidity, "volume_usd": {"h24": volume}},
        "relationships": {
            "base_token": {"data": {"id": "polygon_pos_0xabc"}},
            "quote_token": {"data": {"id": "polygon_pos_0xdef"}},
        },
    }


# --- GeckoTerminal ---


async def test_best_pool_prefers_liquidity_then_volume(settings: Settings) -> None:
    pools = [
        _gecko_pool("small", "500", "1000000"),
        _gecko_pool("deep-quiet", "50200", "10"),
        _gecko_pool("deep-busy", "49900", "9000"),
    ]
    http = _http(get=AsyncMock(return_value={"data": pools}))
    client = GeckoTerminalClient(http, settings)

    best = await client.get_best_pool("solana", "mint", min_liquidity_usd=1_000)

    assert best is not None
    assert best["attributes"]["address"] == "deep-busy"
    url = http.get.await_args.args[0]
    assert url.endswith("/networks/solana/tokens/mint/pools")


async def test_best_pool_is_none_below_liquidity_floor(settings: Settings) -> None:
    http = _http(get=AsyncMock(return_value={"data": [_gecko_pool("tiny", "10", "10")]}))

    assert await GeckoTerminalClient(http, settings).get_best_pool("solana", "mint", min_liquidity_usd=1_000) is None


async def test_pool_list_fetched_once_per_token(settings: Settings) -> None:
    http = _http(get=AsyncMock(return_value={"data": [_gecko_pool("deep", "80000", "10")]}))
    client = GeckoTerminalClient(http, settings)

    priced = await client.get_best_pool("solana", "Mint", min_liquidity_usd=0)
    traded = await client.get_best_pool("solana", "mint", min_liquidity_usd=1_000)

    assert priced is not None and traded is not None
    assert priced["attributes"]["address"] == traded["attributes"]["address"] == "deep"
    assert http.get.await_count == 1


async def test_empty_pool_list_is_refetched(settings: Settings) -> None:
    http = _http(get=AsyncMock(side_effect=[{"data": []}, {"data": [_gecko_pool("new", "5000", "1")]}]))
    client = GeckoTerminalClient(http, settings)

    assert await client.get_token_pools("solana", "mint") == []
    assert len(await client.get_token_pools("solana", "mint")) == 1
    assert http.get.await_count == 2


async def test_pool_trades_truncated_and_non_list_tolerated(settings: Settings) -> None:
    trades = [{"id": str(i), "attributes": {}} for i in range(5)]
    http = _http(get=AsyncMock(side_effect=[{"data": trades}, {"errors": ["nope"]}]))
    client = GeckoTerminalClient(http, settings)

    assert len(await client.get_pool_trades("solana", "pool", limit=3)) == 3
    assert await client.get_pool_trades("solana", "pool") == []


def test_relationship_ids_keep_underscored_network_slugs() -> None:
    pool: Any = _gecko_pool("p", "1", "1")

    assert token_id_address("polygon_pos_0xabc") == "0xabc"
    assert token_id_address(None) is None
    assert is_base_token(pool, "0xABC") is True
    assert is_base_token(pool, "0xdef") is False
    assert is_base_token(pool, "0x999") is None


# --- Birdeye ---


def _birdeye_page(count: int, *, has_next: bool) -> dict[str, Any]:
    return {"success": True, "data": {"items": [{"txHash": str(i)} for i in range(count)], "hasNext": has_next}}


async def test_birdeye_pages_until_limit() -> None:
    settings = Settings.from_env(providers={"birdeye_api_key": "key"})
    http = _http(get=AsyncMock(side_effect=[_birdeye_page(50, has_next=True), _birdeye_page(50, has_next=True)]))

    trades = await BirdeyeClient(http, settings).get_token_trades("mint", chain="solana", limit=80)

    assert len(trades) == 80
    offsets = [c.kwargs["params"]["offset"] for c in http.get.await_args_list]
    limits = [c.kwargs["params"]["limit"] for c in http.get.await_args_list]
    assert offsets == [0, 50]
    assert limits == [50, 30]
    headers = http.get.await_args.kwargs["headers"]
    assert headers["X-API-KEY"] == "key"
    assert headers["x-chain"] == "solana"


async def test_birdeye_stops_when_no_next_page() -> None:
    settings = Settings.from_env(providers={"birdeye_api_key": "key"})
    http = _http(get=AsyncMock(return_value=_birdeye_page(12, has_next=False)))

    trades = await BirdeyeClient(http, settings).get_token_trades("mint", limit=300)

    assert len(trades) == 12
    assert http.get.await_count == 1


async def test_birdeye_unsuccessful_body_yields_nothing() -> None:
    settings = Settings.from_env(providers={"birdeye_api_key": "key"})
    http = _http(get=AsyncMock(return_value={"success": False, "message": "Unauthorized"}))

    assert await BirdeyeClient(http, settings).get_token_trades("mint") == []


async def test_birdeye_requires_api_key(settings: Settings) -> None:
    http = _http(get=AsyncMock())
    client = BirdeyeClient(http, settings)

    assert client.has_api_key is False
    with pytest.raises(MissingRequiredConfigError):
        await client.get_token_trades("mint")
    http.get.assert_not_awaited()


# --- DexScreener ---


async def test_top_pair_stats_picks_most_liquid_pair_on_chain(settings: Settings) -> None:
    pairs = [
        {"chainId": "ethereum", "pairAddress": "eth", "liquidity": {"usd": 9e9}},
        {
            "chainId": "solana",
            "pairAddress": "shallow",
            "baseToken": {"address": "mint"},
            "priceUsd": "1.0",
            "liquidity": {"usd": 1_000},
        },
        {
            "chainId": "solana",
            "pairAddress": "deep",
            "baseToken": {"address": "mint"},
            "priceUsd": "0.02",
            "volume": {"h24": 120_000},
            "txns": {"h24": {"buys": 40, "sells": 35}},
            "liquidity": {"usd": 80_000},
        },
    ]
    http = _http(get=AsyncMock(return_value={"pairs": pairs}))

    stats = await DexScreenerClient(http, settings).get_top_pair_stats("solana", "mint")

    assert stats is not None
    assert stats.pair_address == "deep"
    assert (stats.volume_24h_usd, stats.buys_24h, stats.sells_24h) == (120_000.0, 40, 35)
    assert stats.price_usd == 0.02


async def test_top_pair_price_dropped_when_token_is_quote(settings: Settings) -> None:
    pair = {"chainId": "solana", "pairAddress": "p", "baseToken": {"address": "other"}, "priceUsd": "5"}
    http = _http(get=AsyncMock(return_value={"pairs": [pair]}))

    stats = await DexScreenerClient(http, settings).get_top_pair_stats("solana", "mint")

    assert stats is not None and stats.price_usd is None


async def test_top_pair_stats_none_without_pairs(settings: Settings) -> None:
    http = _http(get=AsyncMock(return_value={"pairs": None}))

    assert await DexScreenerClient(http, settings).get_top_pair_stats("solana", "mint") is None


# --- Solana RPC ---


async def test_largest_holders_sorted_and_filtered(settings: Settings) -> None:
    result = {
        "value": [
            {"address": "a", "uiAmount": 10.0},
            {"address": "b", "uiAmount": None, "uiAmountString": "250.5"},
            {"address": "c", "uiAmount": 0},
            {"uiAmount": 99.0},
            {"address": "d", "uiAmount": 40.0},
        ]
    }
    http = _http(post=AsyncMock(return_value={"jsonrpc": "2.0", "id": 1, "result": result}))

    holders = await SolanaRpcClient(http, settings).get_largest_holders("mint", limit=2)

    assert [(h.address, h.ui_amount) for h in holders] == [("b", 250.5), ("d", 40.0)]
    payload = http.post.await_args.kwargs["json"]
    assert payload["method"] == "getTokenLargestAccounts"
    assert payload["params"] == ["mint"]


async def test_rpc_error_raises_value_error(settings: Settings) -> None:
    http = _http(post=AsyncMock(return_value={"error": {"code": -32602, "message": "Invalid param"}}))

    with pytest.raises(ValueError, match="Invalid param"):
        await SolanaRpcClient(http, settings).call("getTokenLargestAccounts", ["mint"])


async def test_helius_key_appended_to_rpc_url() -> None:
    settings = Settings.from_env(
        api={"solana_rpc_url": "https://rpc.example"},
        providers={"helius_api_key": "hk"},
    )
    http = _http(post=AsyncMock(return_value={"result": {"value": []}}))

    await SolanaRpcClient(http, settings).get_largest_holders("mint")

    assert http.post.await_args.args[0] == "https://rpc.example/?api-key=hk"
