# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from token_top_traders.config import ChainInfo, Settings, get_chain
from token_top_traders.models.trade_event import TradeEvent, TradeSide
from token_top_traders.models.trader_rank import TraderRankEntry
from token_top_traders.services.ledger import FifoLedgerService
from token_top_traders.services.ranking import RankingService


@pytest.fixture
def wallet() -> str:
    """Default trader wallet used by tests."""
    return "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


@pytest.fixture
def token() -> str:
    """Default token mint used by tests."""
    return "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"


@pytest.fixture
def now_ts() -> int:
    """Stable unix timestamp for deterministic assertions (2026-02-13T12:00:00Z)."""
    return 1_770_984_000


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no provider keys)."""
    return Settings.from_env(
        providers={"birdeye_api_key": None, "solana_tracker_api_key": None, "helius_api_key": None},
    )


@pytest.fixture
def solana() -> ChainInfo:
    chain = get_chain("solana")
    assert chain is not None
    return chain


@pytest.fixture
def ethereum() -> ChainInfo:
    chain = get_chain("ethereum")
    assert chain is not None
    return chain


@pytest.fixture
def ledger_service() -> FifoLedgerService:
    return FifoLedgerService()


@pytest.fixture
def ranking_service(settings: Settings) -> RankingService:
    return RankingService(settings.traders)


@pytest.fixture
def trade_factory(wallet: str, now_ts: int) -> Callable[..., TradeEvent]:
    """Build TradeEvent: trade_factory("buy", tokens, usd, ts_offset=0, wallet=...)."""

    def _build(side: str, tokens: float, usd: float, *, ts_offset: int = 0, **overrides: Any) -> TradeEvent:
        return TradeEvent(
            wallet=overrides.pop("wallet", wallet),
            side=TradeSide(side),
            token_amount=tokens,
            usd_value=usd,
            timestamp=now_ts + ts_offset,
        )

    return _build


@pytest.fixture
def entry_factory(wallet: str, now_ts: int) -> Callable[..., TraderRankEntry]:
    """Build an unranked TraderRankEntry with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> TraderRankEntry:
        return TraderRankEntry(
            rank=overrides.pop("rank", 0),
            wallet=overrides.pop("wallet", wallet),
            profit_usd=overrides.pop("profit_usd", 100.0),
            volume_usd=overrides.pop("volume_usd", 1_000.0),
            position_tokens=overrides.pop("position_tokens", 0.0),
            position_value_usd=overrides.pop("position_value_usd", 0.0),
            trade_count=overrides.pop("trade_count", 2),
            last_active=overrides.pop("last_active", now_ts),
            buy_volume=overrides.pop("buy_volume", 450.0),
            sell_volume=overrides.pop("sell_volume", 550.0),
            **overrides,
        )

    return _build
