# -*- coding: utf-8 -*-
"""Unit tests for FifoLedgerService."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from token_top_traders.models.trade_event import TradeEvent
from token_top_traders.services.ledger import FifoLedgerService


def test_build_replays_events_oldest_first(
    ledger_service: FifoLedgerService,
    wallet: str,
    trade_factory: Callable[..., TradeEvent],
) -> None:
    # Newest-first input, as trade endpoints return it.
    events = [
        trade_factory("sell", 100, 300, ts_offset=20),
        trade_factory("buy", 100, 200, ts_offset=10),
        trade_factory("buy", 100, 100, ts_offset=0),
    ]

    ledgers = ledger_service.build(events)

    ledger = ledgers[wallet]
    # The $1 lot was consumed, so the buys were replayed before the sell.
    assert [lot.unit_cost for lot in ledger.lots] == [2.0]
    # FIFO gives +200; naive cap is 300 - 300.
    assert ledger.realized_pnl == pytest.approx(0.0)


def test_build_applies_guards_to_every_wallet(
    ledger_service: FifoLedgerService,
    trade_factory: Callable[..., TradeEvent],
) -> None:
    events = [
        trade_factory("buy", 100, 100, wallet="a"),
        trade_factory("buy", 100, 200, ts_offset=1, wallet="a"),
        trade_factory("sell", 150, 450, ts_offset=2, wallet="a"),
        trade_factory("buy", 10, 10, wallet="b"),
        trade_factory("sell", 10, 30, ts_offset=1, wallet="b"),
    ]

    ledgers = ledger_service.build(events)

    for ledger in ledgers.values():
        assert ledger.realized_pnl <= ledger.sell_usd - ledger.buy_usd
        assert ledger.realized_pnl >= -ledger.buy_usd
    assert ledgers["a"].realized_pnl == pytest.approx(150.0)
    assert ledgers["b"].realized_pnl == pytest.approx(20.0)


def test_eligible_excludes_wallets_without_round_trip(
    ledger_service: FifoLedgerService,
    trade_factory: Callable[..., TradeEvent],
) -> None:
    events = [
        trade_factory("buy", 10, 10, wallet="holder"),
        trade_factory("buy", 10, 12, ts_offset=1, wallet="holder"),
        trade_factory("sell", 5, 20, wallet="seller-only"),
        trade_factory("buy", 10, 10, wallet="trader"),
        trade_factory("sell", 10, 15, ts_offset=1, wallet="trader"),
    ]

    eligible = ledger_service.eligible(ledger_service.build(events).values())

    assert [ledger.wallet for ledger in eligible] == ["trader"]


def test_build_starts_from_zero_each_run(
    ledger_service: FifoLedgerService,
    wallet: str,
    trade_factory: Callable[..., TradeEvent],
) -> None:
    events = [trade_factory("buy", 10, 10), trade_factory("sell", 10, 20, ts_offset=1)]

    first = ledger_service.build(events)
    second = ledger_service.build(events)

    assert first[wallet].trade_count == second[wallet].trade_count == 2
    assert first[wallet] is not second[wallet]
