# -*- coding: utf-8 -*-
"""FifoLedgerService: pure FIFO cost-basis aggregation of trade events per wallet.

No I/O, no side effects beyond the ledgers it returns. One call = one
aggregation run; nothing is carried between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from token_top_traders.models.trade_event import TradeEvent
from token_top_traders.models.wallet_ledger import WalletLedger


class FifoLedgerService:
    """Builds one WalletLedger per wallet from an unordered batch of trade events."""

    def build(self, events: Iterable[TradeEvent]) -> dict[str, WalletLedger]:
        """Replay events oldest-first into per-wallet ledgers, then apply the P&L guards.

        Events with equal timestamps keep their input order.
        """
        ledgers: dict[str, WalletLedger] = {}
        for event in sorted(events, key=lambda e: e.timestamp):
            ledger = ledgers.get(event.wallet)
            if ledger is None:
                ledger = ledgers[event.wallet] = WalletLedger(wallet=event.wallet)
            ledger.apply(event)
        for ledger in ledgers.values():
            ledger.apply_guards()
        return ledgers

    @staticmethod
    def eligible(ledgers: Iterable[WalletLedger]) -> list[WalletLedger]:
        """Wallets with a completed round trip; pure buyers/holders are left out."""
        return [ledger for ledger in ledgers if ledger.is_round_trip]
