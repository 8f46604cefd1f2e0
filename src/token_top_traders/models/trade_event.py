# -*- coding: utf-8 -*-
"""Normalized swap leg produced by the ledger-backed trader sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TradeSide(StrEnum):
    """Whether the wallet received (BUY) or gave up (SELL) the target token."""

    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True, slots=True)
class TradeEvent:
    """One matched leg of a swap, from the point of view of the trading wallet.

    Built at the source boundary only after validation: token_amount and
    usd_value are strictly positive and wallet is non-empty.
    """

    wallet: str
    side: TradeSide
    token_amount: float
    usd_value: float
    timestamp: int
    """Unix seconds. 0 when the upstream record carried no usable time."""

    @property
    def unit_price(self) -> float:
        """USD per token for this leg."""
        return self.usd_value / self.token_amount
