"""Per-wallet FIFO cost-basis accumulator.

A WalletLedger lives for one aggregation run only. Buys append a Lot at the
back of the queue; sells consume lots from the front (oldest first) and book
realized profit against each consumed lot's unit cost.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from token_top_traders.models.trade_event import TradeEvent, TradeSide


@dataclass(slots=True)
class Lot:
    """Open cost-basis unit. tokens stays > 0 while it sits in a ledger queue."""

    tokens: float
    unit_cost: float

    @property
    def cost_usd(self) -> float:
        return self.tokens * self.unit_cost


@dataclass(slots=True)
class WalletLedger:
    """Accumulated trading activity and FIFO lots for one wallet."""

    wallet: str
    lots: deque[Lot] = field(default_factory=deque)
    buy_usd: float = 0.0
    sell_usd: float = 0.0
    buy_tokens: float = 0.0
    sell_tokens: float = 0.0
    realized_pnl: float = 0.0
    trade_count: int = 0
    last_trade_time: int = 0
    unmatched_sell_tokens: float = 0.0
    """Tokens sold with no observed lot left to match (buy happened outside the window)."""

    def apply(self, event: TradeEvent) -> None:
        """Route one trade event into the ledger."""
        if event.side is TradeSide.BUY:
            self._record_buy(event)
        else:
            self._record_sell(event)
        self.trade_count += 1
        self.last_trade_time = max(self.last_trade_time, event.timestamp)

    def _record_buy(self, event: TradeEvent) -> None:
        self.lots.append(Lot(tokens=event.token_amount, unit_cost=event.unit_price))
        self.buy_usd += event.usd_value
        self.buy_tokens += event.token_amount

    def _record_sell(self, event: TradeEvent) -> None:
        remaining = event.token_amount
        sell_unit_price = event.unit_price
        while remaining > 0 and self.lots:
            lot = self.lots.popleft()
            consumed = min(remaining, lot.tokens)
            self.realized_pnl += (sell_unit_price - lot.unit_cost) * consumed
            lot.tokens -= consumed
            remaining -= consumed
            if lot.tokens > 0:
                self.lots.appendleft(lot)
        # Leftover has no observed cost basis; it counts toward totals only.
        if remaining > 0:
            self.unmatched_sell_tokens += remaining
        self.sell_usd += event.usd_value
        self.sell_tokens += event.token_amount

    def apply_guards(self) -> None:
        """Clamp realized P&L to [-buy_usd, sell_usd - buy_usd]."""
        naive = self.sell_usd - self.buy_usd
        if self.realized_pnl > naive:
            self.realized_pnl = naive
        if self.realized_pnl < -self.buy_usd:
            self.realized_pnl = -self.buy_usd

    @property
    def is_round_trip(self) -> bool:
        """Both sides observed and more than one trade: realized P&L is meaningful."""
        return self.buy_usd > 0 and self.sell_usd > 0 and self.trade_count > 1

    @property
    def open_tokens(self) -> float:
        return sum(lot.tokens for lot in self.lots)

    @property
    def open_cost_usd(self) -> float:
        return sum(lot.cost_usd for lot in self.lots)
