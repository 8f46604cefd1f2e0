"""Solana Tracker client."""

from token_top_traders.clients.solana_tracker.solana_tracker import (
    SolanaTrackerClient,
    SolanaTrackerTraderSchema,
)

__all__ = ["SolanaTrackerClient", "SolanaTrackerTraderSchema"]
