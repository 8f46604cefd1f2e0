"""Solana JSON-RPC client."""

from token_top_traders.clients.solana_rpc.solana_rpc import SolanaRpcClient, TokenHolder

__all__ = ["SolanaRpcClient", "TokenHolder"]
