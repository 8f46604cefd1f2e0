# -*- coding: utf-8 -*-
"""Supported chains and their identifiers on each upstream provider."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChainInfo:
    """One supported chain and the identifier each provider uses for it."""

    chain_id: str
    """Canonical id used in cache keys, meta.chainId and source labels."""

    geckoterminal_network: str
    dexscreener_chain: str
    dexpaprika_network: str
    birdeye_chain: str | None = None
    """Birdeye x-chain header value. None when Birdeye trade history is not used for the chain."""

    @property
    def is_solana(self) -> bool:
        return self.chain_id == "solana"


_CHAINS: dict[str, ChainInfo] = {
    c.chain_id: c
    for c in (
        ChainInfo("solana", "solana", "solana", "solana", birdeye_chain="solana"),
        ChainInfo("ethereum", "eth", "ethereum", "ethereum"),
        ChainInfo("base", "base", "base", "base"),
        ChainInfo("bsc", "bsc", "bsc", "bsc"),
        ChainInfo("polygon", "polygon_pos", "polygon", "polygon"),
        ChainInfo("arbitrum", "arbitrum", "arbitrum", "arbitrum"),
        ChainInfo("avalanche", "avax", "avalanche", "avalanche"),
        ChainInfo("optimism", "optimism", "optimism", "optimism"),
    )
}

_ALIASES: dict[str, str] = {
    "sol": "solana",
    "eth": "ethereum",
    "mainnet": "ethereum",
    "bnb": "bsc",
    "binance": "bsc",
    "matic": "polygon",
    "polygon_pos": "polygon",
    "arb": "arbitrum",
    "avax": "avalanche",
    "op": "optimism",
}


def get_chain(chain_id: str | None) -> ChainInfo | None:
    """Return ChainInfo for a chain id or alias (case-insensitive), or None if unsupported."""
    if not chain_id:
        return None
    key = chain_id.strip().lower()
    key = _ALIASES.get(key, key)
    return _CHAINS.get(key)


def supported_chain_ids() -> list[str]:
    """Canonical ids of every supported chain, in registry order."""
    return list(_CHAINS)
