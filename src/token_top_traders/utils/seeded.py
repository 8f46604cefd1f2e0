"""Deterministic pseudo-random generators for the estimated and demo trader tiers."""

from __future__ import annotations

import hashlib
import random

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def seeded_rng(*parts: object) -> random.Random:
    """Return a Random seeded from the sha256 of the joined parts.

    Same parts -> same sequence, across processes and interpreter runs.
    """
    material = "|".join(str(p) for p in parts).encode("utf-8")
    seed = int.from_bytes(hashlib.sha256(material).digest()[:8], "big")
    return random.Random(seed)


def fake_wallet(rng: random.Random, *, solana: bool) -> str:
    """Plausible-looking wallet address drawn from rng (base58 for Solana, 0x-hex otherwise)."""
    if solana:
        return "".join(rng.choice(_BASE58_ALPHABET) for _ in range(44))
    return "0x" + "".join(rng.choice("0123456789abcdef") for _ in range(40))
