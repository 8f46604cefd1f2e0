# -*- coding: utf-8 -*-
"""Utility modules."""

from token_top_traders.utils.seeded import fake_wallet, seeded_rng
from token_top_traders.utils.validation import (
    cache_key,
    mask_address,
    positive_float,
    same_address,
    to_float,
)

__all__ = [
    "cache_key",
    "fake_wallet",
    "mask_address",
    "positive_float",
    "same_address",
    "seeded_rng",
    "to_float",
]
