# -*- coding: utf-8 -*-
"""Unit tests for address and number helpers."""

from __future__ import annotations

import math

import pytest

from token_top_traders.utils.validation import cache_key, mask_address, positive_float, same_address, to_float


def test_mask_address() -> None:
    assert mask_address("0x1234567890abcdef1234") == "0x1234...1234"
    assert mask_address("short") == "***"
    assert mask_address(None) == "***"


def test_same_address_is_case_insensitive() -> None:
    assert same_address("0xABCdef", "0xabcDEF")
    assert same_address(" mint ", "mint")
    assert not same_address("", "")
    assert not same_address(None, None)
    assert not same_address("a", "b")


def test_cache_key_lowercases_and_strips() -> None:
    assert cache_key(" Solana", "DezXAZ8z ") == "solana:dezxaz8z"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1.5", 1.5),
        (2, 2.0),
        ("abc", None),
        (None, None),
        (True, None),
        ({}, None),
        (math.inf, None),
        ("nan", None),
    ],
)
def test_to_float(value: object, expected: float | None) -> None:
    assert to_float(value) == expected


def test_positive_float() -> None:
    assert positive_float("0.01") == 0.01
    assert positive_float(0) is None
    assert positive_float("-3") is None
