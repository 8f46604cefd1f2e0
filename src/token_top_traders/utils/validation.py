"""Address helpers shared by clients, sources and the cache."""

from __future__ import annotations

import math
from typing import Any


def mask_address(addr: str | None) -> str:
    """Return a masked address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"


def same_address(a: Any, b: Any) -> bool:
    """Case-insensitive address equality. Non-strings never match."""
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    return a.strip().lower() == b.strip().lower() and bool(a.strip())


def cache_key(chain_id: str, token_address: str) -> str:
    """Cache/in-flight key: lowercase(chain):lowercase(token)."""
    return f"{chain_id.strip().lower()}:{token_address.strip().lower()}"


def to_float(value: Any) -> float | None:
    """Parse a JSON number or numeric string into a finite float. None if not possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(f):
        return None
    return f


def positive_float(value: Any) -> float | None:
    """Like to_float but only returns strictly positive values."""
    f = to_float(value)
    if f is None or f <= 0:
        return None
    return f
