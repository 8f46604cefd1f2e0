"""Exceptions subpackage."""

from token_top_traders.exceptions.exceptions import (
    FailureReason,
    MissingRequiredConfigError,
    RateLimitError,
    TopTradersError,
    TraderSourceError,
    UpstreamAPIError,
)

__all__ = [
    "FailureReason",
    "MissingRequiredConfigError",
    "RateLimitError",
    "TopTradersError",
    "TraderSourceError",
    "UpstreamAPIError",
]
