"""Custom exceptions for upstream APIs and trader sources."""

from __future__ import annotations

from enum import StrEnum


class TopTradersError(Exception):
    """Base exception for top-traders errors."""

    pass


class MissingRequiredConfigError(TopTradersError):
    """Raised when a required configuration value is missing."""

    pass


class UpstreamAPIError(TopTradersError):
    """Raised when an upstream API request fails after retries."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class RateLimitError(UpstreamAPIError):
    """Raised when the API returns HTTP 429 (Too Many Requests)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded (429)",
        *,
        url: str | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=429)
        self.retry_after = retry_after


class FailureReason(StrEnum):
    """Reason codes recorded in the attempts trail when a trader source gives up."""

    MISSING_API_KEY = "missing_api_key"
    UNSUPPORTED_CHAIN = "unsupported_chain"
    UPSTREAM_ERROR = "upstream_error"
    TIMEOUT = "timeout"
    NO_DATA = "no_data"
    INSUFFICIENT_ACTIVITY = "insufficient_activity"
    NO_PRICE = "no_price"


class TraderSourceError(TopTradersError):
    """Typed failure of one trader source; the orchestrator records it and moves on."""

    def __init__(
        self,
        reason: FailureReason,
        detail: str = "",
        *,
        source: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)
        self.reason = reason
        self.detail = detail
        self.source = source
        self.cause = cause
