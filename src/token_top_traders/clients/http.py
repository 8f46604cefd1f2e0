# -*- coding: utf-8 -*-
"""Async HTTP client with retries and rate-limit handling."""

from __future__ import annotations

import asyncio
import random
import uuid
import aiohttp
import structlog
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from token_top_traders.config import Settings
from token_top_traders.exceptions import RateLimitError, UpstreamAPIError


class AsyncHttpClient:
    """Async JSON HTTP client shared by every provider client.

    Retries transport errors and 5xx responses with backoff, honours Retry-After
    on 429, and fails fast on other 4xx responses. If no aiohttp session is
    injected, one is created lazily and must be closed via aclose() or by using
    the client as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (timeout, max_retries).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.api.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with jitter, capped at 4 seconds."""
        base = min(4.0, 0.25 * (2**attempt))
        return base + random.uniform(0.0, 0.15)

    @staticmethod
    def _retry_after(response: aiohttp.ClientResponse) -> Optional[float]:
        header = response.headers.get("Retry-After")
        if not header:
            return None
        try:
            return float(header)
        except ValueError:
            return None

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON.

        Raises:
            RateLimitError: If 429 is returned on every attempt.
            UpstreamAPIError: If the request fails after all retries or with a 4xx.
        """
        return await self._request("GET", url, params=params or {}, headers=headers)

    async def post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform a POST request with a JSON body and return parsed JSON.

        Raises:
            UpstreamAPIError: If the request fails after all retries or with a 4xx.
        """
        return await self._request("POST", url, json=json or {}, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        request_id = uuid.uuid4().hex[:12]
        max_retries = self._settings.api.max_retries
        event_prefix = f"http_{method.lower()}"
        last_error: Optional[Exception] = None
        rate_limited = False

        with bound_contextvars(
            http_method=method,
            http_url=url,
            http_request_id=request_id,
            http_max_retries=max_retries,
        ):
            for attempt in range(max_retries):
                with bound_contextvars(http_attempt=attempt + 1):
                    try:
                        session = await self._get_session()
                        async with session.request(
                            method, url, params=params, json=json if method != "GET" else None, headers=headers
                        ) as response:
                            if response.status == 429:
                                rate_limited = True
                                retry_after = self._retry_after(response)
                                self._logger.warning(
                                    f"{event_prefix}_rate_limited",
                                    http_status_code=429,
                                    http_retry_after_seconds=retry_after,
                                )
                                if attempt + 1 < max_retries:
                                    if retry_after is not None and retry_after > 0:
                                        await asyncio.sleep(retry_after)
                                    else:
                                        await asyncio.sleep(self._backoff_delay(attempt))
                                continue

                            if 400 <= response.status < 500:
                                self._logger.warning(
                                    f"{event_prefix}_client_error",
                                    http_status_code=response.status,
                                )
                                raise UpstreamAPIError(
                                    f"{method} {url} returned {response.status}",
                                    url=url,
                                    status_code=response.status,
                                )

                            response.raise_for_status()
                            return await response.json(content_type=None)
                    except UpstreamAPIError:
                        raise
                    except aiohttp.ClientResponseError as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                            http_status_code=getattr(e, "status", None),
                        )
                    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
                        last_error = e
                        self._logger.debug(
                            f"{event_prefix}_retry",
                            error_type=type(e).__name__,
                            error_message=str(e),
                        )
                    if attempt + 1 < max_retries:
                        await asyncio.sleep(self._backoff_delay(attempt))

            if rate_limited and last_error is None:
                self._logger.error(f"{event_prefix}_rate_limit_exhausted", http_attempts=max_retries)
                raise RateLimitError(url=url)

            status_code = (
                getattr(last_error, "status", None)
                if isinstance(last_error, aiohttp.ClientResponseError)
                else None
            )
            self._logger.error(
                f"{event_prefix}_failed",
                http_status_code=status_code,
                http_attempts=max_retries,
                error_type=type(last_error).__name__ if last_error else None,
                error_message=str(last_error) if last_error else None,
            )
            raise UpstreamAPIError(
                f"{method} failed after {max_retries} attempts: {url}",
                url=url,
                status_code=status_code,
                cause=last_error,
            ) from last_error
