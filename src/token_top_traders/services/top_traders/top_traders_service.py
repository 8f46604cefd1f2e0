# -*- coding: utf-8 -*-
"""Top-traders orchestrator: cache, price, then trader sources in priority order."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars

from token_top_traders.config import get_chain, supported_chain_ids
from token_top_traders.exceptions import FailureReason, TraderSourceError
from token_top_traders.models.cache_entry import CacheStatus
from token_top_traders.models.result import Attempt, ConfidenceTier, TopTradersMeta, TopTradersResult
from token_top_traders.utils.validation import cache_key, mask_address

if TYPE_CHECKING:
    from token_top_traders.config import ChainInfo, Settings
    from token_top_traders.models.trader_rank import TraderRankEntry
    from token_top_traders.persistence.repositories.interfaces import ITopTradersCache
    from token_top_traders.services.pricing import PriceResolver
    from token_top_traders.services.sources import TraderSource

NO_SOURCE = "none"


class TopTradersService:
    """Entry point for "who are the top traders of this token".

    get_top_traders never raises: unsupported chains, failing sources and
    internal errors all come back as a well-formed result whose meta.attempts
    explains how it was reached.
    """

    def __init__(
        self,
        price_resolver: PriceResolver,
        sources: Sequence[TraderSource],
        cache: ITopTradersCache,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            price_resolver: Resolves the token's current USD price.
            sources: Trader sources in priority order; the first non-empty list wins.
            cache: Result cache with request coalescing.
            settings: Application settings (uses traders.adapter_timeout_seconds).
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._price_resolver = price_resolver
        self._sources = tuple(sources)
        self._cache = cache
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def get_top_traders(self, chain_id: str, token_address: str) -> TopTradersResult:
        """Ranked top traders for a token, from cache when fresh.

        Concurrent calls for the same chain:token share one computation. Only
        the caller that ran it gets from_cache=False.
        """
        chain = get_chain(chain_id)
        token = (token_address or "").strip()
        if chain is None:
            return self._rejected(chain_id, token, FailureReason.UNSUPPORTED_CHAIN, supported=False)
        if not token:
            return self._rejected(chain.chain_id, token, FailureReason.NO_DATA, supported=True)

        key = cache_key(chain.chain_id, token)
        with bound_contextvars(chain=chain.chain_id, token_masked=mask_address(token)):
            try:
                lookup = await self._cache.get_or_compute(key, lambda: self._compute(chain, token))
            except Exception as e:
                self._logger.exception(
                    "top_traders_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return self._exhausted(
                    chain,
                    token,
                    0.0,
                    [Attempt("internal_error", {"errorType": type(e).__name__, "error": str(e)})],
                )

            if lookup.status is CacheStatus.HIT:
                self._logger.debug("top_traders_cache_hit", age_seconds=lookup.age_seconds)
                return lookup.result.as_cached(
                    Attempt("cache_hit", {"key": key, "ageSeconds": round(lookup.age_seconds, 3)})
                )
            if lookup.status is CacheStatus.COALESCED:
                return lookup.result.as_cached(Attempt("cache_coalesced", {"key": key}))
            return lookup.result

    async def _compute(self, chain: ChainInfo, token: str) -> TopTradersResult:
        attempts: list[Attempt] = [Attempt("cache_miss", {"key": cache_key(chain.chain_id, token)})]
        price = await self._price_resolver.resolve(chain, token)
        attempts.extend(price.attempts)

        timeout = self._settings.traders.adapter_timeout_seconds
        for source in self._sources:
            label = source.source_label(chain)
            if not source.supports(chain):
                attempts.append(
                    Attempt("source_skipped", {"source": label, "reason": FailureReason.UNSUPPORTED_CHAIN.value})
                )
                continue
            if source.requires_price and price.price_usd <= 0:
                attempts.append(
                    Attempt("source_skipped", {"source": label, "reason": FailureReason.NO_PRICE.value})
                )
                continue

            try:
                traders = await asyncio.wait_for(
                    source.fetch_traders(chain, token, price.price_usd), timeout=timeout
                )
            except TraderSourceError as e:
                reason, detail = e.reason, e.detail
            except TimeoutError:
                reason, detail = FailureReason.TIMEOUT, f"no response within {timeout:g}s"
            except Exception as e:
                self._logger.exception("top_traders_source_crashed", source=label)
                reason, detail = FailureReason.UPSTREAM_ERROR, f"{type(e).__name__}: {e}"
            else:
                if traders:
                    return self._succeeded(chain, token, price.price_usd, source, traders, attempts)
                reason, detail = FailureReason.NO_DATA, "empty trader list"

            self._logger.info(
                "top_traders_source_failed",
                source=label,
                reason=reason.value,
                detail=detail,
            )
            attempts.append(Attempt("source_failed", {"source": label, "reason": reason.value, "detail": detail}))

        self._logger.warning("top_traders_exhausted", sources_count=len(self._sources))
        return self._exhausted(chain, token, price.price_usd, attempts)

    def _succeeded(
        self,
        chain: ChainInfo,
        token: str,
        price_usd: float,
        source: TraderSource,
        traders: list[TraderRankEntry],
        attempts: list[Attempt],
    ) -> TopTradersResult:
        label = source.source_label(chain)
        attempts.append(Attempt("source_succeeded", {"source": label, "count": len(traders)}))
        attempts.append(Attempt("outcome", {"source": label, "tier": source.tier.value, "count": len(traders)}))
        self._logger.info(
            "top_traders_resolved",
            source=label,
            tier=source.tier.value,
            traders_count=len(traders),
            price_usd=price_usd,
        )
        return TopTradersResult(
            traders=tuple(traders),
            meta=TopTradersMeta(
                chain_id=chain.chain_id,
                token_address=token,
                price_usd=price_usd,
                source=label,
                tier=source.tier,
                attempts=tuple(attempts),
                count=len(traders),
            ),
        )

    @staticmethod
    def _exhausted(
        chain: ChainInfo,
        token: str,
        price_usd: float,
        attempts: list[Attempt],
    ) -> TopTradersResult:
        attempts.append(Attempt("outcome", {"source": NO_SOURCE, "tier": ConfidenceTier.NONE.value, "count": 0}))
        return TopTradersResult(
            traders=(),
            meta=TopTradersMeta(
                chain_id=chain.chain_id,
                token_address=token,
                price_usd=price_usd,
                source=NO_SOURCE,
                tier=ConfidenceTier.NONE,
                attempts=tuple(attempts),
            ),
        )

    def _rejected(
        self,
        chain_id: str,
        token: str,
        reason: FailureReason,
        *,
        supported: bool,
    ) -> TopTradersResult:
        self._logger.info(
            "top_traders_rejected",
            chain=chain_id,
            token_masked=mask_address(token),
            reason=reason.value,
        )
        return TopTradersResult(
            traders=(),
            meta=TopTradersMeta(
                chain_id=(chain_id or "").strip().lower(),
                token_address=token,
                price_usd=0.0,
                source=NO_SOURCE,
                tier=ConfidenceTier.NONE,
                attempts=(Attempt("validation", {"ok": False, "reason": reason.value}),),
                supported=supported,
                supported_chains=None if supported else tuple(supported_chain_ids()),
            ),
        )
