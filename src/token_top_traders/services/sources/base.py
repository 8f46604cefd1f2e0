# -*- coding: utf-8 -*-
"""Trader source interface shared by every upstream adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from token_top_traders.exceptions import (
    FailureReason,
    MissingRequiredConfigError,
    TraderSourceError,
    UpstreamAPIError,
)
from token_top_traders.models.result import ConfidenceTier

if TYPE_CHECKING:
    from token_top_traders.config import ChainInfo
    from token_top_traders.models.trade_event import TradeEvent
    from token_top_traders.models.trader_rank import TraderRankEntry
    from token_top_traders.services.ledger import FifoLedgerService
    from token_top_traders.services.ranking import RankingService


class TraderSource(ABC):
    """One upstream way of producing a ranked trader list.

    Subclasses implement _fetch_traders. fetch_traders maps every expected
    failure to TraderSourceError so callers only ever see one exception type.
    """

    name: str = ""
    """Provider slug used in source labels, e.g. "birdeye"."""
    label: str = ""
    """Kind of data: "aggregated", "live", "estimated" or "data"."""
    tier: ConfidenceTier = ConfidenceTier.NONE
    requires_price: bool = False

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def supports(self, chain: ChainInfo) -> bool:
        """Whether this source can serve the chain at all. Default: every supported chain."""
        return True

    def source_label(self, chain: ChainInfo) -> str:
        return f"{self.name}-{self.label}-{chain.chain_id}"

    async def fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        """Ranked traders for a token. Empty list means the source had nothing usable.

        Raises:
            TraderSourceError: On missing configuration, upstream failure or malformed data.
        """
        try:
            return await self._fetch_traders(chain, token_address, price_usd)
        except TraderSourceError as e:
            if e.source is None:
                e.source = self.name
            raise
        except MissingRequiredConfigError as e:
            raise TraderSourceError(
                FailureReason.MISSING_API_KEY, str(e), source=self.name, cause=e
            ) from e
        except UpstreamAPIError as e:
            raise TraderSourceError(
                FailureReason.UPSTREAM_ERROR, str(e), source=self.name, cause=e
            ) from e
        except (KeyError, TypeError, ValueError) as e:
            raise TraderSourceError(
                FailureReason.UPSTREAM_ERROR, f"malformed payload: {e}", source=self.name, cause=e
            ) from e

    @abstractmethod
    async def _fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        ...


class TradeLedgerSource(TraderSource):
    """Source that yields individual trade events; P&L comes from the FIFO ledger."""

    def __init__(
        self,
        ledger: FifoLedgerService,
        ranking: RankingService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        super().__init__(get_logger=get_logger, logger_name=logger_name)
        self._ledger = ledger
        self._ranking = ranking

    @abstractmethod
    async def fetch_trades(self, chain: ChainInfo, token_address: str) -> list[TradeEvent]:
        """Normalized trade events, oldest first. Raises TraderSourceError(NO_DATA) if none survive.

        The ledger sort is stable, so same-second trades replay in the order given here.
        """
        ...

    async def _fetch_traders(
        self,
        chain: ChainInfo,
        token_address: str,
        price_usd: float,
    ) -> list[TraderRankEntry]:
        events = await self.fetch_trades(chain, token_address)
        ledgers = self._ledger.build(events)
        eligible = self._ledger.eligible(ledgers.values())
        ranked = self._ranking.rank_ledgers(eligible, price_usd)
        self._logger.info(
            "ledger_source_aggregated",
            source=self.name,
            events_count=len(events),
            wallets_count=len(ledgers),
            eligible_count=len(eligible),
            ranked_count=len(ranked),
        )
        return ranked
