# -*- coding: utf-8 -*-
"""Application services."""

from token_top_traders.services.ledger import FifoLedgerService
from token_top_traders.services.pricing import PriceResolution, PriceResolver
from token_top_traders.services.ranking import RankingService
from token_top_traders.services.top_traders import TopTradersService

__all__ = [
    "FifoLedgerService",
    "PriceResolution",
    "PriceResolver",
    "RankingService",
    "TopTradersService",
]
