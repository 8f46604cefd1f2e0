# -*- coding: utf-8 -*-
"""Top-traders orchestration."""

from token_top_traders.services.top_traders.top_traders_service import TopTradersService

__all__ = ["TopTradersService"]
