# -*- coding: utf-8 -*-
"""Price resolution."""

from token_top_traders.services.pricing.price_resolver import PriceResolution, PriceResolver

__all__ = ["PriceResolution", "PriceResolver"]
