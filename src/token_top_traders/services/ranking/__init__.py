# -*- coding: utf-8 -*-
"""Ranking & guard filter (sync, pure)."""

from token_top_traders.services.ranking.ranking_service import RankingService

__all__ = ["RankingService"]
