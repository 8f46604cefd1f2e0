# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from token_top_traders.clients.birdeye import BirdeyeClient
from token_top_traders.clients.dexpaprika import DexPaprikaClient
from token_top_traders.clients.dexscreener import DexScreenerClient
from token_top_traders.clients.geckoterminal import GeckoTerminalClient
from token_top_traders.clients.http import AsyncHttpClient
from token_top_traders.clients.solana_rpc import SolanaRpcClient
from token_top_traders.clients.solana_tracker import SolanaTrackerClient
from token_top_traders.config import Settings, get_settings
from token_top_traders.persistence.repositories.in_memory import InMemoryTopTradersCache
from token_top_traders.services.ledger import FifoLedgerService
from token_top_traders.services.pricing import PriceResolver
from token_top_traders.services.ranking import RankingService
from token_top_traders.services.sources import (
    BirdeyeTradeSource,
    DemoSource,
    DexScreenerEstimatedSource,
    GeckoTerminalTradeSource,
    SolanaTrackerSource,
    TraderSource,
)
from token_top_traders.services.top_traders import TopTradersService


def _build_sources(
    settings: Settings,
    solana_tracker: SolanaTrackerSource,
    birdeye: BirdeyeTradeSource,
    geckoterminal: GeckoTerminalTradeSource,
    estimated: DexScreenerEstimatedSource,
    demo: DemoSource,
) -> list[TraderSource]:
    """Trader sources in priority order. Solana Tracker only when enabled."""
    sources: list[TraderSource] = []
    if settings.traders.enable_solana_tracker:
        sources.append(solana_tracker)
    sources.extend([birdeye, geckoterminal, estimated, demo])
    return sources


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, API clients, sources, cache, orchestrator."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    birdeye_client = providers.Singleton(BirdeyeClient, http_client=http_client, settings=config)

    geckoterminal_client = providers.Singleton(GeckoTerminalClient, http_client=http_client, settings=config)

    dexscreener_client = providers.Singleton(DexScreenerClient, http_client=http_client, settings=config)

    dexpaprika_client = providers.Singleton(DexPaprikaClient, http_client=http_client, settings=config)

    solana_rpc_client = providers.Singleton(SolanaRpcClient, http_client=http_client, settings=config)

    solana_tracker_client = providers.Singleton(SolanaTrackerClient, http_client=http_client, settings=config)

    ledger_service = providers.Singleton(FifoLedgerService)

    ranking_service = providers.Singleton(RankingService, settings=config.provided.traders)

    price_resolver = providers.Singleton(
        PriceResolver,
        geckoterminal=geckoterminal_client,
        dexpaprika=dexpaprika_client,
        dexscreener=dexscreener_client,
        settings=config,
    )

    solana_tracker_source = providers.Singleton(
        SolanaTrackerSource,
        client=solana_tracker_client,
        ranking=ranking_service,
    )

    birdeye_source = providers.Singleton(
        BirdeyeTradeSource,
        client=birdeye_client,
        ledger=ledger_service,
        ranking=ranking_service,
        settings=config,
    )

    geckoterminal_source = providers.Singleton(
        GeckoTerminalTradeSource,
        client=geckoterminal_client,
        ledger=ledger_service,
        ranking=ranking_service,
        settings=config,
    )

    estimated_source = providers.Singleton(
        DexScreenerEstimatedSource,
        dexscreener=dexscreener_client,
        solana_rpc=solana_rpc_client,
        ranking=ranking_service,
        settings=config,
    )

    demo_source = providers.Singleton(
        DemoSource,
        ranking=ranking_service,
        count=config.provided.traders.top_n,
    )

    trader_sources = providers.Callable(
        _build_sources,
        config,
        solana_tracker_source,
        birdeye_source,
        geckoterminal_source,
        estimated_source,
        demo_source,
    )

    top_traders_cache = providers.Singleton(
        InMemoryTopTradersCache,
        ttl_seconds=config.provided.traders.cache_ttl_seconds,
        maxsize=config.provided.traders.cache_maxsize,
    )

    top_traders_service = providers.Singleton(
        TopTradersService,
        price_resolver=price_resolver,
        sources=trader_sources,
        cache=top_traders_cache,
        settings=config,
    )
