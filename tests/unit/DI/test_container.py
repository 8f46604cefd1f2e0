# -*- coding: utf-8 -*-
"""Unit tests for Container wiring."""

from __future__ import annotations

from dependency_injector import providers

from token_top_traders.DI import Container
from token_top_traders.config import Settings
from token_top_traders.services.top_traders import TopTradersService


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    return container


def test_service_and_default_source_order(settings: Settings) -> None:
    container = _container(settings)

    service = container.top_traders_service()

    assert isinstance(service, TopTradersService)
    assert [s.name for s in container.trader_sources()] == ["birdeye", "geckoterminal", "dexscreener", "demo"]
    assert container.http_client() is container.http_client()


def test_solana_tracker_first_when_enabled() -> None:
    settings = Settings.from_env(traders={"enable_solana_tracker": True})

    names = [s.name for s in _container(settings).trader_sources()]

    assert names[0] == "solanatracker"
    assert len(names) == 5
