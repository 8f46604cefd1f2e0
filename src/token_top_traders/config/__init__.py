"""Configuration subpackage."""

from token_top_traders.config.chains import ChainInfo, get_chain, supported_chain_ids
from token_top_traders.config.config import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    ProviderKeysSettings,
    Settings,
    TradersSettings,
    get_settings,
)

__all__ = [
    "ApiSettings",
    "AppSettings",
    "ChainInfo",
    "LoggingSettings",
    "ProviderKeysSettings",
    "Settings",
    "TradersSettings",
    "get_chain",
    "get_settings",
    "supported_chain_ids",
]
