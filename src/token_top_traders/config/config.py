# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, PROVIDERS__BIRDEYE_API_KEY.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "token-top-traders"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/top_traders.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ApiSettings(BaseSettings):
    """Base URLs and HTTP behaviour for the upstream market-data providers."""

    model_config = SettingsConfigDict(extra="ignore")

    birdeye_host: str = Field(
        default="https://public-api.birdeye.so",
        description="Birdeye public API base URL (trade history).",
    )
    geckoterminal_host: str = Field(
        default="https://api.geckoterminal.com/api/v2",
        description="GeckoTerminal API base URL (pools, pool trades).",
    )
    dexscreener_host: str = Field(
        default="https://api.dexscreener.com",
        description="DexScreener API base URL (pair stats).",
    )
    dexpaprika_host: str = Field(
        default="https://api.dexpaprika.com",
        description="DexPaprika API base URL (token price summary).",
    )
    solana_tracker_host: str = Field(
        default="https://data.solanatracker.io",
        description="Solana Tracker data API base URL (pre-aggregated top traders).",
    )
    solana_rpc_url: str = Field(
        default="https://mainnet.helius-rpc.com",
        description="Solana JSON-RPC endpoint (top holder snapshot).",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=2,
        ge=1,
        le=20,
        description="Maximum number of attempts for failed requests.",
    )


class ProviderKeysSettings(BaseSettings):
    """Optional provider API keys (from env PROVIDERS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    birdeye_api_key: Optional[str] = Field(default=None, description="Birdeye X-API-KEY.")
    solana_tracker_api_key: Optional[str] = Field(
        default=None, description="Solana Tracker x-api-key."
    )
    helius_api_key: Optional[str] = Field(
        default=None, description="Helius key appended to the Solana RPC URL."
    )


class TradersSettings(BaseSettings):
    """Top-traders aggregation: cache, windows and sanity bounds (from env TRADERS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    cache_ttl_seconds: float = Field(
        default=180.0,
        ge=0.0,
        le=3600.0,
        description="How long a computed result is served from cache.",
    )
    cache_maxsize: int = Field(default=1024, ge=1, le=100_000)
    adapter_timeout_seconds: float = Field(
        default=20.0,
        ge=0.5,
        le=300.0,
        description="Overall timeout for one adapter attempt (all of its HTTP calls).",
    )
    birdeye_trades_limit: int = Field(default=300, ge=1, le=300)
    geckoterminal_trades_limit: int = Field(default=200, ge=1)
    geckoterminal_trades_max: int = Field(
        default=300,
        ge=1,
        description="Ceiling the configured GeckoTerminal trade window is clamped to.",
    )
    max_trade_usd: float = Field(
        default=25_000_000.0,
        gt=0,
        description="Single-trade USD values above this are treated as bad ticks.",
    )
    min_volume_usd: float = Field(default=50.0, ge=0.0)
    max_abs_profit_usd: float = Field(default=10_000_000.0, gt=0)
    top_n: int = Field(default=20, ge=1, le=500)
    estimated_min_volume_usd: float = Field(
        default=1_000.0,
        ge=0.0,
        description="Minimum 24h pair volume required to synthesize estimated traders.",
    )
    holders_limit: int = Field(default=20, ge=1, le=100)
    pool_min_liquidity_usd: float = Field(default=1_000.0, ge=0.0)
    enable_solana_tracker: bool = Field(
        default=False,
        description="Try Solana Tracker pre-aggregated top traders before the ledger adapters.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, TRADERS__CACHE_TTL_SECONDS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    providers: ProviderKeysSettings = Field(default_factory=ProviderKeysSettings)
    traders: TradersSettings = Field(default_factory=TradersSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides are passed as dicts, e.g.:
        - from_env(traders={"cache_ttl_seconds": 30})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from token_top_traders.config import get_settings

        settings = get_settings()
        ttl = settings.traders.cache_ttl_seconds
    """
    return Settings()
