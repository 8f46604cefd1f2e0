"""Logging setup (structlog + Logfire)."""

from token_top_traders.logging.config import configure_logging

__all__ = ["configure_logging"]
