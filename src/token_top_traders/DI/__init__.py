"""Dependency injection."""

from token_top_traders.DI.container import Container

__all__ = ["Container"]
