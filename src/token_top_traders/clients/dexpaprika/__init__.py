"""DexPaprika client."""

from token_top_traders.clients.dexpaprika.dexpaprika import (
    DexPaprikaClient,
    DexPaprikaSummarySchema,
    DexPaprikaTokenSchema,
)

__all__ = ["DexPaprikaClient", "DexPaprikaSummarySchema", "DexPaprikaTokenSchema"]
