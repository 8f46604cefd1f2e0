"""GeckoTerminal response types (JSON:API resources, snake_case attributes)."""

from __future__ import annotations

from typing import TypedDict


class GeckoVolumeSchema(TypedDict, total=False):
    m5: str
    h1: str
    h6: str
    h24: str


class GeckoPoolAttributesSchema(TypedDict, total=False):
    address: str
    name: str
    base_token_price_usd: str
    quote_token_price_usd: str
    reserve_in_usd: str
    volume_usd: GeckoVolumeSchema


class GeckoRelationshipDataSchema(TypedDict, total=False):
    id: str
    """Prefixed token id, e.g. "solana_<mint>" or "eth_0x..."."""
    type: str


class GeckoRelationshipSchema(TypedDict, total=False):
    data: GeckoRelationshipDataSchema


class GeckoPoolRelationshipsSchema(TypedDict, total=False):
    base_token: GeckoRelationshipSchema
    quote_token: GeckoRelationshipSchema


class GeckoPoolSchema(TypedDict, total=False):
    """GET /networks/{network}/tokens/{token}/pools item."""

    id: str
    type: str
    attributes: GeckoPoolAttributesSchema
    relationships: GeckoPoolRelationshipsSchema


class GeckoTradeAttributesSchema(TypedDict, total=False):
    block_number: int
    block_timestamp: str
    tx_hash: str
    tx_from_address: str
    kind: str
    """"buy" or "sell", relative to the pool's base token."""
    from_token_amount: str
    to_token_amount: str
    price_from_in_usd: str
    price_to_in_usd: str
    volume_in_usd: str
    from_token_address: str
    to_token_address: str


class GeckoTradeSchema(TypedDict, total=False):
    """GET /networks/{network}/pools/{pool}/trades item."""

    id: str
    type: str
    attributes: GeckoTradeAttributesSchema
