# -*- coding: utf-8 -*-
"""
Command-line entry point: print the top traders of one token.

Orchestrates: logging, container, one get_top_traders call, HTTP session shutdown.
Logs go to stderr; the result goes to stdout (a table, or the full payload with --json).

Run with: python -m token_top_traders.main solana <mint> [--json]

Notebook usage:
    from token_top_traders.main import run
    result = await run("solana", "<mint>")
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

import structlog

from token_top_traders.DI import Container
from token_top_traders.config import supported_chain_ids
from token_top_traders.logging import configure_logging
from token_top_traders.models.result import TopTradersResult
from token_top_traders.utils import mask_address


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="token-top-traders",
        description="Rank the most profitable recent traders of a token.",
    )
    parser.add_argument("chain", help=f"chain id, one of: {', '.join(supported_chain_ids())}")
    parser.add_argument("token", help="token address (mint on Solana)")
    parser.add_argument("--json", action="store_true", help="print the full result as JSON")
    return parser.parse_args(argv)


def format_table(result: TopTradersResult) -> str:
    """Plain-text rendering of a result for terminals."""
    meta = result.meta
    lines = [
        f"{meta.chain_id} {meta.token_address}  price=${meta.price_usd:,.6g}  source={meta.source}",
        meta.disclaimer,
    ]
    if not meta.supported:
        lines.append(f"Unsupported chain. Supported: {', '.join(meta.supported_chains or ())}")
    if result.traders:
        lines.append("")
        lines.append(f"{'#':>3}  {'wallet':<15} {'profit $':>14} {'volume $':>14} {'trades':>6}")
        for t in result.traders:
            lines.append(
                f"{t.rank:>3}  {mask_address(t.wallet):<15} {t.profit_usd:>14,.2f} "
                f"{t.volume_usd:>14,.2f} {t.trade_count or '-':>6}"
            )
    return "\n".join(lines)


async def run(chain_id: str, token_address: str) -> TopTradersResult:
    configure_logging()
    logger = structlog.get_logger("main")
    container = Container()
    service = container.top_traders_service()
    http_client = container.http_client()
    try:
        result = await service.get_top_traders(chain_id, token_address)
    finally:
        await http_client.aclose()
    logger.info(
        "main_top_traders_done",
        source=result.meta.source,
        tier=result.meta.tier.value,
        traders_count=len(result.traders),
    )
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    result = asyncio.run(run(args.chain, args.token))
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_table(result))
    return 0 if result.meta.supported else 2


__all__ = ["run", "main", "format_table"]

if __name__ == "__main__":
    sys.exit(main())
