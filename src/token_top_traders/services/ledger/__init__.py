# -*- coding: utf-8 -*-
"""FIFO cost-basis ledger (sync, pure)."""

from token_top_traders.services.ledger.ledger_service import FifoLedgerService

__all__ = ["FifoLedgerService"]
