"""Mini README: Finance utilities for recording water-sales activity.

This package holds the in-memory ledger that collects expenses and sales
for a single report, together with the money helpers that keep amounts as
``Decimal`` values and format them consistently for every artefact.
"""

from .ledger import EntryKind, Ledger, LedgerEntry, format_money, parse_amount

__all__ = ["EntryKind", "Ledger", "LedgerEntry", "format_money", "parse_amount"]
