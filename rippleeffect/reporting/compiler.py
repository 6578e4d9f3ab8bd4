"""Mini README: Compile a ledger snapshot into an immutable report summary.

Structure:
    * CompiledReport - frozen aggregation of totals, entries and metadata.
    * ReportCompiler - pure compiler that reads an injectable clock once.

The compiled report copies the ledger entries so later ledger edits (or the
clear that follows a submission) cannot change what was submitted. Net is
``total_profit - total_cost`` and is never clamped, so a losing period shows
a negative net.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..finance import EntryKind, LedgerEntry, format_money
from ..logging_utils import get_logger
from .locale import Currency, Locale, text

LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class CompiledReport:
    """Snapshot of one session's ledger at submission time."""

    title: str
    created_at: datetime
    currency: Currency
    total_cost: Decimal
    total_profit: Decimal
    net: Decimal
    entries: Tuple[LedgerEntry, ...]
    user_summary_text: str
    locale: Locale

    @property
    def name(self) -> str:
        return self.title

    @property
    def currency_code(self) -> str:
        return self.currency.code

    @property
    def currency_symbol(self) -> str:
        return self.currency.symbol

    def money(self, amount: Decimal) -> str:
        """Format an amount with this report's currency symbol."""

        return f"{self.currency.symbol}{format_money(amount)}"

    def as_dict(self) -> Dict[str, object]:
        """Export the report with serialisable values."""

        return {
            "title": self.title,
            "created_at": self.created_at.isoformat(),
            "currency_code": self.currency_code,
            "currency_symbol": self.currency_symbol,
            "total_cost": format_money(self.total_cost),
            "total_profit": format_money(self.total_profit),
            "net": format_money(self.net),
            "entries": [entry.as_dict() for entry in self.entries],
            "user_summary_text": self.user_summary_text,
            "locale": self.locale.value,
        }


class ReportCompiler:
    """Aggregate ledger entries into a ``CompiledReport``."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or datetime.now

    def compile(
        self,
        ledger_snapshot: Iterable[LedgerEntry],
        currency: Currency,
        locale: Locale,
        user_summary_text: str = "",
        title_template: Optional[str] = None,
    ) -> CompiledReport:
        """Compile the snapshot; the clock is read exactly once."""

        entries = tuple(ledger_snapshot)
        total_cost = sum(
            (entry.amount for entry in entries if entry.kind is EntryKind.EXPENSE),
            Decimal("0"),
        )
        total_profit = sum(
            (entry.amount for entry in entries if entry.kind is EntryKind.SALE),
            Decimal("0"),
        )
        created_at = self._clock()
        locale = Locale(locale)
        template = title_template or text(locale, "title_format")
        report = CompiledReport(
            title=created_at.strftime(template),
            created_at=created_at,
            currency=currency,
            total_cost=total_cost,
            total_profit=total_profit,
            net=total_profit - total_cost,
            entries=entries,
            user_summary_text=user_summary_text or "",
            locale=locale,
        )
        LOGGER.info(
            "Compiled '%s' with %s entries (cost=%s profit=%s net=%s %s)",
            report.title,
            len(entries),
            format_money(total_cost),
            format_money(total_profit),
            format_money(report.net),
            currency.code,
        )
        return report
