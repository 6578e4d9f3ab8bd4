"""Mini README: One reporting session from first entry to submitted report.

Structure:
    * SubmissionResult - compiled report plus the saved record it produced.
    * ReportingSession - owns the live ledger, currency, language and the
      optional free-text summary.

``submit`` enforces the one-ledger-per-report lifecycle: it compiles a
snapshot, records it in the catalogue, and only then clears the ledger and
the summary. If compiling or saving raises, the ledger is left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..finance import EntryKind, Ledger, LedgerEntry, format_money
from ..logging_utils import get_logger
from .compiler import CompiledReport, ReportCompiler
from .locale import Currency, Locale
from .saved import DEFAULT_OWNER, SavedReport, SavedReportCatalogue

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    compiled: CompiledReport
    saved: SavedReport


@dataclass
class ReportingSession:
    """Live state of the accounting screen."""

    currency: Currency = Currency.USD
    locale: Locale = Locale.ENGLISH
    summary_text: str = ""
    ledger: Ledger = field(default_factory=Ledger)

    def record_expense(self, description: str, amount: object) -> Optional[LedgerEntry]:
        return self.ledger.add(description, amount, EntryKind.EXPENSE)

    def record_sale(self, description: str, amount: object) -> Optional[LedgerEntry]:
        return self.ledger.add(description, amount, EntryKind.SALE)

    def totals(self) -> Dict[str, str]:
        """Formatted cost, profit and net for the live summary cards."""

        cost = self.ledger.total_expenses()
        profit = self.ledger.total_sales()
        return {
            "currency_code": self.currency.code,
            "currency_symbol": self.currency.symbol,
            "total_cost": format_money(cost),
            "total_profit": format_money(profit),
            "net": format_money(profit - cost),
        }

    def submit(
        self,
        compiler: ReportCompiler,
        catalogue: SavedReportCatalogue,
        owner: str = DEFAULT_OWNER,
        title_template: Optional[str] = None,
    ) -> SubmissionResult:
        """Compile, save, then clear the ledger for the next report."""

        compiled = compiler.compile(
            self.ledger.snapshot(),
            self.currency,
            self.locale,
            self.summary_text,
            title_template,
        )
        saved = catalogue.add_from_compiled(compiled, owner=owner)
        self.ledger.clear()
        self.summary_text = ""
        LOGGER.info("Session submitted report '%s'", compiled.title)
        return SubmissionResult(compiled=compiled, saved=saved)
