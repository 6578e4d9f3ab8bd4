"""Mini README: Tests for the one-ledger-per-report session workflow."""

from __future__ import annotations

import pytest

from rippleeffect.reporting import Currency, Locale, ReportCompiler
from rippleeffect.reporting.saved import ReportStatus, SavedReportCatalogue
from rippleeffect.reporting.session import ReportingSession


def test_submit_saves_report_and_clears_ledger(fixed_clock) -> None:
    session = ReportingSession(currency=Currency.GTQ, locale=Locale.SPANISH, summary_text="Semana buena")
    session.record_expense("Botellas", "45")
    session.record_sale("Venta de agua", "120")
    session.record_sale("Venta", "-1")
    catalogue = SavedReportCatalogue(reports=[])

    result = session.submit(ReportCompiler(clock=fixed_clock), catalogue, owner="Ana")

    assert result.compiled.title == "Informe 07-03-24"
    assert len(result.compiled.entries) == 2
    assert result.saved in catalogue.list_reports()
    assert result.saved.owner == "Ana"
    assert result.saved.status is ReportStatus.COMPLETED
    assert "Neto: Q75.00" in result.saved.content
    assert "Semana buena" in result.saved.content
    assert len(session.ledger) == 0
    assert session.summary_text == ""


def test_failed_submit_keeps_ledger(fixed_clock) -> None:
    class BrokenCatalogue(SavedReportCatalogue):
        def add_from_compiled(self, compiled, owner="Current User"):
            raise RuntimeError("storage unavailable")

    session = ReportingSession()
    session.record_sale("Water sale", "10")

    with pytest.raises(RuntimeError):
        session.submit(ReportCompiler(clock=fixed_clock), BrokenCatalogue(reports=[]))
    assert len(session.ledger) == 1


def test_totals_are_formatted_for_display() -> None:
    session = ReportingSession(currency=Currency.HNL)
    session.record_expense("Bottles", "45")
    session.record_sale("Water sale", "20.5")

    assert session.totals() == {
        "currency_code": "HNL",
        "currency_symbol": "L",
        "total_cost": "45.00",
        "total_profit": "20.50",
        "net": "-24.50",
    }
