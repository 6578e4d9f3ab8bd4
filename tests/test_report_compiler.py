"""Mini README: Tests for the report compiler.

Validates totals, the never-clamped net, deterministic output for a fixed
clock, locale-specific titles and isolation from later ledger edits.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from rippleeffect.finance import EntryKind, Ledger
from rippleeffect.reporting import Currency, Locale, ReportCompiler

FIXED_NOW = datetime(2024, 3, 7, 9, 30)


def _fixed_clock() -> datetime:
    return FIXED_NOW


def _sample_ledger() -> Ledger:
    ledger = Ledger()
    ledger.add("Bottles", "45.00", EntryKind.EXPENSE)
    ledger.add("Water sale", "120.00", EntryKind.SALE)
    return ledger


def test_compile_scenario_totals() -> None:
    report = ReportCompiler(clock=_fixed_clock).compile(
        _sample_ledger().snapshot(), Currency.USD, Locale.ENGLISH, "Good week"
    )

    assert report.total_cost == Decimal("45.00")
    assert report.total_profit == Decimal("120.00")
    assert report.net == Decimal("75.00")
    assert report.currency_code == "USD"
    assert report.currency_symbol == "$"
    assert report.created_at == FIXED_NOW
    assert report.user_summary_text == "Good week"


def test_net_is_negative_when_costs_exceed_profit() -> None:
    ledger = Ledger()
    ledger.add("Pump repair", "300", EntryKind.EXPENSE)
    ledger.add("Water sale", "120.25", EntryKind.SALE)

    report = ReportCompiler(clock=_fixed_clock).compile(ledger, Currency.GTQ, Locale.ENGLISH)

    assert report.net == Decimal("-179.75")
    assert report.net == report.total_profit - report.total_cost
    assert report.as_dict()["net"] == "-179.75"


def test_compile_is_deterministic_for_fixed_clock() -> None:
    compiler = ReportCompiler(clock=_fixed_clock)
    snapshot = _sample_ledger().snapshot()

    first = compiler.compile(snapshot, Currency.HNL, Locale.SPANISH)
    second = compiler.compile(snapshot, Currency.HNL, Locale.SPANISH)

    assert first == second


def test_titles_follow_locale_date_order() -> None:
    compiler = ReportCompiler(clock=_fixed_clock)

    english = compiler.compile((), Currency.USD, Locale.ENGLISH)
    spanish = compiler.compile((), Currency.USD, Locale.SPANISH)
    custom = compiler.compile((), Currency.USD, Locale.ENGLISH, title_template="Week of %Y-%m-%d")

    assert english.title == "Report 03-07-24"
    assert spanish.title == "Informe 07-03-24"
    assert custom.name == "Week of 2024-03-07"


def test_compiled_entries_are_decoupled_from_ledger() -> None:
    ledger = _sample_ledger()
    report = ReportCompiler(clock=_fixed_clock).compile(ledger.snapshot(), Currency.USD, Locale.ENGLISH)

    ledger.clear()
    ledger.add("Late expense", "999", EntryKind.EXPENSE)

    assert [entry.description for entry in report.entries] == ["Bottles", "Water sale"]
    assert report.total_cost == Decimal("45.00")
