"""Mini README: Tests covering the session ledger.

Structure:
    * totals reconcile with the amounts that were added, split by kind.
    * invalid amounts and blank descriptions never change the ledger.
    * remove is idempotent; replace validates before editing.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from rippleeffect.exceptions import InvalidAmountError, InvalidDescriptionError
from rippleeffect.finance import EntryKind, Ledger, LedgerEntry, format_money, parse_amount


def test_totals_reconcile_with_added_amounts() -> None:
    """Expenses plus sales equal everything added, and each kind sums on its own."""

    ledger = Ledger()
    expenses = ["45.00", "12.10", "0.05"]
    sales = ["120.00", "3.33"]
    for index, amount in enumerate(expenses):
        ledger.add(f"Expense {index}", amount, EntryKind.EXPENSE)
    for index, amount in enumerate(sales):
        ledger.add(f"Sale {index}", amount, "sale")

    assert ledger.total_expenses() == Decimal("57.15")
    assert ledger.total_sales() == Decimal("123.33")
    assert ledger.total_expenses() + ledger.total_sales() == sum(
        (Decimal(amount) for amount in expenses + sales), Decimal("0")
    )
    assert [entry.description for entry in ledger] == [
        "Expense 0",
        "Expense 1",
        "Expense 2",
        "Sale 0",
        "Sale 1",
    ]


@pytest.mark.parametrize("amount", ["0", "-5", "abc", "", "  ", "nan", "inf", None, True])
def test_add_refuses_invalid_amounts(amount: object) -> None:
    """Refused adds return None and leave the ledger length unchanged."""

    ledger = Ledger()
    ledger.add("Bottles", "1.00", EntryKind.EXPENSE)

    assert ledger.add("Bottles", amount, EntryKind.EXPENSE) is None
    assert len(ledger) == 1


def test_add_refuses_blank_description() -> None:
    ledger = Ledger()

    assert ledger.add("   ", "5", EntryKind.SALE) is None
    assert len(ledger) == 0


def test_strict_add_raises_typed_errors() -> None:
    """Callers that report errors themselves can ask for the exception."""

    ledger = Ledger()

    with pytest.raises(InvalidAmountError) as excinfo:
        ledger.add("Bottles", "-1", EntryKind.EXPENSE, strict=True)
    assert excinfo.value.code == "INVALID_AMOUNT"
    with pytest.raises(InvalidDescriptionError):
        ledger.add("", "1", EntryKind.EXPENSE, strict=True)
    assert len(ledger) == 0


def test_remove_is_idempotent() -> None:
    ledger = Ledger()
    keep = ledger.add("Water sale", "120", EntryKind.SALE)
    drop = ledger.add("Bottles", "45", EntryKind.EXPENSE)

    assert ledger.remove(drop.entry_id) is True
    after_first = ledger.entries()
    assert ledger.remove(drop.entry_id) is False
    assert ledger.remove("missing") is False
    assert ledger.entries() == after_first == (keep,)


def test_replace_reappends_with_same_id() -> None:
    """Editing removes the entry and appends the edited copy at the end."""

    ledger = Ledger()
    first = ledger.add("Bottles", "45", EntryKind.EXPENSE)
    ledger.add("Water sale", "120", EntryKind.SALE)

    edited = ledger.replace(first.entry_id, amount="50.5", kind="sale")

    assert edited.entry_id == first.entry_id
    assert edited.description == "Bottles"
    assert edited.amount == Decimal("50.5")
    assert ledger.entries()[-1] == edited
    assert ledger.total_expenses() == Decimal("0")


def test_replace_rejects_invalid_edit_without_removing() -> None:
    ledger = Ledger()
    entry = ledger.add("Bottles", "45", EntryKind.EXPENSE)

    with pytest.raises(InvalidAmountError):
        ledger.replace(entry.entry_id, amount="zero")
    with pytest.raises(KeyError):
        ledger.replace("missing", amount="1")
    assert ledger.entries() == (entry,)


def test_clear_and_export_snapshot() -> None:
    ledger = Ledger()
    ledger.add("Bottles", "45", EntryKind.EXPENSE)
    ledger.add("Water sale", 120, EntryKind.SALE)

    snapshot = ledger.export_snapshot()
    assert snapshot["total_expenses"] == "45.00"
    assert snapshot["total_sales"] == "120.00"
    assert snapshot["entries"][1]["kind"] == "sale"

    ledger.clear()
    assert len(ledger) == 0
    assert ledger.total_sales() == Decimal("0")


def test_money_helpers_use_fixed_format() -> None:
    assert parse_amount(" 2.50 ") == Decimal("2.50")
    assert parse_amount(0.1) == Decimal("0.1")
    assert format_money(Decimal("1234.5")) == "1234.50"
    assert format_money(Decimal("0.005")) == "0.01"
    assert format_money(Decimal("-75")) == "-75.00"


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-12.50")])
def test_preloaded_entries_must_have_positive_amounts(amount: Decimal) -> None:
    entry = LedgerEntry(entry_id="seed", description="Bottles", amount=amount, kind=EntryKind.EXPENSE)

    with pytest.raises(InvalidAmountError):
        Ledger(entries=[entry])


def test_preloaded_entries_count_towards_totals() -> None:
    entry = LedgerEntry(entry_id="seed", description="Water sale", amount=Decimal("30"), kind=EntryKind.SALE)
    ledger = Ledger(entries=[entry])

    assert ledger.total_sales() == Decimal("30")
    assert ledger.get("seed") is entry
