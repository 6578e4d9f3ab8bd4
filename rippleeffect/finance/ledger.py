"""Mini README: In-memory ledger of expense and sale entries.

Structure:
    * EntryKind - enum separating expenses from sales.
    * LedgerEntry - frozen dataclass describing a single recorded amount.
    * Ledger - ordered, append-only collection with running totals.
    * parse_amount / format_money - money helpers shared with the reports.

A ledger lives for exactly one reporting session: it starts empty, collects
entries in display order, and is cleared once the session submits its
report. Amounts are ``Decimal`` so totals reconcile to the cent. Invalid
input is refused at ``add`` without touching the stored entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace as dataclass_replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from uuid import uuid4

from ..exceptions import InvalidAmountError, InvalidDescriptionError, InvalidEntryError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CENT = Decimal("0.01")


class EntryKind(str, Enum):
    """Enumerate the supported entry categories."""

    EXPENSE = "expense"
    SALE = "sale"

    @classmethod
    def from_str(cls, value: str) -> "EntryKind":
        """Coerce arbitrary casing into a valid entry kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry kind: {value}") from error

    @property
    def label(self) -> str:
        """English label used by machine-readable exports."""

        return "Expense" if self is EntryKind.EXPENSE else "Sale"


def parse_amount(value: object) -> Decimal:
    """Parse user input into a strictly positive, finite ``Decimal``."""

    if isinstance(value, bool):
        raise InvalidAmountError(value)
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, (int, float)):
            amount = Decimal(str(value))
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            raise InvalidAmountError(value)
    except InvalidOperation as error:
        raise InvalidAmountError(value) from error
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(value)
    return amount


def format_money(amount: Decimal) -> str:
    """Render an amount with two decimals, '.' separator and no grouping."""

    return f"{Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP):.2f}"


def _clean_description(value: object) -> str:
    description = "" if value is None else str(value).strip()
    if not description:
        raise InvalidDescriptionError(value)
    return description


def _coerce_kind(value: object) -> EntryKind:
    if isinstance(value, EntryKind):
        return value
    try:
        return EntryKind.from_str(str(value))
    except ValueError as error:
        raise InvalidEntryError(str(error)) from error


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """A single expense or sale recorded in a ledger."""

    entry_id: str
    description: str
    amount: Decimal
    kind: EntryKind

    @property
    def is_expense(self) -> bool:
        return self.kind is EntryKind.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with serialisable values."""

        return {
            "entry_id": self.entry_id,
            "description": self.description,
            "amount": format_money(self.amount),
            "kind": self.kind.value,
        }


class Ledger:
    """Ordered collection of entries for one reporting session."""

    def __init__(self, entries: Optional[Iterable[LedgerEntry]] = None) -> None:
        self._entries: List[LedgerEntry] = []
        for entry in entries or ():
            self._register(entry)
        LOGGER.debug("Ledger initialised with %s entries", len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(tuple(self._entries))

    def _register(self, entry: LedgerEntry) -> None:
        """Append an entry ensuring identifiers remain unique and amounts positive."""

        parse_amount(entry.amount)
        _clean_description(entry.description)
        if any(existing.entry_id == entry.entry_id for existing in self._entries):
            raise ValueError(f"Entry {entry.entry_id} already exists.")
        self._entries.append(entry)

    def add(
        self,
        description: str,
        amount: object,
        kind: EntryKind | str,
        *,
        strict: bool = False,
    ) -> Optional[LedgerEntry]:
        """Append a new entry, or refuse it when the input is invalid.

        A refused add leaves the ledger untouched. By default the refusal is
        logged and ``None`` is returned; ``strict=True`` re-raises the
        ``InvalidEntryError`` for callers that report it themselves.
        """

        try:
            entry = LedgerEntry(
                entry_id=str(uuid4()),
                description=_clean_description(description),
                amount=parse_amount(amount),
                kind=_coerce_kind(kind),
            )
        except InvalidEntryError as error:
            LOGGER.warning("Refused ledger entry (%s): %s", error.code, error)
            if strict:
                raise
            return None
        self._register(entry)
        LOGGER.info("Recorded %s %s for '%s'", entry.kind.value, entry.amount, entry.description)
        return entry

    def get(self, entry_id: str) -> LedgerEntry:
        """Retrieve an entry, raising informative errors when missing."""

        for entry in self._entries:
            if entry.entry_id == entry_id:
                return entry
        raise KeyError(f"Entry {entry_id} not found")

    def remove(self, entry_id: str) -> bool:
        """Remove the entry if present; unknown ids are ignored."""

        for index, entry in enumerate(self._entries):
            if entry.entry_id == entry_id:
                del self._entries[index]
                LOGGER.debug("Removed entry %s", entry_id)
                return True
        return False

    def replace(
        self,
        entry_id: str,
        *,
        description: Optional[str] = None,
        amount: object = None,
        kind: EntryKind | str | None = None,
    ) -> LedgerEntry:
        """Edit an entry by removing it and re-appending the edited copy.

        The edited values are validated before anything is removed, so a
        refused edit keeps the original entry in place.
        """

        original = self.get(entry_id)
        overrides: Dict[str, object] = {}
        if description is not None:
            overrides["description"] = _clean_description(description)
        if amount is not None:
            overrides["amount"] = parse_amount(amount)
        if kind is not None:
            overrides["kind"] = _coerce_kind(kind)
        edited = dataclass_replace(original, **overrides)
        self.remove(entry_id)
        self._entries.append(edited)
        LOGGER.info("Replaced entry %s", entry_id)
        return edited

    def entries(self) -> Tuple[LedgerEntry, ...]:
        """Return the entries in insertion order."""

        return tuple(self._entries)

    snapshot = entries

    def total_expenses(self) -> Decimal:
        return sum(
            (entry.amount for entry in self._entries if entry.kind is EntryKind.EXPENSE),
            Decimal("0"),
        )

    def total_sales(self) -> Decimal:
        return sum(
            (entry.amount for entry in self._entries if entry.kind is EntryKind.SALE),
            Decimal("0"),
        )

    def clear(self) -> None:
        """Empty the ledger after its report has been submitted."""

        LOGGER.info("Clearing ledger with %s entries", len(self._entries))
        self._entries.clear()

    def export_snapshot(self) -> Dict[str, object]:
        """Export entries and totals for JSON responses."""

        return {
            "entries": [entry.as_dict() for entry in self._entries],
            "total_expenses": format_money(self.total_expenses()),
            "total_sales": format_money(self.total_sales()),
        }
