"""Mini README: Language and currency tables for rendered reports.

Structure:
    * Locale - English or Spanish display language.
    * Currency - supported currencies with symbols and display names.
    * STRINGS / text - static ``(locale, key)`` lookup for report labels.

The tables are read-only. Only labels change with the locale; numbers are
always formatted by ``finance.format_money`` so a Spanish report still uses
``.`` as the decimal mark.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Locale(str, Enum):
    """Display language of a report."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def from_str(cls, value: str) -> "Locale":
        """Accept language codes or names in any casing."""

        normalised = str(value).strip().lower()
        aliases = {"english": cls.ENGLISH, "spanish": cls.SPANISH, "español": cls.SPANISH}
        if normalised in aliases:
            return aliases[normalised]
        try:
            return cls(normalised)
        except ValueError as error:
            raise ValueError(f"Unsupported locale: {value}") from error


class Currency(Enum):
    """Currencies a session can record amounts in."""

    USD = ("USD", "$", "US Dollar", "Dólar EEUU")
    GTQ = ("GTQ", "Q", "Quetzal", "Quetzal")
    HNL = ("HNL", "L", "Lempira", "Lempira")

    def __init__(self, code: str, symbol: str, name_en: str, name_es: str) -> None:
        self.code = code
        self.symbol = symbol
        self.name_en = name_en
        self.name_es = name_es

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        try:
            return cls[str(code).strip().upper()]
        except KeyError as error:
            raise ValueError(f"Unsupported currency: {code}") from error

    def display_name(self, locale: Locale) -> str:
        name = self.name_es if locale is Locale.SPANISH else self.name_en
        return f"{self.symbol} {self.code} ({name})"


STRINGS: Dict[Tuple[Locale, str], str] = {
    (Locale.ENGLISH, "document_header"): "Accounting Summary:",
    (Locale.SPANISH, "document_header"): "Resumen de Contabilidad:",
    (Locale.ENGLISH, "total_costs"): "Total Costs:",
    (Locale.SPANISH, "total_costs"): "Costos Totales:",
    (Locale.ENGLISH, "total_profit"): "Total Profit:",
    (Locale.SPANISH, "total_profit"): "Ganancias Totales:",
    (Locale.ENGLISH, "net"): "Net:",
    (Locale.SPANISH, "net"): "Neto:",
    (Locale.ENGLISH, "breakdown"): "Breakdown:",
    (Locale.SPANISH, "breakdown"): "Desglose:",
    (Locale.ENGLISH, "user_summary"): "User Summary:",
    (Locale.SPANISH, "user_summary"): "Resumen del Usuario:",
    (Locale.ENGLISH, "title_format"): "Report %m-%d-%y",
    (Locale.SPANISH, "title_format"): "Informe %d-%m-%y",
    (Locale.ENGLISH, "untitled_report"): "Untitled Report",
    (Locale.SPANISH, "untitled_report"): "Informe sin título",
    (Locale.ENGLISH, "status_draft"): "Draft",
    (Locale.SPANISH, "status_draft"): "Borrador",
    (Locale.ENGLISH, "status_in_progress"): "In Progress",
    (Locale.SPANISH, "status_in_progress"): "En Progreso",
    (Locale.ENGLISH, "status_completed"): "Completed",
    (Locale.SPANISH, "status_completed"): "Completado",
}


def text(locale: Locale, key: str) -> str:
    """Resolve a label, raising ``KeyError`` for unknown keys."""

    try:
        return STRINGS[(Locale(locale), key)]
    except KeyError as error:
        raise KeyError(f"No '{key}' string for locale {locale}") from error


def labels(locale: Locale) -> Dict[str, str]:
    """Return every label for one locale, resolved once per render."""

    resolved = Locale(locale)
    return {key: value for (entry_locale, key), value in STRINGS.items() if entry_locale is resolved}
