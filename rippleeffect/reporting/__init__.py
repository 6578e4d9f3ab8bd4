"""Mini README: Report compilation for Ripple Effect.

``compiler`` turns a ledger snapshot into a ``CompiledReport`` and
``locale`` holds the language and currency tables. Saved reports
(``reporting.saved``) and the session workflow (``reporting.session``)
depend on the export renderers, so import them from their modules directly.
"""

from .compiler import CompiledReport, ReportCompiler
from .locale import Currency, Locale, STRINGS, text

__all__ = ["CompiledReport", "Currency", "Locale", "ReportCompiler", "STRINGS", "text"]
