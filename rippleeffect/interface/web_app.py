"""Mini README: FastAPI-powered report centre for Ripple Effect.

Structure:
    * create_application - application factory wiring routes and templates.
    * Session state - one in-memory reporting session per process.

The interface mirrors the two tabs of the mobile app: the accounting tab
(ledger entries, currency, language, summary, submit) and the reports tab
(saved reports, editor actions, email). Validation problems answer with
400/409 and a machine-readable ``code``; share transport problems answer
with 502 so clients can tell "fix your input" from "try again later".
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, TypeVar

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..configuration import RippleEffectSettings, get_settings
from ..exceptions import InvalidEntryError, ReportLockedError
from ..export import ExportDispatcher
from ..finance import EntryKind
from ..logging_utils import configure_root_logger, get_logger
from ..reporting import CompiledReport, Currency, Locale, ReportCompiler
from ..reporting.saved import SavedReportCatalogue
from ..reporting.session import ReportingSession
from ..sharing import REGISTRY, Failure, FailureKind

LOGGER = get_logger(__name__)

T = TypeVar("T")


def _parse_choice(parser: Callable[[str], T], value: str) -> T:
    try:
        return parser(value)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def create_application(
    settings: Optional[RippleEffectSettings] = None,
    *,
    dispatcher: Optional[ExportDispatcher] = None,
    catalogue: Optional[SavedReportCatalogue] = None,
    compiler: Optional[ReportCompiler] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Ripple Effect Report Centre", version="0.3.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    compiler = compiler or ReportCompiler()
    catalogue = catalogue if catalogue is not None else SavedReportCatalogue()
    dispatcher = dispatcher or ExportDispatcher.from_settings(settings)
    session = ReportingSession(
        currency=Currency.from_code(settings.default_currency),
        locale=Locale.from_str(settings.default_locale),
    )
    # Submitted reports keep their compiled snapshot so the CSV can be attached later.
    compiled_reports: Dict[str, CompiledReport] = {}

    def session_payload() -> Dict[str, object]:
        return {
            "currency": session.currency.code,
            "locale": session.locale.value,
            "summary_text": session.summary_text,
            "totals": session.totals(),
            "ledger": session.ledger.export_snapshot(),
            "entry_kinds": [kind.value for kind in EntryKind],
        }

    def lookup_report(report_id: str):
        try:
            return catalogue.get_report(report_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the accounting overview and saved reports list."""

        LOGGER.debug("Rendering dashboard with %s entries", len(session.ledger))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "session": session,
                "totals": session.totals(),
                "currencies": [
                    (currency.code, currency.display_name(session.locale)) for currency in Currency
                ],
                "reports": catalogue.list_reports(),
                "provider": dispatcher.provider.metadata(),
            },
        )

    @app.get("/session")
    async def read_session() -> JSONResponse:
        return JSONResponse(session_payload())

    @app.post("/session")
    async def update_session(
        currency: Optional[str] = Form(None),
        locale: Optional[str] = Form(None),
        summary_text: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Change currency, language or the free-text summary."""

        if currency is not None:
            session.currency = _parse_choice(Currency.from_code, currency)
        if locale is not None:
            session.locale = _parse_choice(Locale.from_str, locale)
        if summary_text is not None:
            session.summary_text = summary_text
        LOGGER.info("Session updated: currency=%s locale=%s", session.currency.code, session.locale.value)
        return JSONResponse(session_payload())

    @app.post("/ledger/entries")
    async def add_entry(
        description: str = Form(...),
        amount: str = Form(...),
        kind: str = Form(...),
    ) -> JSONResponse:
        """Record an expense or sale in the live ledger."""

        try:
            entry = session.ledger.add(description, amount, kind, strict=True)
        except InvalidEntryError as error:
            return JSONResponse({"code": error.code, "detail": str(error)}, status_code=400)
        return JSONResponse({"entry": entry.as_dict(), "totals": session.totals()}, status_code=201)

    @app.post("/ledger/entries/{entry_id}")
    async def edit_entry(
        entry_id: str,
        description: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
        kind: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Replace an entry with edited values."""

        try:
            entry = session.ledger.replace(entry_id, description=description, amount=amount, kind=kind)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except InvalidEntryError as error:
            return JSONResponse({"code": error.code, "detail": str(error)}, status_code=400)
        return JSONResponse({"entry": entry.as_dict(), "totals": session.totals()})

    @app.delete("/ledger/entries/{entry_id}")
    async def remove_entry(entry_id: str) -> JSONResponse:
        removed = session.ledger.remove(entry_id)
        return JSONResponse({"removed": removed, "totals": session.totals()})

    @app.post("/reports/submit")
    async def submit_report() -> JSONResponse:
        """Compile the ledger into a completed report and start a fresh ledger."""

        result = session.submit(compiler, catalogue, owner=settings.report_owner)
        compiled_reports[result.saved.report_id] = result.compiled
        return JSONResponse(
            {"compiled": result.compiled.as_dict(), "saved": result.saved.as_dict()},
            status_code=201,
        )

    @app.get("/reports")
    async def list_reports() -> JSONResponse:
        return JSONResponse({"reports": [report.as_dict() for report in catalogue.list_reports()]})

    @app.post("/reports")
    async def create_report() -> JSONResponse:
        report = catalogue.create_blank(session.locale, owner=settings.report_owner)
        return JSONResponse(report.as_dict(), status_code=201)

    @app.get("/reports/{report_id}")
    async def read_report(report_id: str) -> JSONResponse:
        return JSONResponse(lookup_report(report_id).as_dict())

    @app.post("/reports/{report_id}/edit")
    async def edit_report(
        report_id: str,
        name: Optional[str] = Form(None),
        content: Optional[str] = Form(None),
    ) -> JSONResponse:
        lookup_report(report_id)
        try:
            report = catalogue.update(report_id, name=name, content=content)
        except ReportLockedError as error:
            return JSONResponse({"code": error.code, "detail": str(error)}, status_code=409)
        return JSONResponse(report.as_dict())

    @app.post("/reports/{report_id}/close")
    async def close_report(report_id: str) -> JSONResponse:
        lookup_report(report_id)
        return JSONResponse(catalogue.close_editor(report_id).as_dict())

    @app.post("/reports/{report_id}/complete")
    async def complete_report(report_id: str) -> JSONResponse:
        lookup_report(report_id)
        return JSONResponse(catalogue.complete(report_id).as_dict())

    @app.delete("/reports/{report_id}")
    async def delete_report(report_id: str) -> JSONResponse:
        lookup_report(report_id)
        report = catalogue.delete(report_id)
        compiled_reports.pop(report_id, None)
        return JSONResponse({"deleted": report.report_id})

    @app.post("/reports/{report_id}/send")
    async def send_report(report_id: str, recipient: str = Form(...)) -> JSONResponse:
        """Email the report; submitted reports also carry their CSV ledger."""

        saved = lookup_report(report_id)
        report = compiled_reports.get(report_id, saved)
        outcome = dispatcher.send(recipient, report)
        if isinstance(outcome, Failure):
            status_code = 400 if outcome.kind is FailureKind.INVALID_RECIPIENT else 502
            return JSONResponse(
                {"status": "failed", "code": outcome.kind.value, "detail": outcome.reason},
                status_code=status_code,
            )
        request = outcome.detail
        return JSONResponse(
            {
                "status": "sent",
                "subject": request.subject,
                "attachments": [artifact.filename for artifact in request.attachments],
            }
        )

    @app.get("/providers")
    async def providers() -> JSONResponse:
        return JSONResponse(
            {"available": list(REGISTRY.available_providers()), "active": dispatcher.provider.metadata()}
        )

    return app
