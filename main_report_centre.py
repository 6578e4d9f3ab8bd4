"""Mini README: Entry point CLI for the Ripple Effect report centre.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI application under uvicorn, and ``report`` compiles entries given on
the command line, prints the text document and optionally emails it through
the configured share provider. Settings come from ``RIPPLEEFFECT_*``
environment variables when available.
"""

from __future__ import annotations

from typing import List, Optional

import typer
import uvicorn

from rippleeffect.configuration import get_settings
from rippleeffect.export import ExportDispatcher, render_text_document
from rippleeffect.finance import Ledger
from rippleeffect.logging_utils import configure_root_logger
from rippleeffect.reporting import Currency, Locale, ReportCompiler
from rippleeffect.sharing import Failure

cli = typer.Typer(help="Launch and manage the Ripple Effect report centre.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open 0.0.0.0 or ::, so point at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Ripple Effect on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "rippleeffect.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def report(
    expense: List[str] = typer.Option([], help="Expense as DESCRIPTION=AMOUNT; repeatable."),
    sale: List[str] = typer.Option([], help="Sale as DESCRIPTION=AMOUNT; repeatable."),
    currency: str = typer.Option(None, help="Currency code (USD, GTQ or HNL)."),
    locale: str = typer.Option(None, help="Report language (en or es)."),
    summary: str = typer.Option("", help="Free-text summary appended to the report."),
    recipient: Optional[str] = typer.Option(None, help="Email the report to this address."),
) -> None:
    """Compile a one-off report from the command line."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger = Ledger()
    for kind, values in (("expense", expense), ("sale", sale)):
        for value in values:
            description, separator, amount = value.rpartition("=")
            if not separator or ledger.add(description, amount, kind) is None:
                typer.echo(f"Skipping invalid {kind} '{value}'", err=True)

    compiled = ReportCompiler().compile(
        ledger.snapshot(),
        Currency.from_code(currency or settings.default_currency),
        Locale.from_str(locale or settings.default_locale),
        summary,
    )
    typer.echo(render_text_document(compiled))

    if recipient is None:
        return
    outcome = ExportDispatcher.from_settings(settings).send(recipient, compiled)
    if isinstance(outcome, Failure):
        typer.echo(f"Could not send report ({outcome.kind.value}): {outcome.reason}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Report '{compiled.name}' handed to {settings.share_provider} for {recipient.strip()}")


if __name__ == "__main__":
    cli()
