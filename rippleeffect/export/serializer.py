"""Mini README: Render compiled reports into attachable file artefacts.

Structure:
    * Artifact - filename, MIME type and UTF-8 bytes of one attachment.
    * render_text_document - localised, human-readable report body.
    * render_csv - machine-readable ledger export (English type column).
    * sanitize_file_stem - filesystem-safe stem derived from a report name.
    * build_artifacts / build_text_artifact - bundle renders for sharing.

All renderers are pure functions of their inputs. The CSV goes through the
standard ``csv`` writer so descriptions containing commas, quotes or line
breaks are quoted instead of corrupting the row layout.
"""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from typing import List, Optional

from ..finance import format_money
from ..logging_utils import get_logger
from ..reporting.compiler import CompiledReport
from ..reporting.locale import labels

LOGGER = get_logger(__name__)

CSV_HEADER = ("Description", "Amount", "Currency", "Type")
TEXT_MIME_TYPE = "text/plain"
CSV_MIME_TYPE = "text/csv"

_UNSAFE_FILENAME_CHARACTERS = re.compile(r"[^A-Za-z0-9.-]")


@dataclass(frozen=True, slots=True)
class Artifact:
    """A serialised file handed to the share provider."""

    filename: str
    mime_type: str
    content: bytes

    @property
    def extension(self) -> str:
        return self.filename.rsplit(".", 1)[-1] if "." in self.filename else ""


def sanitize_file_stem(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9.-]`` with ``-``."""

    return _UNSAFE_FILENAME_CHARACTERS.sub("-", name)


def render_text_document(report: CompiledReport) -> str:
    """Render the report body shown to people and attached as ``.txt``."""

    strings = labels(report.locale)
    lines = [
        strings["document_header"],
        f"{strings['total_costs']} {report.money(report.total_cost)}",
        f"{strings['total_profit']} {report.money(report.total_profit)}",
        f"{strings['net']} {report.money(report.net)}",
        "",
        strings["breakdown"],
    ]
    for entry in report.entries:
        sign = "-" if entry.is_expense else "+"
        lines.append(f"- {entry.description}: {sign}{report.money(entry.amount)}")
    lines.extend(["", strings["user_summary"], report.user_summary_text])
    return "\n".join(lines)


def render_csv(report: CompiledReport) -> Optional[str]:
    """Render the ledger rows, or ``None`` when the report has no entries."""

    if not report.entries:
        return None
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for entry in report.entries:
        writer.writerow(
            (entry.description, format_money(entry.amount), report.currency_code, entry.kind.label)
        )
    return buffer.getvalue()


def build_text_artifact(name: str, content: str) -> Artifact:
    """Wrap free text (e.g. a saved report body) as a ``.txt`` attachment."""

    return Artifact(
        filename=f"{sanitize_file_stem(name)}.txt",
        mime_type=TEXT_MIME_TYPE,
        content=content.encode("utf-8"),
    )


def build_artifacts(report: CompiledReport) -> List[Artifact]:
    """Render the text document and, when entries exist, the CSV export."""

    artifacts = [build_text_artifact(report.name, render_text_document(report))]
    csv_content = render_csv(report)
    if csv_content is not None:
        artifacts.append(
            Artifact(
                filename=f"{sanitize_file_stem(report.name)}.csv",
                mime_type=CSV_MIME_TYPE,
                content=csv_content.encode("utf-8"),
            )
        )
    LOGGER.debug(
        "Built %s artefacts for '%s': %s",
        len(artifacts),
        report.name,
        [artifact.filename for artifact in artifacts],
    )
    return artifacts
