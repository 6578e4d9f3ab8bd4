"""Mini README: Saved reports browsed and edited from the reports list.

Structure:
    * ReportStatus - draft, in progress or completed.
    * SavedReport - mutable record holding a report's name and body text.
    * SavedReportCatalogue - ordered collection with editor operations.

Saved reports are either written from scratch in the editor or created from
a compiled report, in which case the body is the rendered text document.
Completed reports are read-only: ``update`` refuses them with
``ReportLockedError``. The newest report is always listed first.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional
from uuid import uuid4

from ..exceptions import ReportLockedError
from ..export.serializer import render_text_document
from ..logging_utils import get_logger
from .compiler import CompiledReport
from .locale import Locale, text

LOGGER = get_logger(__name__)

DEFAULT_OWNER = "Current User"


class ReportStatus(str, Enum):
    """Lifecycle of a saved report."""

    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def from_str(cls, value: str) -> "ReportStatus":
        try:
            return cls(value.strip().lower().replace(" ", "_"))
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported report status: {value}") from error

    def label(self, locale: Locale) -> str:
        return text(locale, f"status_{self.value}")


@dataclass(slots=True)
class SavedReport:
    """A user-editable report document."""

    report_id: str
    name: str
    date_created: datetime
    status: ReportStatus
    owner: str
    content: str = ""

    def as_dict(self) -> Dict[str, object]:
        return {
            "report_id": self.report_id,
            "name": self.name,
            "date_created": self.date_created.isoformat(),
            "status": self.status.value,
            "owner": self.owner,
            "content": self.content,
        }


class SavedReportCatalogue:
    """Manage the saved reports shown in the reports list."""

    def __init__(
        self,
        reports: Optional[Iterable[SavedReport]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._clock = clock or datetime.now
        self._reports: List[SavedReport] = []
        if reports is not None:
            for report in reports:
                self._register(report, newest=False)
        else:
            self._seed_demo_reports()
        LOGGER.debug("Report catalogue initialised with %s reports", len(self._reports))

    def _seed_demo_reports(self) -> None:
        """Populate the catalogue with the sample reports shown on first launch."""

        now = self._clock()
        demo_reports = [
            SavedReport(
                report_id=str(uuid4()),
                name="Annual Audit",
                date_created=now,
                status=ReportStatus.COMPLETED,
                owner="John Doe",
                content="Initial report content...",
            ),
            SavedReport(
                report_id=str(uuid4()),
                name="Q3 Summary",
                date_created=now - timedelta(days=1),
                status=ReportStatus.IN_PROGRESS,
                owner="Jane Smith",
                content="Quarterly results...",
            ),
        ]
        for report in demo_reports:
            self._register(report, newest=False)

    def _register(self, report: SavedReport, *, newest: bool = True) -> SavedReport:
        if any(existing.report_id == report.report_id for existing in self._reports):
            raise ValueError(f"Report {report.report_id} already exists.")
        if newest:
            self._reports.insert(0, report)
        else:
            self._reports.append(report)
        return report

    def __len__(self) -> int:
        return len(self._reports)

    def list_reports(self) -> List[SavedReport]:
        """Return reports newest first."""

        return list(self._reports)

    def get_report(self, report_id: str) -> SavedReport:
        for report in self._reports:
            if report.report_id == report_id:
                return report
        raise KeyError(f"Report {report_id} not found")

    def create_blank(self, locale: Locale = Locale.ENGLISH, owner: str = DEFAULT_OWNER) -> SavedReport:
        """Start an empty, untitled report in progress."""

        report = SavedReport(
            report_id=str(uuid4()),
            name=text(locale, "untitled_report"),
            date_created=self._clock(),
            status=ReportStatus.IN_PROGRESS,
            owner=owner,
        )
        LOGGER.info("Created blank report %s", report.report_id)
        return self._register(report)

    def add_from_compiled(self, compiled: CompiledReport, owner: str = DEFAULT_OWNER) -> SavedReport:
        """Record a submitted report as a completed document."""

        report = SavedReport(
            report_id=str(uuid4()),
            name=compiled.name,
            date_created=compiled.created_at,
            status=ReportStatus.COMPLETED,
            owner=owner,
            content=render_text_document(compiled),
        )
        LOGGER.info("Saved submitted report '%s' as %s", report.name, report.report_id)
        return self._register(report)

    def update(
        self,
        report_id: str,
        *,
        name: Optional[str] = None,
        content: Optional[str] = None,
    ) -> SavedReport:
        """Edit the name and/or body of a report that is not completed."""

        report = self.get_report(report_id)
        if report.status is ReportStatus.COMPLETED:
            raise ReportLockedError(report_id)
        if name is not None:
            report.name = name
        if content is not None:
            report.content = content
        LOGGER.debug("Updated report %s", report_id)
        return report

    def close_editor(self, report_id: str) -> SavedReport:
        """Leaving the editor keeps unfinished work in progress."""

        report = self.get_report(report_id)
        if report.status is not ReportStatus.COMPLETED:
            report.status = ReportStatus.IN_PROGRESS
        return report

    def complete(self, report_id: str) -> SavedReport:
        report = self.get_report(report_id)
        report.status = ReportStatus.COMPLETED
        LOGGER.info("Report %s completed", report_id)
        return report

    def delete(self, report_id: str) -> SavedReport:
        """Delete a report permanently."""

        report = self.get_report(report_id)
        self._reports.remove(report)
        LOGGER.info("Deleted report %s", report_id)
        return report
