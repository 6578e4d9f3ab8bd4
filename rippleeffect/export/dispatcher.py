"""Mini README: Hand rendered reports to a share provider.

Structure:
    * EMAIL_PATTERN / is_valid_recipient - recipient address validation.
    * ShareRequest - the message handed to the provider.
    * ExportDispatcher - validates, renders, delegates and maps the outcome.

``send`` never raises for expected problems. An invalid recipient yields
``Failure(kind=INVALID_RECIPIENT)`` before the provider is touched, so the
caller can correct the address and call ``send`` again. Anything that goes
wrong while rendering or inside the provider is logged and returned as
``Failure(kind=EXPORT_FAILURE)`` with a readable reason. There is no retry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, Union

from ..exceptions import ExportFailure, InvalidRecipientError
from ..logging_utils import get_logger
from ..reporting.compiler import CompiledReport
from ..sharing.base import Failure, FailureKind, Outcome, ShareProvider, Success
from .serializer import Artifact, build_artifacts, build_text_artifact

LOGGER = get_logger(__name__)

WILDCARD_MIME_TYPE = "*/*"
SUBJECT_PREFIX = "Ripple Effect Report: "

# Same grammar as Android's Patterns.EMAIL_ADDRESS.
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)


class TextReport(Protocol):
    """A report that only carries free text, such as a saved report."""

    name: str
    content: str


ShareableReport = Union[CompiledReport, TextReport]


def is_valid_recipient(recipient: str) -> bool:
    return bool(recipient) and EMAIL_PATTERN.fullmatch(recipient) is not None


def validate_recipient(recipient: Optional[str]) -> str:
    """Return the trimmed address or raise ``InvalidRecipientError``."""

    trimmed = (recipient or "").strip()
    if not is_valid_recipient(trimmed):
        raise InvalidRecipientError(recipient or "")
    return trimmed


@dataclass(frozen=True, slots=True)
class ShareRequest:
    """Everything the share provider receives for one report."""

    recipient: str
    subject: str
    body_text: str
    attachments: Tuple[Artifact, ...]

    @classmethod
    def for_report(cls, recipient: str, report_name: str, attachments: Sequence[Artifact]) -> "ShareRequest":
        return cls(
            recipient=recipient,
            subject=f"{SUBJECT_PREFIX}{report_name}",
            body_text=f"Please find attached the report for {report_name}.",
            attachments=tuple(attachments),
        )


class ExportDispatcher:
    """Send report artefacts through a ``ShareProvider``."""

    def __init__(self, provider: ShareProvider, *, wildcard_mime: bool = False) -> None:
        self.provider = provider
        self.wildcard_mime = wildcard_mime

    @classmethod
    def from_settings(cls, settings: object = None) -> "ExportDispatcher":
        """Build a dispatcher for the provider named in the settings."""

        from ..configuration import get_settings
        from ..sharing.registry import REGISTRY

        settings = settings or get_settings()
        if settings.share_provider.lower() not in REGISTRY.available_providers():
            REGISTRY.discover_plugins()
        provider = REGISTRY.create(settings.share_provider, **settings.share_provider_options())
        return cls(provider, wildcard_mime=settings.wildcard_mime)

    def _render(self, report: ShareableReport) -> list[Artifact]:
        if isinstance(report, CompiledReport):
            return build_artifacts(report)
        return [build_text_artifact(report.name, report.content)]

    def _with_wildcard(self, artifacts: Sequence[Artifact]) -> list[Artifact]:
        return [
            Artifact(filename=artifact.filename, mime_type=WILDCARD_MIME_TYPE, content=artifact.content)
            for artifact in artifacts
        ]

    def send(
        self,
        recipient: Optional[str],
        report: ShareableReport,
        artifacts: Optional[Sequence[Artifact]] = None,
    ) -> Outcome:
        """Share the report with ``recipient`` and report what happened."""

        try:
            address = validate_recipient(recipient)
        except InvalidRecipientError as error:
            LOGGER.warning("Refusing to share '%s': %s", report.name, error)
            return Failure(reason=str(error), kind=FailureKind.INVALID_RECIPIENT)

        try:
            files = list(artifacts) if artifacts is not None else self._render(report)
            if self.wildcard_mime:
                files = self._with_wildcard(files)
            request = ShareRequest.for_report(address, report.name, files)
            outcome = self.provider.share_files(
                request.recipient,
                request.subject,
                request.body_text,
                request.attachments,
            )
        except ExportFailure as error:
            LOGGER.warning("Sharing '%s' via %s failed: %s", report.name, self.provider.provider_name, error.reason)
            return Failure(reason=error.reason, kind=FailureKind.EXPORT_FAILURE)
        except Exception as error:
            LOGGER.exception("Sharing '%s' via %s failed", report.name, self.provider.provider_name)
            reason = str(error) or error.__class__.__name__
            return Failure(reason=reason, kind=FailureKind.EXPORT_FAILURE)

        if isinstance(outcome, Failure):
            LOGGER.warning("Provider %s refused '%s': %s", self.provider.provider_name, report.name, outcome.reason)
            return outcome
        LOGGER.info(
            "Shared '%s' with %s (%s attachments)", report.name, address, len(request.attachments)
        )
        return Success(detail=request)
