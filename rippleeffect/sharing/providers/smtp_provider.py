"""Mini README: SMTP share provider.

Structure:
    * SmtpShareProvider - submits report emails to an SMTP relay.

Connection, authentication and refusal errors are raised to the export
dispatcher, which reports them as a ``Failure`` without retrying.
"""

from __future__ import annotations

import smtplib
from typing import Dict, Optional, Sequence

from ..base import Outcome, ShareProvider, Success
from ..message import compose_message
from ..registry import REGISTRY
from ...exceptions import ExportFailure
from ...export.serializer import Artifact
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class SmtpShareProvider(ShareProvider):
    """Send the message through an SMTP relay."""

    provider_name = "smtp"

    def __init__(
        self,
        host: str = "localhost",
        port: int = 25,
        sender: str = "reports@rippleeffect.local",
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def share_files(
        self,
        recipient: str,
        subject: str,
        body_text: str,
        attachments: Sequence[Artifact],
    ) -> Outcome:
        message = compose_message(self.sender, recipient, subject, body_text, attachments)
        LOGGER.info("Submitting report email to %s via %s:%s", recipient, self.host, self.port)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as client:
            if self.use_tls:
                client.starttls()
            if self.username:
                client.login(self.username, self.password or "")
            refused = client.send_message(message)
        if refused:
            raise ExportFailure(f"Relay refused recipients: {', '.join(sorted(refused))}")
        return Success(detail=f"{self.host}:{self.port}")

    def metadata(self) -> Dict[str, str]:
        return {"provider": self.provider_name, "relay": f"{self.host}:{self.port}"}


REGISTRY.register(SmtpShareProvider)
