"""Mini README: Outbox share provider.

Structure:
    * OutboxShareProvider - stages attachments and an ``.eml`` message in a
      local outbox directory.

This is the default provider: it mirrors handing files to the device's
share sheet by writing everything a mail client needs into one folder per
request. Files are left in place after the hand-off; cleaning the outbox is
up to whoever operates the host.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, Sequence

from ..base import Outcome, ShareProvider, Success
from ..message import compose_message
from ..registry import REGISTRY
from ...export.serializer import Artifact, sanitize_file_stem
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)


class OutboxShareProvider(ShareProvider):
    """Write share requests to disk for a mail client to pick up."""

    provider_name = "outbox"

    def __init__(
        self,
        outbox_directory: Path | str = Path("exports"),
        sender: str = "reports@rippleeffect.local",
    ) -> None:
        self.outbox_directory = Path(outbox_directory)
        self.sender = sender
        LOGGER.debug("Outbox provider writing to %s", self.outbox_directory)

    def share_files(
        self,
        recipient: str,
        subject: str,
        body_text: str,
        attachments: Sequence[Artifact],
    ) -> Outcome:
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        request_directory = self.outbox_directory / f"{stamp}-{sanitize_file_stem(recipient)}"
        request_directory.mkdir(parents=True, exist_ok=False)
        for artifact in attachments:
            (request_directory / artifact.filename).write_bytes(artifact.content)
        message = compose_message(self.sender, recipient, subject, body_text, attachments)
        message_path = request_directory / "message.eml"
        message_path.write_bytes(message.as_bytes())
        LOGGER.info(
            "Staged message for %s with %s attachments in %s",
            recipient,
            len(attachments),
            request_directory,
        )
        return Success(detail=str(message_path))

    def metadata(self) -> Dict[str, str]:
        return {"provider": self.provider_name, "outbox": str(self.outbox_directory)}


REGISTRY.register(OutboxShareProvider)
