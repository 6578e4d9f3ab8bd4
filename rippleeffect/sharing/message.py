"""Mini README: Build RFC 822 messages for report emails.

Both built-in providers send the same message shape: plain-text body plus
one attachment per artefact, using the artefact's MIME type (``*/*`` is
sent as ``application/octet-stream`` since MIME parts need a concrete type).
"""

from __future__ import annotations

from email.message import EmailMessage
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..export.serializer import Artifact

FALLBACK_MIME_TYPE = "application/octet-stream"


def compose_message(
    sender: str,
    recipient: str,
    subject: str,
    body_text: str,
    attachments: Sequence["Artifact"],
) -> EmailMessage:
    """Return an ``EmailMessage`` carrying every attachment."""

    message = EmailMessage()
    message["From"] = sender
    message["To"] = recipient
    message["Subject"] = subject
    message.set_content(body_text)
    for artifact in attachments:
        mime_type = artifact.mime_type if "*" not in artifact.mime_type else FALLBACK_MIME_TYPE
        maintype, _, subtype = mime_type.partition("/")
        message.add_attachment(
            artifact.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=artifact.filename,
        )
    return message
