"""Mini README: Built-in share provider implementations.

New providers should subclass ``ShareProvider`` and call
``REGISTRY.register`` during module import to keep the system discoverable.
"""

from .outbox_provider import OutboxShareProvider
from .smtp_provider import SmtpShareProvider

__all__ = ["OutboxShareProvider", "SmtpShareProvider"]
