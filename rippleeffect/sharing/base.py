"""Mini README: Abstractions describing how reports leave the application.

Structure:
    * FailureKind - separates bad input from transport problems.
    * Success / Failure - the two outcomes of a share attempt.
    * ShareProvider - abstract interface implemented by share integrations.

A provider only hands the message over (to a mail relay, an outbox folder,
a platform share sheet); it never confirms delivery. Implementations may
raise on transport errors: the export dispatcher converts those into a
``Failure`` so callers always receive an outcome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union

if TYPE_CHECKING:
    from ..export.serializer import Artifact


class FailureKind(str, Enum):
    """Why a share attempt did not go through."""

    INVALID_RECIPIENT = "invalid_recipient"
    EXPORT_FAILURE = "export_failure"


@dataclass(frozen=True, slots=True)
class Success:
    """The share request was accepted by the provider."""

    detail: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The share request was refused or could not be issued."""

    reason: str
    kind: FailureKind = FailureKind.EXPORT_FAILURE

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, Failure]


class ShareProvider(ABC):
    """Base interface for share integrations."""

    provider_name: str = "generic"

    @abstractmethod
    def share_files(
        self,
        recipient: str,
        subject: str,
        body_text: str,
        attachments: Sequence["Artifact"],
    ) -> Outcome:
        """Hand the message and its attachments to the transport."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for UI displays."""

        return {"provider": self.provider_name}
