"""Mini README: Typed error hierarchy for Ripple Effect.

Structure:
    RippleEffectError (base, carries a machine readable ``code``)
    |
    +-- InvalidEntryError
    |   +-- InvalidAmountError
    |   +-- InvalidDescriptionError
    +-- InvalidRecipientError
    +-- ExportFailure
    +-- ReportLockedError

Validation errors (``InvalidEntryError`` and ``InvalidRecipientError``) are
raised closest to user input so bad data never reaches a compiled report.
``ExportFailure`` wraps transport problems; the export dispatcher converts
it into a ``Failure`` outcome instead of letting it escape. Missing records
keep using ``KeyError`` like the rest of the package.
"""

from __future__ import annotations


class RippleEffectError(Exception):
    """Base exception for all Ripple Effect errors."""

    code: str = "RIPPLE_EFFECT_ERROR"


class InvalidEntryError(RippleEffectError):
    """A ledger entry was refused before it reached the ledger."""

    code: str = "INVALID_ENTRY"


class InvalidAmountError(InvalidEntryError):
    """Entry amount is non-numeric, non-finite, zero or negative."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Amount must be a positive number, got {value!r}")


class InvalidDescriptionError(InvalidEntryError):
    """Entry description is blank."""

    code: str = "INVALID_DESCRIPTION"

    def __init__(self, value: object):
        self.value = value
        super().__init__("Entry description must not be blank")


class InvalidRecipientError(RippleEffectError):
    """Recipient address failed email validation."""

    code: str = "INVALID_RECIPIENT"

    def __init__(self, recipient: str):
        self.recipient = recipient
        super().__init__(f"Invalid email address: {recipient!r}")


class ExportFailure(RippleEffectError):
    """The share collaborator could not hand the report over."""

    code: str = "EXPORT_FAILURE"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ReportLockedError(RippleEffectError):
    """Attempted to edit a saved report that is already completed."""

    code: str = "REPORT_LOCKED"

    def __init__(self, report_id: str):
        self.report_id = report_id
        super().__init__(f"Report {report_id} is completed and can no longer be edited")
