"""Mini README: Shared fixtures for the Ripple Effect test-suite.

Structure:
    * RecordingProvider - share provider double that records each request.
    * fixed_clock / compiled_report - deterministic compiled report fixtures.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

import pytest

from rippleeffect.export import Artifact
from rippleeffect.finance import EntryKind, Ledger
from rippleeffect.reporting import Currency, Locale, ReportCompiler
from rippleeffect.sharing import Outcome, ShareProvider, Success


class RecordingProvider(ShareProvider):
    """Provider double that accepts every request and remembers it."""

    provider_name = "recording"

    def __init__(self) -> None:
        self.calls: List[dict] = []

    def share_files(
        self,
        recipient: str,
        subject: str,
        body_text: str,
        attachments: Sequence[Artifact],
    ) -> Outcome:
        self.calls.append(
            {
                "recipient": recipient,
                "subject": subject,
                "body_text": body_text,
                "attachments": list(attachments),
            }
        )
        return Success()


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 7, 9, 30)


@pytest.fixture
def recording_provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def compiled_report(fixed_clock):
    ledger = Ledger()
    ledger.add("Bottles", "45.00", EntryKind.EXPENSE)
    ledger.add("Water sale", "120.00", EntryKind.SALE)
    return ReportCompiler(clock=fixed_clock).compile(
        ledger.snapshot(), Currency.USD, Locale.ENGLISH, "Good week"
    )
