"""Mini README: Tests for the share provider registry and built-in providers.

Ensures providers register on import, that the registry instantiates them
with options, and that the outbox provider stages a complete message.
"""

from __future__ import annotations

import email
import smtplib
from email import policy

import pytest

from rippleeffect.configuration import RippleEffectSettings
from rippleeffect.export import ExportDispatcher
from rippleeffect.sharing import REGISTRY, FailureKind, ShareProvider
from rippleeffect.sharing.providers import OutboxShareProvider, SmtpShareProvider


def test_registry_contains_builtin_providers() -> None:
    available = list(REGISTRY.available_providers())

    assert "outbox" in available
    assert "smtp" in available


def test_registry_instantiates_provider(tmp_path) -> None:
    provider = REGISTRY.create("OUTBOX", outbox_directory=tmp_path)

    assert isinstance(provider, ShareProvider)
    assert provider.metadata() == {"provider": "outbox", "outbox": str(tmp_path)}
    with pytest.raises(KeyError):
        REGISTRY.create("carrier-pigeon")


def test_outbox_provider_stages_message_and_attachments(tmp_path, compiled_report) -> None:
    dispatcher = ExportDispatcher(OutboxShareProvider(outbox_directory=tmp_path))

    outcome = dispatcher.send("owner@example.com", compiled_report)

    assert outcome.ok
    (request_directory,) = list(tmp_path.iterdir())
    staged = sorted(path.name for path in request_directory.iterdir())
    assert staged == ["Report-03-07-24.csv", "Report-03-07-24.txt", "message.eml"]
    message = email.message_from_bytes(
        (request_directory / "message.eml").read_bytes(), policy=policy.default
    )
    assert message["To"] == "owner@example.com"
    assert message["Subject"] == "Ripple Effect Report: Report 03-07-24"
    filenames = [part.get_filename() for part in message.iter_attachments()]
    assert filenames == ["Report-03-07-24.txt", "Report-03-07-24.csv"]


def test_smtp_connection_error_maps_to_failure(monkeypatch, compiled_report) -> None:
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("Connection refused")

    monkeypatch.setattr(smtplib, "SMTP", refuse)
    dispatcher = ExportDispatcher(SmtpShareProvider(host="mail.invalid", port=2525))

    outcome = dispatcher.send("owner@example.com", compiled_report)

    assert outcome.ok is False
    assert outcome.kind is FailureKind.EXPORT_FAILURE
    assert "refused" in outcome.reason


def test_dispatcher_from_settings_uses_configured_provider(tmp_path) -> None:
    settings = RippleEffectSettings(export_directory=tmp_path, share_provider="outbox")

    dispatcher = ExportDispatcher.from_settings(settings)

    assert isinstance(dispatcher.provider, OutboxShareProvider)
    assert dispatcher.provider.outbox_directory == tmp_path.resolve()


def test_discover_plugins_registers_share_providers(monkeypatch) -> None:
    """Entry point objects that are ShareProvider subclasses get registered."""

    from rippleeffect.sharing import ShareProviderRegistry
    from rippleeffect.sharing import registry as registry_module

    class CarrierPigeonProvider(ShareProvider):
        provider_name = "pigeon"

        def share_files(self, recipient, subject, body_text, attachments):
            raise NotImplementedError

    monkeypatch.setattr(
        registry_module,
        "load_entry_point_plugins",
        lambda group: [CarrierPigeonProvider, object()],
    )
    registry = ShareProviderRegistry()

    assert registry.discover_plugins() == 1
    assert list(registry.available_providers()) == ["pigeon"]
