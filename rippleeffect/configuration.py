"""Mini README: Centralised configuration for the Ripple Effect report centre.

Structure:
    * RippleEffectSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``RIPPLEEFFECT_*`` environment variables
    (or a local ``.env`` file). The settings decide which share provider the
    export dispatcher talks to, where exported artefacts are written, the
    defaults for currency and language, and the SMTP relay used when the
    ``smtp`` provider is selected. Validation runs once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class RippleEffectSettings(BaseSettings):
    """Runtime configuration for the report centre."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    export_directory: Path = Field(
        Path("exports"),
        description="Directory where rendered report artefacts are staged before sharing.",
    )
    default_currency: str = Field("USD", description="Currency code selected for new sessions.")
    default_locale: str = Field("en", description="Language code selected for new sessions.")
    report_owner: str = Field(
        "Current User",
        description="Owner recorded on saved reports created from this instance.",
    )
    share_provider: str = Field(
        "outbox",
        description="Registered share provider used to hand reports to the recipient.",
    )
    wildcard_mime: bool = Field(
        False,
        description="Send every attachment as */* for share targets that reject explicit types.",
    )
    smtp_host: str = Field("localhost", description="SMTP relay host for the smtp provider.")
    smtp_port: int = Field(25, ge=1, le=65535, description="SMTP relay port.")
    smtp_username: Optional[str] = Field(None, description="Optional SMTP login name.")
    smtp_password: Optional[str] = Field(None, description="Optional SMTP password.")
    smtp_use_tls: bool = Field(False, description="Issue STARTTLS before authenticating.")
    smtp_sender: str = Field(
        "reports@rippleeffect.local",
        description="From address placed on outgoing report emails.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the interactive service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the interactive service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "RIPPLEEFFECT_"
        env_file = ".env"
        case_sensitive = False

    @validator("export_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @validator("default_currency")
    def _normalise_currency(cls, value: str) -> str:
        """Currency codes are stored upper-case to match the currency table."""

        return value.strip().upper()

    def share_provider_options(self) -> dict[str, object]:
        """Return constructor keyword arguments for the configured provider."""

        if self.share_provider.lower() == "smtp":
            return {
                "host": self.smtp_host,
                "port": self.smtp_port,
                "sender": self.smtp_sender,
                "username": self.smtp_username,
                "password": self.smtp_password,
                "use_tls": self.smtp_use_tls,
            }
        if self.share_provider.lower() == "outbox":
            return {"outbox_directory": self.export_directory, "sender": self.smtp_sender}
        return {}


@lru_cache()
def get_settings() -> RippleEffectSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return RippleEffectSettings()
