"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables (no hardcoded secrets)
- Settings are immutable dataclasses for safety and clarity
- Single source of truth for all configurable values

EXTENSIBILITY:
- To move orders into a database: add connection string settings
- To switch messaging provider: add provider-specific API settings
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env_list(name: str, default: str) -> tuple:
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class MessagingSettings:
    """Twilio WhatsApp gateway settings. Secrets have no defaults."""

    account_sid: str = field(default_factory=lambda: os.getenv("TWILIO_ACCOUNT_SID", ""))
    auth_token: str = field(default_factory=lambda: os.getenv("TWILIO_AUTH_TOKEN", ""))
    whatsapp_from: str = field(default_factory=lambda: os.getenv("TWILIO_WHATSAPP_FROM", ""))

    api_url: str = field(
        default_factory=lambda: os.getenv("TWILIO_API_URL", "https://api.twilio.com/2010-04-01")
    )
    timeout_seconds: int = field(
        default_factory=lambda: int(os.getenv("TWILIO_TIMEOUT_SECONDS", "15"))
    )

    def missing_credentials(self) -> list[str]:
        """Names of the credential variables that are not set."""
        missing = []
        if not self.account_sid:
            missing.append("TWILIO_ACCOUNT_SID")
        if not self.auth_token:
            missing.append("TWILIO_AUTH_TOKEN")
        if not self.whatsapp_from:
            missing.append("TWILIO_WHATSAPP_FROM")
        return missing


@dataclass(frozen=True)
class StorefrontSettings:
    """Branding used in customer-facing messages."""

    business_name: str = field(default_factory=lambda: os.getenv("BUSINESS_NAME", "Gustanto"))
    currency_symbol: str = field(default_factory=lambda: os.getenv("CURRENCY_SYMBOL", "₹"))


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from gustanto_pos.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.messaging.whatsapp_from)
    """

    # Sub-settings groups
    messaging: MessagingSettings = field(default_factory=MessagingSettings)
    storefront: StorefrontSettings = field(default_factory=StorefrontSettings)

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_origins: tuple = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # File paths
    codex_file: Path = field(
        default_factory=lambda: Path(os.getenv("CODEX_FILE", "gustanto_codex.json"))
    )
    orders_file: Path = field(
        default_factory=lambda: Path(os.getenv("ORDERS_FILE", "orders.json"))
    )
    static_dir: Path = field(
        default_factory=lambda: Path(os.getenv("STATIC_DIR", "public"))
    )

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        missing = self.messaging.missing_credentials()
        if missing:
            issues.append(
                f"WARNING: {', '.join(missing)} not set. "
                "WhatsApp confirmations and promos will fail."
            )

        if not self.codex_file.exists():
            issues.append(
                f"WARNING: Codex file not found: {self.codex_file}. "
                "GET /codex will return 500 until it is created."
            )

        return issues


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
