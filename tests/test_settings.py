from pathlib import Path

from gustanto_pos.infrastructure.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("PORT", "CODEX_FILE", "ORDERS_FILE", "CORS_ORIGINS", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 3000
    assert settings.codex_file == Path("gustanto_codex.json")
    assert settings.orders_file == Path("orders.json")
    assert settings.cors_origins == ("*",)
    assert settings.storefront.currency_symbol == "₹"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "https://pos.example, https://admin.example")

    settings = Settings()

    assert settings.port == 8080
    assert settings.cors_origins == ("https://pos.example", "https://admin.example")


def test_validate_reports_missing_secrets_and_codex(tmp_path, monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACtest")
    monkeypatch.delenv("TWILIO_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("TWILIO_WHATSAPP_FROM", raising=False)
    monkeypatch.setenv("CODEX_FILE", str(tmp_path / "absent.json"))

    issues = Settings().validate()

    assert len(issues) == 2
    assert "TWILIO_AUTH_TOKEN, TWILIO_WHATSAPP_FROM" in issues[0]
    assert "absent.json" in issues[1]


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
