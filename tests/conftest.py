import json
import time

import pytest
from fastapi.testclient import TestClient

from gustanto_pos.infrastructure.config import get_settings
from gustanto_pos.infrastructure.messaging import MessagingProvider, MessageDeliveryError
from gustanto_pos.web import app as app_module


class FakeProvider(MessagingProvider):
    """In-memory gateway: records messages, optionally fails every send."""

    def __init__(self, fail_with: str = ""):
        self.sent = []
        self.fail_with = fail_with

    def send_message(self, phone: str, text: str) -> str:
        if self.fail_with:
            raise MessageDeliveryError(self.fail_with)
        self.sent.append((phone, text))
        return f"SM{len(self.sent):032d}"


@pytest.fixture
def utc_local_time(monkeypatch):
    """Pin the process local timezone to UTC for calendar formatting."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def data_files(tmp_path, monkeypatch):
    codex_file = tmp_path / "gustanto_codex.json"
    orders_file = tmp_path / "orders.json"

    monkeypatch.setenv("CODEX_FILE", str(codex_file))
    monkeypatch.setenv("ORDERS_FILE", str(orders_file))
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACtest")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "token")
    monkeypatch.setenv("TWILIO_WHATSAPP_FROM", "+14155238886")
    monkeypatch.setenv("BUSINESS_NAME", "Gustanto")
    monkeypatch.setenv("CURRENCY_SYMBOL", "₹")
    get_settings.cache_clear()
    yield codex_file, orders_file
    get_settings.cache_clear()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(data_files, provider):
    with TestClient(app_module.app) as test_client:
        app_module.messenger = provider
        yield test_client


def read_orders(path):
    return json.loads(path.read_text(encoding="utf-8"))
