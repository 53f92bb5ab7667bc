"""
Shared fixtures. Every test runs against explicit Settings (no .env, no real
Resend/Slack calls); the app's settings dependency is overridden per test.
"""

import json

import pytest
from fastapi.testclient import TestClient

from payrelay.api.deps import get_settings
from payrelay.core.config import Settings
from payrelay.integrations.razorpay.webhook import compute_signature
from payrelay.main import app

WEBHOOK_SECRET = "test-webhook-secret"
WEBHOOK_PATH = "/api/v1/razorpay/webhook"


def make_settings(**overrides) -> Settings:
    values = {
        "razorpay_webhook_secret": WEBHOOK_SECRET,
        "resend_api_key": "re_test_key",
        "mail_from": "Tactical BA <hello@example.com>",
        "fallback_to_email": None,
        "slack_webhook_url": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return compute_signature(body, secret)


def make_event(
    event: str = "payment.captured",
    *,
    payment: dict | None = None,
    payment_link: dict | None = None,
) -> dict:
    payload: dict = {}
    if payment is not None:
        payload["payment"] = {"entity": payment}
    if payment_link is not None:
        payload["payment_link"] = {"entity": payment_link}
    return {"entity": "event", "event": event, "payload": payload}


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def post_signed(client):
    """POST a body with a valid signature. Accepts a dict (JSON-encoded) or raw bytes."""

    def _post(body, path: str = WEBHOOK_PATH, secret: str = WEBHOOK_SECRET):
        raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return client.post(
            path,
            content=raw,
            headers={"Content-Type": "application/json", "X-Razorpay-Signature": sign(raw, secret)},
        )

    return _post
