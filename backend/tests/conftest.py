"""
FlowBoard Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, created fresh for each test):
    ├── lead_store / message_store: Empty in-memory stores
    ├── recording_mailer: MailDispatcher that records every send
    ├── failing_mailer: MailDispatcher that raises on every send
    ├── app / test_client: App wired to the stores and the recording mailer
    └── failing_app / failing_client: Same, with the failing mailer

No test talks to a real SMTP relay.
"""

import os
import tempfile

# Override settings for testing BEFORE any flowboard imports
os.environ["SMTP_HOST"] = "smtp.test.invalid"
os.environ["SMTP_USER"] = "noreply@flowboard.test"
os.environ["SMTP_PASS"] = "test-pass-not-real"
os.environ["NOTIFICATION_EMAIL"] = "ops@flowboard.test"
os.environ["STATIC_ROOT"] = tempfile.mkdtemp(prefix="flowboard_static_")
os.environ["LOG_LEVEL"] = "WARNING"

from typing import List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from flowboard.exceptions import MailDeliveryError
from flowboard.services.mail_base import MailDispatcher
from flowboard.services.store import InMemoryRecordStore


# ══════════════════════════════════════════════════════════════════════════
# Mail Dispatcher Doubles
# ══════════════════════════════════════════════════════════════════════════

class RecordingMailer(MailDispatcher):
    """Accepts every message and keeps (to, subject, html) in send order."""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        self.sent.append((to, subject, html))


class FailingMailer(MailDispatcher):
    """
    Raises MailDeliveryError on the `fail_on`-th send (1-based) and every
    send after it. Earlier sends are recorded like RecordingMailer.
    """

    def __init__(self, fail_on: int = 1):
        self.fail_on = fail_on
        self.attempts = 0
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        self.attempts += 1
        if self.attempts >= self.fail_on:
            raise MailDeliveryError(message="relay unavailable", recipient=to)
        self.sent.append((to, subject, html))


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def lead_store():
    return InMemoryRecordStore("leads")


@pytest.fixture
def message_store():
    return InMemoryRecordStore("contact_messages")


@pytest.fixture
def recording_mailer():
    return RecordingMailer()


@pytest.fixture
def failing_mailer():
    return FailingMailer()


@pytest.fixture
def make_failing_mailer():
    """Factory for a FailingMailer that fails from the given send onwards."""
    return FailingMailer


def _build_app(lead_store, message_store, mailer):
    from flowboard.main import create_app
    return create_app(lead_store=lead_store, message_store=message_store, mailer=mailer)


@pytest.fixture
def app(lead_store, message_store, recording_mailer):
    return _build_app(lead_store, message_store, recording_mailer)


@pytest.fixture
def failing_app(lead_store, message_store, failing_mailer):
    return _build_app(lead_store, message_store, failing_mailer)


async def _client_for(app) -> AsyncClient:
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app (no server, no lifespan).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    async with await _client_for(app) as client:
        yield client


@pytest_asyncio.fixture
async def failing_client(failing_app):
    async with await _client_for(failing_app) as client:
        yield client


@pytest.fixture
def static_site(tmp_path, monkeypatch):
    """A throwaway STATIC_ROOT with an index page and one asset."""
    from flowboard.config import settings

    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<html><body>FlowBoard SPA</body></html>")
    (root / "app.js").write_text("console.log('flowboard');")
    monkeypatch.setattr(settings, "static_root", str(root))
    return root
