# File: tests/conftest.py

import re

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application
from app.services.mail_service import MailSender

TOKEN_RE = re.compile(r"token=([0-9a-f]{64})")


class RecordingMailSender(MailSender):
    """Keeps messages in memory instead of talking to SMTP."""

    def __init__(self):
        self.outbox = []

    def send(self, *, to: str, subject: str, html: str) -> None:
        self.outbox.append({"to": to, "subject": subject, "html": html})

    def last_token_for(self, email: str) -> str:
        for message in reversed(self.outbox):
            if message["to"] == email:
                return TOKEN_RE.search(message["html"]).group(1)
        raise AssertionError(f"no mail sent to {email}")


class AuthFlow:
    """Register / confirm / login shortcuts against a TestClient."""

    def __init__(self, client, mailer):
        self.client = client
        self.mailer = mailer

    def register(self, email, password="secret123"):
        return self.client.post("/auth/register", json={"email": email, "password": password})

    def confirm(self, email):
        token = self.mailer.last_token_for(email)
        return self.client.get("/auth/confirm-email", params={"token": token})

    def login(self, email, password="secret123"):
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def headers_for(self, email, password="secret123"):
        assert self.register(email, password).status_code == 201
        assert self.confirm(email).status_code == 200
        resp = self.login(email, password)
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        secret_key="test-secret",
        public_base_url="http://testserver",
        seed_default_categories=True,
        log_level="WARNING",
    )


@pytest.fixture
def mailer():
    return RecordingMailSender()


@pytest.fixture
def client(settings, mailer):
    app = create_application(settings, mailer=mailer)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client):
    session = client.app.state.container.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_flow(client, mailer):
    return AuthFlow(client, mailer)


@pytest.fixture
def auth_headers(auth_flow):
    return auth_flow.headers_for("alice@example.com")


@pytest.fixture
def other_headers(auth_flow):
    return auth_flow.headers_for("mallory@example.com")
