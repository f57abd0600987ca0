"""
Shared pytest fixtures: fake mailers and a TestClient over the relay app
"""
import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


class FakeMailer:
    """Records every message and answers like the provider would"""

    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        return {"id": f"fake-{len(self.sent)}"}


class FailingMailer:
    def __init__(self, error=None):
        self.error = error or RuntimeError("provider rejected the message")
        self.calls = 0

    def send(self, message):
        self.calls += 1
        raise self.error


@pytest.fixture
def settings():
    return Settings(resend_api_key="re_test_key")


@pytest.fixture
def fake_mailer():
    return FakeMailer()


@pytest.fixture
def failing_mailer():
    return FailingMailer()


@pytest.fixture
def client(settings, fake_mailer):
    return TestClient(create_app(settings, fake_mailer))


@pytest.fixture
def failing_client(settings, failing_mailer):
    return TestClient(create_app(settings, failing_mailer))
