"""Pytest configuration and fixtures."""

from types import SimpleNamespace

import pytest

from paymill_payments import PaymillConfig, PaymillContext


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else repr(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for ``requests.Session``: records calls and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.closed = False

    def queue(self, payload=None, status=200, text=None):
        self.responses.append(FakeResponse(status, payload, text))
        return self

    def queue_error(self, exc):
        self.responses.append(exc)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


API_URL = "https://api.test/v2.1"


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def config():
    return PaymillConfig(api_key="test_private_key", api_url=API_URL, timeout_seconds=5)


@pytest.fixture
def context(config, session):
    return PaymillContext(config, session=session)


@pytest.fixture
def cli_session(monkeypatch):
    """Fake session handed to the CLI, with no API key in the process environment."""
    import paymill_payments.cli as cli_mod

    fake = FakeSession()
    monkeypatch.setattr(cli_mod.requests, "Session", lambda: fake)
    monkeypatch.delenv("PAYMILL_API_KEY", raising=False)
    return fake
