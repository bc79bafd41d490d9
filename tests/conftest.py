"""Shared fixtures for privatebin-cli tests."""

import json
from typing import Optional

import pytest

from privatebin_cli.transport import Transport, TransportResponse
from privatebin_cli.types import TransportError


class RecordingTransport(Transport):
    """In-memory transport that records requests and replays a canned answer."""

    def __init__(self, body: str = "", status_code: int = 200, error: Optional[Exception] = None) -> None:
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []

    def post_form(self, url, form, headers, timeout=30.0):
        self.calls.append({"url": url, "form": dict(form), "headers": dict(headers), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, body=self.body)


@pytest.fixture
def ok_transport():
    """Transport answering with a successful paste."""
    return RecordingTransport(json.dumps({"status": 0, "id": "abc123", "deletetoken": "xyz"}))


@pytest.fixture
def failing_transport():
    """Transport that cannot reach the server."""
    return RecordingTransport(error=TransportError("connection refused"))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PRIVATEBIN_* variables from the host out of the tests."""
    for name in ("PROTOCOL", "HOST", "PORT", "PATH", "TIMEOUT"):
        monkeypatch.delenv(f"PRIVATEBIN_{name}", raising=False)
