"""Shared fixtures: a recorder standing in for the outbound HTTP call."""

import pytest
import requests
from fastapi.testclient import TestClient

from webrelay.api.auth import get_server_config
from webrelay.api.config import ServerConfig
from webrelay.api.http_api import app, get_jina_client
from webrelay.jina.client import JinaClient
from webrelay.jina.config import JinaConfig


class FakeResponse:
    """Minimal `requests.Response` stand-in."""

    def __init__(self, body=b"", status_code=200, read_error=None):
        self._body = body
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    @property
    def content(self):
        if self.read_error is not None:
            raise self.read_error
        return self._body

    def close(self):
        self.closed = True


class OutboundRecorder:
    """Captures every prepared request sent through `requests.Session.send`."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(b"relayed body")
        self.error = None

    def send(self, session, prepared, **kwargs):
        self.calls.append((prepared, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_request(self):
        return self.calls[-1][0]


@pytest.fixture
def outbound(monkeypatch):
    recorder = OutboundRecorder()

    def fake_send(session, prepared, **kwargs):
        return recorder.send(session, prepared, **kwargs)

    monkeypatch.setattr(requests.Session, "send", fake_send)
    return recorder


@pytest.fixture
def jina_config():
    return JinaConfig(
        api_key="",
        reader_url_prefix="https://r.jina.ai/",
        search_url_prefix="https://s.jina.ai/",
        timeout_seconds=None,
    )


@pytest.fixture
def server_config():
    return ServerConfig(host="127.0.0.1", port=8080, log_level="INFO", api_key="")


@pytest.fixture
def api_client(jina_config, server_config):
    app.dependency_overrides[get_jina_client] = lambda: JinaClient(jina_config)
    app.dependency_overrides[get_server_config] = lambda: server_config
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
