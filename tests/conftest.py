"""
Shared pytest fixtures.

HTTP is served by httpx.MockTransport so no network is needed, and report
output is captured from a colorless Rich console.
"""
import io
import json
from unittest.mock import MagicMock

import httpx
import pytest
from rich.console import Console

from oura_cli import display
from oura_cli.client import OuraClient


@pytest.fixture()
def output(monkeypatch):
    """Replace the report console with one writing plain text to a buffer."""
    buffer = io.StringIO()
    monkeypatch.setattr(display, "console", Console(file=buffer, color_system=None, width=100))
    return buffer


@pytest.fixture()
def markup(monkeypatch):
    """Replace the report console with a mock and return the printed markup lines."""
    mock_console = MagicMock()
    monkeypatch.setattr(display, "console", mock_console)

    def lines() -> list[str]:
        return [str(c.args[0]) if c.args else "" for c in mock_console.print.call_args_list]

    return lines


class FakeOuraApi:
    """Records requests and answers from per-endpoint payloads."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.payloads: dict[str, object] = {}
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        payload = self.payloads.get(endpoint, {"data": [], "next_token": None})
        if isinstance(payload, str):
            return httpx.Response(self.status_code, text=payload)
        return httpx.Response(self.status_code, content=json.dumps(payload).encode())


@pytest.fixture()
def api():
    return FakeOuraApi()


@pytest.fixture()
def client(api):
    with OuraClient(token="test-token", transport=httpx.MockTransport(api)) as c:
        yield c
