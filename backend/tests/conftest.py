"""Test configuration utilities shared across the backend suite."""

from __future__ import annotations

import json
import os
import pathlib
import sys
from typing import Any, Optional

import pytest
import requests

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


_DEFAULT_ENV = {
    "API_KEY": "test-api-key",
    "API_SECRET": "test-api-secret",
    "API_BASE_URL": "https://provider.example.com/v2/",
    "API_TIMEOUT_SECONDS": "5",
}


for _key, _value in _DEFAULT_ENV.items():
    os.environ.setdefault(_key, _value)


def make_response(status_code: int = 200, payload: Optional[Any] = None, *, text: Optional[str] = None) -> requests.Response:
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""

    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    response.encoding = "utf-8"
    return response


class RecordingTransport:
    """Stand-in for ``requests.request`` that records every outbound call."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None) -> None:
        self.calls: list[dict] = []
        self.response = response if response is not None else make_response(200, {"ok": True})
        self.error = error

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport(monkeypatch) -> RecordingTransport:
    recorder = RecordingTransport()
    monkeypatch.setattr(requests, "request", recorder)
    return recorder
