"""Pytest configuration - loads .env for live tests and provides a fake transport."""

import io
import json
import urllib.error
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

SPREAKER_ENV_VARS = (
    "SPREAKER_TOKEN",
    "SPREAKER_API_URL",
    "SPREAKER_API_VERSION",
    "SPREAKER_TIMEOUT",
    "SPREAKER_OUTPUT",
    "SPREAKER_DEFAULT_SHOW_ID",
)


class FakeResponse:
    """Stands in for the object urllib.request.urlopen returns."""

    def __init__(self, body: bytes = b"", status: int = 200, headers: dict[str, str] | None = None):
        self._stream = io.BytesIO(body)
        self.status = status
        self.headers = headers or {}

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeAPI:
    """
    Scripted responses for a patched urlopen.

    Responses are consumed in order; every request is recorded.
    """

    def __init__(self, urlopen):
        self.urlopen = urlopen
        self.responses: list[Any] = []
        urlopen.side_effect = self._next

    def _next(self, request, timeout=None):
        if not self.responses:
            raise AssertionError(f"unexpected request: {request.get_method()} {request.full_url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def reply(self, payload: Any, status: int = 200) -> "FakeAPI":
        """Queue a successful enveloped response."""
        return self.reply_raw(json.dumps({"response": payload}).encode(), status)

    def reply_raw(self, body: bytes, status: int = 200, headers: dict[str, str] | None = None) -> "FakeAPI":
        self.responses.append(FakeResponse(body, status, headers))
        return self

    def fail(self, status: int, code: int = 0, messages: list[str] | None = None, body: bytes | None = None) -> "FakeAPI":
        """Queue an HTTP error status, with an error envelope unless body is given."""
        if body is None:
            body = json.dumps({"response": {"error": {"code": code, "messages": messages or []}}}).encode()
        self.responses.append(http_error(status, body))
        return self

    def raise_error(self, error: Exception) -> "FakeAPI":
        self.responses.append(error)
        return self

    @property
    def requests(self) -> list:
        return [c.args[0] for c in self.urlopen.call_args_list]

    @property
    def last_request(self):
        return self.requests[-1]


def http_error(status: int, body: bytes = b"", headers: dict[str, str] | None = None) -> urllib.error.HTTPError:
    return urllib.error.HTTPError("https://api.spreaker.com/v2", status, "error", headers or {}, io.BytesIO(body))


@pytest.fixture
def fake_api():
    """Patch urlopen and script its responses."""
    with patch("urllib.request.urlopen") as urlopen:
        yield FakeAPI(urlopen)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run with no SPREAKER_* variables and no .env file in the working directory."""
    for name in SPREAKER_ENV_VARS:
        # setenv first so anything load_dotenv adds is removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
