from __future__ import annotations

import json
from typing import Any, List, Optional

import pytest
import requests


def make_response(status_code: int, body: Any) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    return response


class FakeSession(requests.Session):
    """Records posts and replays a canned response (or raises)."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None) -> None:
        super().__init__()
        self.response = response
        self.error = error
        self.calls: List[dict] = []
        self.closed = False

    def post(self, url, data=None, json=None, **kwargs):  # noqa: A002 - mirrors requests signature
        self.calls.append({"url": url, "json": json, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("VOYAGE_API_KEY", raising=False)
    monkeypatch.delenv("VOYAGE_BASE_URL", raising=False)


@pytest.fixture
def fake_session():
    def _build(status_code: int = 200, body: Any = None, error: Optional[Exception] = None) -> FakeSession:
        response = None if error is not None else make_response(status_code, body if body is not None else {})
        return FakeSession(response=response, error=error)

    return _build
