from __future__ import annotations

import json
from typing import Any, Dict, List

import httpx
import pytest

from airelay.providers.base import HeaderBearerAuth, QueryParamAuth


class Recorder:
    """Canned upstream: answers every request with one status/body and keeps the requests."""

    def __init__(self, status: int = 200, body: Any = None):
        self.status = status
        self.body = {"ok": True} if body is None else body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status, text=self.body)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)

    def openrouter(self) -> HeaderBearerAuth:
        return HeaderBearerAuth(transport=httpx.MockTransport(self))

    def gemini(self) -> QueryParamAuth:
        return QueryParamAuth(transport=httpx.MockTransport(self))


@pytest.fixture
def upstream():
    return Recorder()


@pytest.fixture
def unauthorized():
    return Recorder(status=401, body="unauthorized")


@pytest.fixture(autouse=True)
def no_env_keys(monkeypatch):
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
