from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
import requests

from ciaos_sdk.client import CiaosClient

TEST_API_URL = "http://test-api.com"
TEST_USER_ID = "testuser"


def make_response(status_code: int = 200, content: bytes = b"", content_type: str = "text/plain") -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r._content = content
    r.headers["Content-Type"] = content_type
    r.encoding = "utf-8"
    return r


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: Dict[str, str]
    data: Optional[bytes]
    timeout: Any


@dataclass
class FakeSession:
    """Stands in for requests.Session: records calls, replays queued responses."""

    responses: List[Any] = field(default_factory=list)
    calls: List[RecordedCall] = field(default_factory=list)
    closed: bool = False

    def queue(self, status_code: int = 200, content: bytes = b"", content_type: str = "text/plain") -> None:
        self.responses.append(make_response(status_code, content, content_type))

    def fail_with(self, exc: Exception) -> None:
        self.responses.append(exc)

    def request(self, method, url, data=None, headers=None, timeout=None, **kwargs):
        self.calls.append(RecordedCall(method=method, url=url, headers=dict(headers or {}), data=data, timeout=timeout))
        nxt = self.responses.pop(0) if self.responses else make_response()
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedCall:
        assert self.calls, "no request was issued"
        return self.calls[-1]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> CiaosClient:
    return CiaosClient(api_url=TEST_API_URL, user_id=TEST_USER_ID, session=session)


@pytest.fixture
def ciaos_env(monkeypatch):
    monkeypatch.setenv("CIAOS_API_URL", TEST_API_URL)
    monkeypatch.setenv("CIAOS_USER_ID", TEST_USER_ID)
    monkeypatch.delenv("CIAOS_TIMEOUT", raising=False)
