from __future__ import annotations

import pytest

from ciaos_sdk.errors import InputError

TEST_API_URL = "http://test-api.com"


def test_01_delete_success(client, session):
    session.queue(200, b"Deleted")

    r = client.blob.delete("testkey")

    assert r.text == "Deleted"
    call = session.last
    assert call.method == "DELETE"
    assert call.url == f"{TEST_API_URL}/delete/testkey"
    assert call.headers["User"] == "testuser"
    assert call.data is None


def test_02_delete_missing_key_returns_response(client, session):
    session.queue(404, b"not found")
    r = client.blob.delete("gone")
    assert r.status_code == 404


def test_03_delete_requires_key(client, session):
    with pytest.raises(InputError):
        client.blob.delete("")
    assert session.calls == []
