from __future__ import annotations

import pytest

from ciaos_sdk.codec.decoder import decode_blobs
from ciaos_sdk.errors import InputError
from ciaos_sdk.models.blob import BlobListBody

TEST_API_URL = "http://test-api.com"


def test_01_put_binary_success(client, session):
    session.queue(200, b"Data uploaded successfully: key = testkey")

    r = client.blob.put_binary("testkey", [b"data1", b"data2"])

    assert r.text == "Data uploaded successfully: key = testkey"
    call = session.last
    assert call.method == "POST"
    assert call.url == f"{TEST_API_URL}/put/testkey"
    assert call.headers["User"] == "testuser"
    assert decode_blobs(call.data) == [b"data1", b"data2"]


def test_02_put_binary_accepts_body_model_and_bytes_like(client, session):
    client.blob.put_binary("k1", BlobListBody(blobs=[b"a", b"b"]))
    client.blob.put_binary("k2", [bytearray(b"a"), memoryview(b"b")])

    assert decode_blobs(session.calls[0].data) == [b"a", b"b"]
    assert session.calls[0].data == session.calls[1].data


def test_03_put_binary_empty_list(client, session):
    client.blob.put_binary("testkey", [])
    assert decode_blobs(session.last.data) == []


@pytest.mark.parametrize(
    "bad",
    [
        ["data1", "data2"],
        b"data1",
        "data1",
        [b"ok", 5],
        None,
    ],
)
def test_04_put_binary_rejects_non_blob_lists(client, session, bad):
    with pytest.raises(InputError, match="invalid data_list"):
        client.blob.put_binary("testkey", bad)
    assert session.calls == []


@pytest.mark.parametrize("bad_key", ["", None])
def test_05_put_binary_requires_key(client, session, bad_key):
    with pytest.raises(InputError, match="key cannot be empty"):
        client.blob.put_binary(bad_key, [b"data1"])
    assert session.calls == []


def test_06_keys_are_a_single_path_segment(client, session):
    client.blob.put_binary("dir/file name.txt", [b"x"])
    assert session.last.url == f"{TEST_API_URL}/put/dir%2Ffile%20name.txt"
