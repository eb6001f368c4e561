from __future__ import annotations

import flatbuffers
import pytest
from flatbuffers import encode, packer, table

from ciaos_sdk.codec.decoder import decode_blobs
from ciaos_sdk.codec.encoder import encode_blobs, estimate_size
from ciaos_sdk.errors import EncodeError


def _read_with_flatbuffers_tables(buf: bytes) -> list[bytes]:
    """Walk the buffer with flatbuffers' own Table accessors (no skipping)."""
    b = bytearray(buf)
    root = table.Table(b, encode.Get(packer.uoffset, b, 0))
    files = root.Offset(4)
    assert files != 0
    vec = root.Vector(files)
    out = []
    for i in range(root.VectorLen(files)):
        item = table.Table(b, root.Indirect(vec + i * 4))
        data = item.Offset(4)
        if data == 0:
            out.append(b"")
            continue
        start = item.Vector(data)
        out.append(bytes(b[start:start + item.VectorLen(data)]))
    return out


def test_01_encode_empty_list_is_valid_buffer():
    buf = encode_blobs([])
    assert isinstance(buf, bytes)
    assert len(buf) % 4 == 0
    assert _read_with_flatbuffers_tables(buf) == []
    assert decode_blobs(buf) == []


def test_02_encode_layout_readable_by_flatbuffers_tables():
    blobs = [b"data1", b"", b"\x00\xff" * 10, b"data2"]
    buf = encode_blobs(blobs)
    assert _read_with_flatbuffers_tables(buf) == blobs


def test_03_encode_is_deterministic():
    blobs = [b"test data", b"more"]
    assert encode_blobs(blobs) == encode_blobs(list(blobs))
    assert encode_blobs([b"a", b"b"]) != encode_blobs([b"b", b"a"])


def test_04_encode_accepts_bytes_like():
    expected = encode_blobs([b"abc", b"def"])
    assert encode_blobs([bytearray(b"abc"), memoryview(b"def")]) == expected


@pytest.mark.parametrize("bad", ["text", 5, None, [b"nested"]])
def test_05_encode_rejects_non_bytes(bad):
    with pytest.raises(EncodeError, match="blob 1 is not bytes-like"):
        encode_blobs([b"ok", bad])


def test_06_encode_surfaces_builder_limits_as_encode_error(monkeypatch):
    def _too_big(*args, **kwargs):
        raise flatbuffers.builder.BuilderSizeError("flatbuffers: cannot grow buffer beyond 2 gigabytes")

    monkeypatch.setattr(flatbuffers.Builder, "CreateByteVector", _too_big)
    with pytest.raises(EncodeError, match="failed to build blob list buffer"):
        encode_blobs([b"x"])


def test_07_estimate_size_covers_output():
    blobs = [b"x" * n for n in (0, 1, 3, 4, 5, 1000)]
    assert estimate_size(blobs) >= len(encode_blobs(blobs))


@pytest.mark.parametrize("bad", [None, 5, "text", b"raw bytes"])
def test_08_encode_rejects_non_sequence_input(bad):
    with pytest.raises(EncodeError, match="blobs must be a sequence of bytes-like objects"):
        encode_blobs(bad)
