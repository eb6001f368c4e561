from __future__ import annotations

import logging
from typing import Sequence, Union

import flatbuffers
from flatbuffers.builder import BuilderSizeError

from ..errors import EncodeError
from .schema import (
    file_data_create,
    file_data_list_create,
    file_data_list_create_files,
)

logger = logging.getLogger(__name__)

BlobLike = Union[bytes, bytearray, memoryview]

# root offset + table + vtable + files vector header, rounded up
_FIXED_OVERHEAD = 32
# FileData table + shared vtable + vector length + offset slot + padding
_PER_BLOB_OVERHEAD = 32


def _as_bytes(i: int, blob: object) -> bytes:
    if isinstance(blob, bytes):
        return blob
    if isinstance(blob, (bytearray, memoryview)):
        return bytes(blob)
    raise EncodeError(f"blob {i} is not bytes-like (got {type(blob).__name__})")


def estimate_size(blobs: Sequence[bytes]) -> int:
    """Upper-bound guess for the builder's initial buffer, so it rarely has to grow."""
    return _FIXED_OVERHEAD + sum(len(b) + _PER_BLOB_OVERHEAD for b in blobs)


def encode_blobs(blobs: Sequence[BlobLike]) -> bytes:
    """
    Serialize an ordered list of blobs into one FileDataList buffer.

    Element i of the buffer holds blob i. Zero-length blobs are encoded as
    empty vectors (the decoder drops them by default).
    """
    if isinstance(blobs, (str, bytes, bytearray, memoryview)) or not hasattr(blobs, "__iter__"):
        raise EncodeError("blobs must be a sequence of bytes-like objects")
    items = [_as_bytes(i, b) for i, b in enumerate(blobs)]

    try:
        builder = flatbuffers.Builder(estimate_size(items))

        # FileData tables first: the files vector can only reference
        # objects that are already in the buffer.
        offsets = [file_data_create(builder, data) for data in items]

        files_off = file_data_list_create_files(builder, offsets)
        root = file_data_list_create(builder, files_off)
        builder.Finish(root)
        out = bytes(builder.Output())
    except (BuilderSizeError, MemoryError, OverflowError) as e:
        raise EncodeError(f"failed to build blob list buffer: {e}") from e

    logger.debug("Encoded %d blobs into %d bytes", len(items), len(out))
    return out
