from __future__ import annotations

import logging
import struct
from typing import List, Optional, Union

from flatbuffers import encode, packer

from ..errors import ParseError
from .schema import (
    BUFFER_ALIGNMENT,
    FILE_DATA_DATA_SLOT,
    FILE_DATA_LIST_FILES_SLOT,
    SOFFSET_SIZE,
    UOFFSET_SIZE,
    VOFFSET_SIZE,
    VTABLE_HEADER_SIZE,
    field_vtable_offset,
)

logger = logging.getLogger(__name__)


class _BufferReader:
    """
    Bounds-checked view over a FlatBuffers buffer.

    flatbuffers' own Table accessors trust the buffer; every read here is
    checked against the buffer size first so a truncated or corrupt
    payload surfaces as ParseError.
    """

    def __init__(self, buf: Union[bytes, bytearray, memoryview]):
        self.buf = memoryview(buf).cast("B")
        self.size = len(self.buf)

    def _need(self, pos: int, n: int, what: str) -> None:
        if pos < 0 or n < 0 or pos + n > self.size:
            raise ParseError(
                f"truncated {what}: need {n} bytes at offset {pos}, buffer has {self.size}"
            )

    def uoffset(self, pos: int, what: str) -> int:
        self._need(pos, UOFFSET_SIZE, what)
        return encode.Get(packer.uoffset, self.buf, pos)

    def indirect(self, pos: int, what: str) -> int:
        return pos + self.uoffset(pos, what)

    def table_field(self, table_pos: int, slot: int, what: str) -> Optional[int]:
        """Absolute position of a table field, or None when the field is absent."""
        self._need(table_pos, SOFFSET_SIZE, f"{what} table")
        vtable = table_pos - encode.Get(packer.soffset, self.buf, table_pos)

        self._need(vtable, VTABLE_HEADER_SIZE, f"{what} vtable")
        vtable_size = encode.Get(packer.voffset, self.buf, vtable)
        object_size = encode.Get(packer.voffset, self.buf, vtable + VOFFSET_SIZE)
        if vtable_size < VTABLE_HEADER_SIZE or vtable_size % VOFFSET_SIZE:
            raise ParseError(f"invalid {what} vtable size {vtable_size}")
        if object_size < SOFFSET_SIZE:
            raise ParseError(f"invalid {what} object size {object_size}")
        self._need(vtable, vtable_size, f"{what} vtable")
        self._need(table_pos, object_size, f"{what} table")

        entry = field_vtable_offset(slot)
        if entry >= vtable_size:
            return None
        field_off = encode.Get(packer.voffset, self.buf, vtable + entry)
        if field_off == 0:
            return None
        if field_off + UOFFSET_SIZE > object_size:
            raise ParseError(f"{what} field offset {field_off} outside object of size {object_size}")
        return table_pos + field_off

    def vector(self, field_pos: int, elem_size: int, what: str) -> tuple[int, int]:
        """(start, length) of the vector a field points to."""
        vec = self.indirect(field_pos, what)
        n = self.uoffset(vec, f"{what} length")
        start = vec + UOFFSET_SIZE
        self._need(start, n * elem_size, f"{what} body")
        return start, n

    def copy(self, start: int, n: int) -> bytes:
        return bytes(self.buf[start:start + n])


def _check_header(reader: _BufferReader) -> None:
    if reader.size < UOFFSET_SIZE:
        raise ParseError(f"buffer too short for a root offset ({reader.size} bytes)")
    if reader.size % BUFFER_ALIGNMENT:
        raise ParseError(
            f"buffer size {reader.size} is not a multiple of {BUFFER_ALIGNMENT}; "
            "not a finished FileDataList"
        )
    root = reader.uoffset(0, "root offset")
    if root < UOFFSET_SIZE:
        raise ParseError(f"root offset {root} points into the header")


def decode_blobs(
    buf: Union[bytes, bytearray, memoryview],
    *,
    keep_empty: bool = False,
) -> List[bytes]:
    """
    Parse a FileDataList buffer back into its ordered list of blobs.

    Elements without data (absent field or zero-length vector) are skipped
    unless keep_empty=True, in which case they come back as b"". Skipping is
    the service's historical behaviour, so a zero-length blob does not
    survive a round trip by default.

    Raises ParseError on any truncated or malformed structure; never returns
    a partial list.
    """
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise ParseError(f"expected a bytes-like buffer, got {type(buf).__name__}")

    try:
        reader = _BufferReader(buf)
    except (TypeError, ValueError) as e:
        # non-contiguous or non-byte memoryviews
        raise ParseError(f"unreadable blob list buffer: {e}") from e

    try:
        _check_header(reader)
        root = reader.indirect(0, "root offset")

        files_field = reader.table_field(root, FILE_DATA_LIST_FILES_SLOT, "FileDataList")
        if files_field is None:
            logger.debug("FileDataList has no files vector")
            return []

        start, count = reader.vector(files_field, UOFFSET_SIZE, "files vector")

        out: List[bytes] = []
        for i in range(count):
            element = reader.indirect(start + i * UOFFSET_SIZE, f"file {i} offset")
            data_field = reader.table_field(element, FILE_DATA_DATA_SLOT, f"file {i}")

            if data_field is None:
                data = b""
            else:
                data_start, n = reader.vector(data_field, 1, f"file {i} data")
                data = reader.copy(data_start, n)

            if not data and not keep_empty:
                logger.debug("No data for file %d; skipping", i)
                continue
            out.append(data)
    except struct.error as e:
        raise ParseError(f"malformed blob list buffer: {e}") from e

    logger.debug("Parsed %d blobs from %d files", len(out), count)
    return out
