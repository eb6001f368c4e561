"""
Wire layout shared by the encoder and decoder.

The service stores blob lists as FlatBuffers built from this schema:

    table FileData     { data: [ubyte]; }
    table FileDataList { files: [FileData]; }
    root_type FileDataList;

Both tables have a single field in slot 0. There is no file identifier,
so the only layout markers are the root offset, the vtables and the
4-byte alignment of the finished buffer.
"""
from __future__ import annotations

import flatbuffers
from flatbuffers import number_types as N


UOFFSET_SIZE = N.UOffsetTFlags.bytewidth
SOFFSET_SIZE = N.SOffsetTFlags.bytewidth
VOFFSET_SIZE = N.VOffsetTFlags.bytewidth

# vtable header: vtable size + object size
VTABLE_HEADER_SIZE = 2 * VOFFSET_SIZE

FILE_DATA_DATA_SLOT = 0
FILE_DATA_LIST_FILES_SLOT = 0

BUFFER_ALIGNMENT = UOFFSET_SIZE


def field_vtable_offset(slot: int) -> int:
    """Position of a field's entry inside its table's vtable."""
    return VTABLE_HEADER_SIZE + slot * VOFFSET_SIZE


# ---- FileData ----

def file_data_create(builder: flatbuffers.Builder, data: bytes) -> int:
    data_off = builder.CreateByteVector(data)
    builder.StartObject(1)
    builder.PrependUOffsetTRelativeSlot(FILE_DATA_DATA_SLOT, data_off, 0)
    return builder.EndObject()


# ---- FileDataList ----

def file_data_list_create_files(builder: flatbuffers.Builder, offsets: list[int]) -> int:
    builder.StartVector(UOFFSET_SIZE, len(offsets), UOFFSET_SIZE)
    # vectors are built back to front
    for off in reversed(offsets):
        builder.PrependUOffsetTRelative(off)
    return builder.EndVector()


def file_data_list_create(builder: flatbuffers.Builder, files_off: int) -> int:
    builder.StartObject(1)
    builder.PrependUOffsetTRelativeSlot(FILE_DATA_LIST_FILES_SLOT, files_off, 0)
    return builder.EndObject()
