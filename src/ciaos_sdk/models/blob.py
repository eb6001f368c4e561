from __future__ import annotations

import hashlib
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator


class BlobListBody(BaseModel):
    """Write payload for put_binary / update / append."""

    blobs: List[bytes] = Field(default_factory=list)

    @field_validator("blobs", mode="before")
    @classmethod
    def _strict_bytes(cls, v: Any) -> Any:
        # pydantic would happily coerce str -> bytes; blobs must already be binary
        if isinstance(v, (str, bytes, bytearray, memoryview)) or not hasattr(v, "__iter__"):
            raise ValueError("blobs must be a sequence of bytes-like objects")
        out: List[bytes] = []
        for i, item in enumerate(v):
            if isinstance(item, bytes):
                out.append(item)
            elif isinstance(item, (bytearray, memoryview)):
                out.append(bytes(item))
            else:
                raise ValueError(f"blob {i} is not bytes-like (got {type(item).__name__})")
        return out


class BlobInfo(BaseModel):
    index: int
    size: int
    sha256: str
    path: Optional[str] = None

    @classmethod
    def from_blob(cls, index: int, data: bytes, path: Optional[str] = None) -> "BlobInfo":
        return cls(index=index, size=len(data), sha256=hashlib.sha256(data).hexdigest(), path=path)


class FetchSummary(BaseModel):
    key: str
    count: int
    total_bytes: int
    blobs: List[BlobInfo] = Field(default_factory=list)
