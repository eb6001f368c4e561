from __future__ import annotations

from pathlib import Path
from typing import IO, Union
import os

from ..errors import FileReadError, InputError


BytesSource = Union[str, Path, bytes, IO[bytes]]


def read_bytes(source: BytesSource) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, Path)):
        path = str(source)
        if not path:
            raise InputError("file_path cannot be empty or None")
        try:
            with open(path, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise FileReadError(f"file not found: {path}", path) from e
        except OSError as e:
            raise FileReadError(f"failed to read file: {path}: {e}", path) from e

    # file-like
    data = source.read()
    if not isinstance(data, bytes):
        raise InputError(f"file-like source must be opened in binary mode (read returned {type(data).__name__})")
    return data


def guess_key(source: BytesSource, fallback: str) -> str:
    if isinstance(source, (str, Path)):
        base = os.path.basename(str(source))
        return base or fallback

    # Try file-like .name if present
    name = getattr(source, "name", None)
    if isinstance(name, str) and name:
        base = os.path.basename(name)
        if base:
            return base

    return fallback
