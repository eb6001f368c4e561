from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import requests

from ciaos_sdk.transport.payload import read_bytes


def read_blob_files(paths: List[str]) -> List[bytes]:
    """
    One blob per local file, in argument order.
    Raises FileReadError for the first missing/unreadable path.
    """
    return [read_bytes(Path(p).expanduser()) for p in paths]


def response_summary(key: str, r: requests.Response) -> Dict[str, Any]:
    return {
        "ok": 200 <= r.status_code < 300,
        "key": key,
        "status_code": r.status_code,
        "body": (r.text or "").strip(),
    }
