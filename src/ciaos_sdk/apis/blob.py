from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ..codec.decoder import decode_blobs
from ..codec.encoder import BlobLike, encode_blobs
from ..errors import InputError
from ..models.blob import BlobListBody
from ..transport.http import HttpTransport
from ..transport.payload import BytesSource, guess_key, read_bytes

logger = logging.getLogger(__name__)

# NOTE:
# The storage service exposes one route per operation, keyed by path segment:
# - POST   /put/{key}                body: FileDataList buffer
# - POST   /update_key/{old}/{new}
# - POST   /update/{key}             body: FileDataList buffer (replaces)
# - POST   /append/{key}             body: FileDataList buffer
# - DELETE /delete/{key}
# - GET    /get/{key}                response: FileDataList buffer
# Every request carries the caller id in the "User" header (set by HttpTransport).

_BINARY_HEADERS = {"Content-Type": "application/octet-stream"}

BlobListInput = Union[BlobListBody, Sequence[BlobLike]]


def _segment(name: str, value: Optional[str]) -> str:
    if not isinstance(value, str) or not value:
        raise InputError(f"{name} cannot be empty or None")
    return quote(value, safe="")


def _blob_list(data_list: BlobListInput) -> List[bytes]:
    if isinstance(data_list, BlobListBody):
        return data_list.blobs
    try:
        return BlobListBody(blobs=data_list).blobs
    except ValidationError as e:
        raise InputError(f"invalid data_list: {e.errors()[0]['msg']}") from e


class BlobAPI:
    def __init__(self, http: HttpTransport):
        self._http = http

    def _post_blobs(self, route: str, key: str, blobs: List[bytes]) -> requests.Response:
        path = f"/{route}/{_segment('key', key)}"
        body = encode_blobs(blobs)
        return self._http.request(
            "POST",
            path,
            data=body,
            headers=_BINARY_HEADERS,
        )

    # -------- put --------

    def put(self, file_path: BytesSource, key: Optional[str] = None) -> requests.Response:
        """
        Upload one local file as a single-blob list.

        The key defaults to the file's base name. Despite the route name the
        service expects POST.
        """
        if file_path is None or (isinstance(file_path, str) and not file_path):
            raise InputError("file_path cannot be empty or None")

        key = key or guess_key(file_path, fallback="")
        _segment("key", key)

        data = read_bytes(file_path)
        logger.info("Uploading %d bytes under key %r", len(data), key)
        return self._post_blobs("put", key, [data])

    def put_binary(self, key: str, data_list: BlobListInput) -> requests.Response:
        return self._post_blobs("put", key, _blob_list(data_list))

    # -------- keys --------

    def update_key(self, old_key: str, new_key: str) -> str:
        """Rename a key. Returns the service's response body as text."""
        path = f"/update_key/{_segment('old_key', old_key)}/{_segment('new_key', new_key)}"
        r = self._http.request("POST", path)
        return r.text

    # -------- update / append --------

    def update(self, key: str, data_list: BlobListInput) -> requests.Response:
        return self._post_blobs("update", key, _blob_list(data_list))

    def append(self, key: str, data_list: BlobListInput) -> requests.Response:
        return self._post_blobs("append", key, _blob_list(data_list))

    # -------- delete --------

    def delete(self, key: str) -> requests.Response:
        return self._http.request("DELETE", f"/delete/{_segment('key', key)}")

    # -------- get --------

    def get(self, key: str) -> List[bytes]:
        """
        Fetch and decode the blob list stored under key.

        Non-2xx responses raise the matching ApiError before any parsing;
        a malformed body raises ParseError. Zero-length blobs are not returned.
        """
        path = f"/get/{_segment('key', key)}"
        r = self._http.request("GET", path)
        self._http.raise_for_status(r, "GET", path)
        return decode_blobs(r.content)
