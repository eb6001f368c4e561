from __future__ import annotations

import logging
from typing import Dict, Optional
import requests

from ..errors import ApiError, BadRequest, Unauthorized, Forbidden, NotFound, ServerError, TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    def __init__(
        self,
        base_url: str,
        user_id: str,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        # the service identifies callers by this header only
        h: Dict[str, str] = {"User": self.user_id}
        if extra:
            h.update(extra)
        return h

    def _normalize_path(self, path: str) -> str:
        return path if path.startswith("/") else f"/{path}"

    def _pick_exc(self, status_code: int):
        if status_code == 400:
            return BadRequest
        if status_code == 401:
            return Unauthorized
        if status_code == 403:
            return Forbidden
        if status_code == 404:
            return NotFound
        if status_code >= 500:
            return ServerError
        return ApiError

    def request(
        self,
        method: str,
        path: str,
        *,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Issue one request and return the response whatever its status.
        Only a request that never completes raises (TransportError).
        """
        path = self._normalize_path(path)
        url = f"{self.base_url}{path}"

        try:
            r = self.session.request(
                method=method,
                url=url,
                data=data,
                headers=self._headers(headers),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s did not complete: %s", method, path, e)
            raise TransportError(status_code=0, message=f"{method} {path} failed: {e}") from e

        logger.debug(
            "%s %s -> %s (%d bytes sent, %d bytes received)",
            method,
            path,
            r.status_code,
            len(data) if data else 0,
            len(r.content or b""),
        )
        return r

    def raise_for_status(self, r: requests.Response, method: str, path: str) -> None:
        if 200 <= r.status_code < 300:
            return

        exc = self._pick_exc(r.status_code)
        server_msg = (r.text or "").strip()

        raise exc(
            status_code=r.status_code,
            message=f"{method} {self._normalize_path(path)} failed" + (f": {server_msg}" if server_msg else ""),
            response_text=r.text,
        )

    def close(self) -> None:
        self.session.close()
