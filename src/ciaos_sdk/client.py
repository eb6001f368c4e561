from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import requests

from .transport.http import HttpTransport
from .config import get_settings
from .errors import ConfigError

from .apis.blob import BlobAPI


@dataclass
class CiaosClient:
    api_url: str
    user_id: str
    timeout: int = 30

    # optional pre-built session (tests, custom adapters)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _http: HttpTransport = field(init=False, repr=False)

    # exposed APIs
    blob: BlobAPI = field(init=False)

    def __post_init__(self) -> None:
        # validate before any transport exists
        if not isinstance(self.user_id, str) or not self.user_id.strip():
            raise ConfigError("user id must not be empty")
        if not isinstance(self.api_url, str) or not self.api_url.strip():
            raise ConfigError("api url must not be empty")

        self.api_url = self.api_url.strip().rstrip("/")
        self._http = HttpTransport(self.api_url, self.user_id, timeout=self.timeout, session=self.session)
        self.blob = BlobAPI(self._http)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CiaosClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "CiaosClient":
        s = get_settings()
        return cls(
            api_url=s.api_url,
            user_id=s.user_id,
            timeout=s.timeout,
            session=session,
        )
