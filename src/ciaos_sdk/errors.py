from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


class CiaosError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigError(CiaosError):
    """Missing or empty user id / api url. Raised before any request."""


class InputError(CiaosError):
    """Missing or malformed call argument. Raised before any I/O."""


class FileReadError(CiaosError, OSError):
    """Local file missing or unreadable; chains the underlying OSError."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class EncodeError(CiaosError):
    """
    Raised when a blob list cannot be serialized.

    Only reachable for non bytes-like blobs or when the builder hits its
    size limit.
    """


class ParseError(CiaosError):
    """
    Raised when a wire buffer is truncated or does not follow the
    FileDataList layout.
    """


@dataclass
class ApiError(CiaosError):
    status_code: int
    message: str
    response_text: Optional[str] = None

    def __post_init__(self):
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.response_text:
            return f"{self.status_code}: {self.message} | {self.response_text}"
        return f"{self.status_code}: {self.message}"


class BadRequest(ApiError):
    """400"""


class Unauthorized(ApiError):
    """401"""


class Forbidden(ApiError):
    """403"""


class NotFound(ApiError):
    """404"""


class ServerError(ApiError):
    """5xx"""


class TransportError(ApiError):
    """status_code 0: the request never completed"""
