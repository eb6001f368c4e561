# config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError


def _load_env() -> None:
    cwd_env = Path.cwd() / ".env"
    pkg_env = Path(__file__).resolve().parents[2] / ".env"

    if pkg_env.exists():
        load_dotenv(pkg_env, override=False)
    if cwd_env.exists():
        load_dotenv(cwd_env, override=False)


_load_env()


DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class Settings:
    api_url: str
    user_id: str
    timeout: int = DEFAULT_TIMEOUT


def get_settings() -> Settings:
    api_url = os.getenv("CIAOS_API_URL", "").strip()
    if not api_url:
        raise ConfigError("CIAOS_API_URL is missing. Put it in .env or environment variables.")

    user_id = os.getenv("CIAOS_USER_ID", "").strip()
    if not user_id:
        raise ConfigError("CIAOS_USER_ID is missing. Put it in .env or environment variables.")

    timeout_s = os.getenv("CIAOS_TIMEOUT", str(DEFAULT_TIMEOUT)).strip()
    try:
        timeout = int(timeout_s)
    except ValueError:
        timeout = DEFAULT_TIMEOUT

    return Settings(api_url=api_url, user_id=user_id, timeout=timeout)
