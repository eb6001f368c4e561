from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, Optional

from ciaos_sdk.client import CiaosClient
from ciaos_sdk.errors import CiaosError


def getenv_str(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip()
    return v if v else default


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else (getenv_str("CIAOS_LOG_LEVEL", "WARNING") or "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_client() -> CiaosClient:
    try:
        return CiaosClient.from_env()
    except CiaosError as e:
        raise SystemExit(f"{type(e).__name__}: {e}")


def fail(e: CiaosError) -> SystemExit:
    return SystemExit(f"{type(e).__name__}: {e}")


def print_json(payload: Any) -> None:
    if hasattr(payload, "model_dump"):
        payload = payload.model_dump(mode="json", exclude_none=False)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
