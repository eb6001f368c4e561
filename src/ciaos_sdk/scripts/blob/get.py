from __future__ import annotations

import argparse
from pathlib import Path

from ciaos_sdk.errors import CiaosError
from ciaos_sdk.models.blob import BlobInfo, FetchSummary
from ciaos_sdk.scripts.common import add_common_args, fail, get_client, getenv_str, print_json, setup_logging


def _safe_dirname(key: str) -> str:
    name = "".join(ch if ch.isalnum() or ch in {"_", "-", "."} else "_" for ch in key)
    # "." and ".." would resolve outside the output root
    if not name.strip("."):
        return "blob"
    return name


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ciaos-get", description="Fetch the blob list stored under a key")
    ap.add_argument("key")
    ap.add_argument("--out", default=None, help="Output directory (default: out/<key>/)")
    ap.add_argument("--no-write", action="store_true", help="Only print the summary")
    add_common_args(ap)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    client = get_client()
    with client:
        try:
            blobs = client.blob.get(args.key)
        except CiaosError as e:
            raise fail(e)

    out_dir = None
    if not args.no_write:
        base = args.out or str(Path(getenv_str("CIAOS_SCRIPT_OUT_DIR", "out") or "out") / _safe_dirname(args.key))
        out_dir = Path(base).expanduser().resolve()
        out_dir.mkdir(parents=True, exist_ok=True)

    infos = []
    for i, data in enumerate(blobs):
        saved_to = None
        if out_dir is not None:
            p = out_dir / f"blob_{i}.bin"
            p.write_bytes(data)
            saved_to = str(p)
        infos.append(BlobInfo.from_blob(i, data, path=saved_to))

    print_json(
        FetchSummary(
            key=args.key,
            count=len(blobs),
            total_bytes=sum(len(b) for b in blobs),
            blobs=infos,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
