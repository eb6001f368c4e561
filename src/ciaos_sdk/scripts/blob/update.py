from __future__ import annotations

import argparse

from ciaos_sdk.errors import CiaosError
from ciaos_sdk.scripts.common import add_common_args, fail, get_client, print_json, setup_logging
from ciaos_sdk.scripts.blob.utils import read_blob_files, response_summary


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ciaos-update", description="Replace the blob list stored under a key")
    ap.add_argument("key", help="Storage key")
    ap.add_argument("paths", nargs="+", help="Local files; each becomes one blob, in order")
    add_common_args(ap)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    client = get_client()
    with client:
        try:
            blobs = read_blob_files(args.paths)
            r = client.blob.update(args.key, blobs)
        except CiaosError as e:
            raise fail(e)

    out = response_summary(args.key, r)
    out["blobs"] = len(blobs)
    print_json(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
