from __future__ import annotations

import argparse
from pathlib import Path

from ciaos_sdk.errors import CiaosError
from ciaos_sdk.scripts.common import add_common_args, fail, get_client, print_json, setup_logging
from ciaos_sdk.scripts.blob.utils import response_summary


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ciaos-put-file", description="Upload a local file as a single blob")
    ap.add_argument("path", help="Local file path to upload")
    ap.add_argument("--key", default=None, help="Storage key (defaults to the file's base name)")
    add_common_args(ap)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    file_path = Path(args.path).expanduser()
    key = args.key or file_path.name

    client = get_client()
    with client:
        try:
            r = client.blob.put(str(file_path), key)
        except CiaosError as e:
            raise fail(e)

    print_json(response_summary(key, r))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
