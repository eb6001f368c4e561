from __future__ import annotations

import argparse

from ciaos_sdk.errors import CiaosError
from ciaos_sdk.scripts.common import add_common_args, fail, get_client, print_json, setup_logging
from ciaos_sdk.scripts.blob.utils import response_summary


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ciaos-delete", description="Delete the blobs stored under a key")
    ap.add_argument("key")
    add_common_args(ap)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    client = get_client()
    with client:
        try:
            r = client.blob.delete(args.key)
        except CiaosError as e:
            raise fail(e)

    print_json(response_summary(args.key, r))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
