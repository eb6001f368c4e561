from __future__ import annotations

import argparse

from ciaos_sdk.errors import CiaosError
from ciaos_sdk.scripts.common import add_common_args, fail, get_client, print_json, setup_logging


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ciaos-update-key", description="Rename a storage key")
    ap.add_argument("old_key")
    ap.add_argument("new_key")
    add_common_args(ap)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    client = get_client()
    with client:
        try:
            body = client.blob.update_key(args.old_key, args.new_key)
        except CiaosError as e:
            raise fail(e)

    print_json({"old_key": args.old_key, "new_key": args.new_key, "body": body.strip()})
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
