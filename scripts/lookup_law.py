from __future__ import annotations

import argparse
import logging

from pillarcandy.riksdagen.client import RiksdagenClient, RiksdagenConfig
from pillarcandy.riksdagen.law_id import DEFAULT_BASE_URL
from pillarcandy.riksdagen.lookup import lookup_law, render_result


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Look up a Swedish statute (SFS) by identifier, e.g. 1998:899."
    )
    parser.add_argument("identifier", help="Law identifier <year>:<number>.")
    parser.add_argument(
        "--text",
        action="store_true",
        help="Show designation, title and statute text instead of metadata.",
    )
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Document API base URL.")
    parser.add_argument("--timeout", type=int, default=30, help="HTTP timeout in seconds.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    client = RiksdagenClient(RiksdagenConfig(base_url=args.base_url, timeout_s=args.timeout))
    result = lookup_law(args.identifier, client=client, mode="text" if args.text else "metadata")

    print(render_result(result))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
