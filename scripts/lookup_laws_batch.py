from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from pillarcandy.riksdagen.batch import lookup_batch
from pillarcandy.riksdagen.client import RiksdagenClient, RiksdagenConfig
from pillarcandy.riksdagen.law_id import DEFAULT_BASE_URL


def read_identifiers(path: Path) -> List[str]:
    out: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.append(line)
    return out


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Look up a list of SFS identifiers and write their metadata to CSV."
    )
    parser.add_argument("--input", required=True, help="Text file, one <year>:<number> per line.")
    parser.add_argument("--output", required=True, help="Path to output CSV.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", type=int, default=30)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    queries = read_identifiers(Path(args.input))
    client = RiksdagenClient(RiksdagenConfig(base_url=args.base_url, timeout_s=args.timeout))
    df = lookup_batch(queries, client=client)

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)

    ok = int(df["ok"].sum())
    print(f"OK: {ok}/{len(df)}. Wrote {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
