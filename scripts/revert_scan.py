#!/usr/bin/env python
from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from revert_codes.translate import find_codes, try_expand


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scan log files for compact contract revert codes")
    parser.add_argument("log_root", help="Directory containing log files")
    parser.add_argument("--glob", default="*.log", help="File pattern to scan (default: *.log)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    root = Path(args.log_root)
    totals: Counter[str] = Counter()
    for path in sorted(root.glob(args.glob)):
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
        totals.update(find_codes(text))
    for code, count in totals.most_common():
        print(f"{code}: {count} :: {try_expand(code) or 'unknown'}")


if __name__ == "__main__":
    main()
