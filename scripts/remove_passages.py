#!/usr/bin/env python3
"""Remove banned passages from a text file (or stdin).

Usage:
    python scripts/remove_passages.py [INPUT [OUTPUT]]

INPUT defaults to stdin ("-"), OUTPUT to stdout. Uses the passage set from
PASSAGES_FILE (or the built-in default).
"""

from __future__ import annotations

import sys
from pathlib import Path

from remover.core.logging import log
from remover.core.passages import get_remover
from remover.core.storage import atomic_write


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 2:
        print(__doc__, file=sys.stderr)
        return 2

    source = args[0] if args else "-"
    dest = args[1] if len(args) > 1 else "-"

    if source == "-":
        text = sys.stdin.read()
    else:
        source_path = Path(source)
        if not source_path.is_file():
            print(f"Input file not found: {source}", file=sys.stderr)
            return 1
        text = source_path.read_text(encoding="utf-8", errors="replace")

    report = get_remover().filter_with_report(text)

    if dest == "-":
        sys.stdout.write(report.text)
    else:
        atomic_write(dest, report.text)

    erased = ", ".join(report.erased_passages) or "none"
    print(
        f"Removed {report.segments_removed} segment(s), erased passages: {erased} "
        f"({report.len_before} -> {report.len_after} chars)",
        file=sys.stderr,
    )
    log.info(
        f"CLI_FILTER_DONE source={source} dest={dest} "
        f"len_before={report.len_before} len_after={report.len_after}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
