"""Time compact rendering of a large table, built fresh or from copied nodes."""

from __future__ import annotations

import argparse
import io
import sys
import time
from typing import Callable

from htmlgen import H, Node, write

COLUMNS = 10


def _table_data(rows: int) -> list[list[int]]:
    return [list(range(COLUMNS)) for _ in range(rows)]


def build_table(data: list[list[int]]) -> Node:
    table = H.table()
    for row in data:
        tr = table.tr()
        for value in row:
            tr.td().t(str(value))
    return table


def build_table_from_copies(data: list[list[int]]) -> Node:
    # Copies share the open tag already rendered for the template node.
    table = H.table()
    tr_base = H.tr()
    td_base = H.td()
    for row in data:
        tr = tr_base.copy()
        table.add_child(tr)
        for value in row:
            td = td_base.copy()
            tr.add_child(td)
            td.t(str(value))
    return table


def run_variant(build: Callable[[list[list[int]]], Node], rows: int, repeat: int) -> tuple[float, int]:
    """Return the best wall time over ``repeat`` runs and the output size."""
    best = float("inf")
    size = 0
    for _ in range(repeat):
        data = _table_data(rows)
        start = time.perf_counter()
        table = build(data)
        buffer = io.StringIO()
        size = write(buffer, table)
        best = min(best, time.perf_counter() - start)
    return best, size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark building and rendering a big table.")
    parser.add_argument("--rows", type=int, default=1000, help="Number of table rows (default: 1000)")
    parser.add_argument("--repeat", type=int, default=5, help="Runs per variant; the best is reported")
    args = parser.parse_args(argv)

    if args.rows < 0 or args.repeat < 1:
        print("--rows must be >= 0 and --repeat >= 1", file=sys.stderr)
        return 2

    for label, build in (("fresh", build_table), ("copied", build_table_from_copies)):
        seconds, size = run_variant(build, args.rows, args.repeat)
        print(f"{label:>6}: {seconds * 1000:.2f} ms for {size} characters")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
