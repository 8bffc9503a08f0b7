"""
Inspect the sorting network used for a given n.

Usage:
    staticsort-network 8
    staticsort-network 12 --layers
    staticsort-network 6 --kind bose-nelson --verify
    staticsort-network 16 --format python > net16.py

`--verify` runs the exhaustive zero-one check (n <= 20) and exits with
status 1 if some binary input is left unsorted.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from staticsort.network.select import SUPPORTED_KINDS, Network, network_for
from staticsort.validate.zero_one import MAX_EXHAUSTIVE_N, first_unsorted_binary

_console = Console()


def _edges_table(net: Network, layered: bool) -> Table:
    table = Table(title=f"n={net.n} · {net.kind} · {net.size} comparators · depth {net.depth}")
    if layered:
        table.add_column("Layer", justify="right")
        table.add_column("Comparators")
        for k, stage in enumerate(net.layers()):
            table.add_row(str(k), " ".join(f"({i},{j})" for i, j in stage))
    else:
        table.add_column("#", justify="right")
        table.add_column("i", justify="right")
        table.add_column("j", justify="right")
        for k, (i, j) in enumerate(net.edges):
            table.add_row(str(k), str(i), str(j))
    return table


def _as_python(net: Network) -> str:
    header = f"# n={net.n}, {net.kind}, {net.size} comparators\n"
    stages = net.layers()
    if not stages:
        return f"{header}NETWORK_{net.n} = ()\n"
    body = "".join(f"    {stage!r},\n" for stage in stages)
    return f"{header}NETWORK_{net.n} = (\n{body})\n"


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print (and optionally verify) the sorting network for n elements.")
    p.add_argument("n", type=int, help="Number of elements")
    p.add_argument("--kind", choices=sorted(SUPPORTED_KINDS), default=None, help="Force a construction")
    p.add_argument("--layers", action="store_true", help="Group comparators into parallel layers")
    p.add_argument("--format", choices=["table", "python"], default="table")
    p.add_argument("--verify", action="store_true", help="Exhaustive zero-one check")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        net = network_for(args.n, args.kind)
    except ValueError as e:
        _console.print(f"[bold red]error:[/bold red] {e}")
        return 2

    if args.format == "python":
        print(_as_python(net), end="")
    else:
        _console.print(_edges_table(net, args.layers))

    if args.verify:
        if net.n > MAX_EXHAUSTIVE_N:
            _console.print(f"[yellow]skip verify:[/yellow] n={net.n} exceeds {MAX_EXHAUSTIVE_N}")
            return 0
        bad = first_unsorted_binary(net.edges, net.n)
        if bad is not None:
            _console.print(f"[bold red]FAIL[/bold red] binary input left unsorted: {bad}")
            return 1
        _console.print(f"[bold green]OK[/bold green] sorts all {1 << net.n} binary inputs")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
