"""Erdos-Renyi model B: each of the N(N-1)/2 edges appears with probability p."""

from __future__ import annotations

import random
import sys
from typing import Iterator, Sequence, TextIO


def sample_er(
    n: int, p: float, rng: random.Random | None = None
) -> Iterator[tuple[int, int]]:
    """Yield the edges ``(i, j)``, ``i < j``, of a G(n, p) sample in label order."""
    if n < 0:
        raise ValueError("N must be non-negative")
    rng = rng or random.Random()
    return _edges(n, p, rng)


def _edges(n: int, p: float, rng: random.Random) -> Iterator[tuple[int, int]]:
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                yield i, j


def _write_edges(out: TextIO, n: int, p: float) -> None:
    for i, j in sample_er(n, p):
        out.write(f"{i} {j}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print a G(N, p) edge list: ``er_B <N> <p> [<fileout>]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Sample an Erdos-Renyi graph of N nodes and edge probability p.")
        print("Usage: er_B <N> <p> [<fileout>]")
        return 1
    try:
        n = int(args[0])
        p = float(args[1])
        if n < 0:
            raise ValueError("N must be non-negative")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if len(args) > 2:
        try:
            with open(args[2], "w", encoding="utf-8") as out:
                _write_edges(out, n, p)
        except OSError as exc:
            print(f"Error opening file {args[2]}: {exc.strerror or exc}", file=sys.stderr)
            return 2
    else:
        _write_edges(sys.stdout, n, p)
    return 0