"""Average nearest-neighbour degree knn(k), optionally binned."""

from __future__ import annotations

import math
import sys
from bisect import bisect_left
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from cnettools.graph import Graph, read_graph


@dataclass
class KnnEntry:
    """Accumulated neighbour-degree sum of the ``count`` nodes of degree ``k``."""

    k: int
    count: int
    knnsum: float


def knn_by_degree(graph: Graph) -> list[KnnEntry]:
    """Sum of neighbour degrees grouped by node degree, sorted by degree."""
    degrees = graph.degrees()
    by_degree: dict[int, KnnEntry] = {}
    for node, k in enumerate(degrees):
        total = float(sum(degrees[j] for j in graph.neighbours[node]))
        entry = by_degree.get(k)
        if entry is None:
            by_degree[k] = KnnEntry(k, 1, total)
        else:
            entry.count += 1
            entry.knnsum += total
    return [by_degree[k] for k in sorted(by_degree)]


def knn_nobin(entries: Iterable[KnnEntry]) -> list[tuple[int, float]]:
    """``(k, knn(k))`` for every degree, with knn(k) = knnsum / (k * count)."""
    rows = []
    for entry in sorted(entries, key=lambda e: e.k):
        denominator = entry.k * entry.count
        rows.append((entry.k, entry.knnsum / denominator if denominator else math.nan))
    return rows


def _aggregate(
    entries: Sequence[KnnEntry], bounds: Sequence[int], weighted: bool
) -> list[tuple[int, float]]:
    num = [0.0] * len(bounds)
    values = [0.0] * len(bounds)
    last = len(bounds) - 1
    for entry in entries:
        slot = min(bisect_left(bounds, entry.k), last)
        num[slot] += entry.count if weighted else entry.count * entry.k
        values[slot] += entry.knnsum
    return [(bound, v / c) for bound, c, v in zip(bounds, num, values) if c]


def knn_linear_bins(
    entries: Iterable[KnnEntry], num_bins: int, weighted: bool = False
) -> list[tuple[int, float]]:
    """knn(k) averaged over ``num_bins`` bins of equal width.

    Each row is ``(upper_bound, value)``; empty bins are omitted.
    """
    entries = list(entries)
    if num_bins < 1:
        raise ValueError("the number of bins must be positive")
    if not entries:
        return []
    kmin = min(e.k for e in entries)
    kmax = max(e.k for e in entries)
    step = (kmax - kmin) // num_bins + 1
    bounds = [kmin + step * (i + 1) for i in range(num_bins)]
    return _aggregate(entries, bounds, weighted)


def knn_exp_bins(
    entries: Iterable[KnnEntry], alpha: float, weighted: bool = False
) -> list[tuple[int, float]]:
    """knn(k) averaged over bins whose width grows by a factor ``alpha``."""
    entries = list(entries)
    if alpha <= 1:
        raise ValueError("the exponent for exponential binning must be larger than 1")
    if not entries:
        return []
    kmin = min(e.k for e in entries)
    kmax = max(e.k for e in entries)
    if kmax < 1:
        raise ValueError("exponential binning needs at least one positive degree")
    num_bins = math.ceil(math.log(kmax) / math.log(alpha)) + 1
    width = 2.0
    bounds = [int(kmin + width)]
    for _ in range(1, num_bins):
        width *= alpha
        bounds.append(math.ceil(bounds[-1] + width))
    return _aggregate(entries, bounds, weighted)


def _knn_command(
    argv: Sequence[str] | None,
    name: str,
    description: str,
    weighted: bool,
    compute: Callable[[Graph], list[KnnEntry]],
) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(description)
        print(f"Usage: {name} <graph_in> [<NO|LIN|EXP> <bin_param>]")
        return 1

    mode = "no"
    num_bins = 0
    alpha = 0.0
    if len(args) > 1:
        choice = args[1].lower()
        if choice == "lin":
            if len(args) < 3:
                print("you must provide a number of bins for linear binning", file=sys.stderr)
                return 3
            try:
                num_bins = int(args[2])
            except ValueError:
                print("the number of bins must be an integer", file=sys.stderr)
                return 3
            mode = "lin"
        elif choice == "exp":
            if len(args) < 3:
                print("you must provide an exponent for exponential binning", file=sys.stderr)
                return 4
            try:
                alpha = float(args[2])
            except ValueError:
                print("the exponent must be a number", file=sys.stderr)
                return 4
            mode = "exp"

    try:
        graph = read_graph(args[0], weighted=weighted)
    except OSError as exc:
        print(f"Error opening file {args[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3

    entries = compute(graph)
    try:
        if mode == "lin":
            rows = knn_linear_bins(entries, num_bins, weighted)
        elif mode == "exp":
            rows = knn_exp_bins(entries, alpha, weighted)
        else:
            rows = knn_nobin(entries)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    for k, value in rows:
        print(f"{k} {value:.8g}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print knn(k): ``knn <graph_in> [<NO|LIN|EXP> <bin_param>]``."""
    return _knn_command(
        argv,
        "knn",
        "Compute the average nearest-neighbour degree function knn(k).",
        False,
        knn_by_degree,
    )