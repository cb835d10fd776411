"""Weighted average nearest-neighbour degree knn_w(k), optionally binned."""

from __future__ import annotations

import math
from typing import Sequence

from cnettools.graph import Graph
from cnettools.knn import KnnEntry, _knn_command


def knn_weighted_by_degree(graph: Graph) -> list[KnnEntry]:
    """Per-degree sums of ``sum_j w_ij k_j / s_i``, sorted by degree.

    Nodes with zero strength contribute NaN.
    """
    degrees = graph.degrees()
    by_degree: dict[int, KnnEntry] = {}
    for node, k in enumerate(degrees):
        weighted_sum = sum(
            w * degrees[j]
            for j, w in zip(graph.neighbours[node], graph.weights[node])
        )
        strength = graph.strength(node)
        value = weighted_sum / strength if strength != 0 else math.nan
        entry = by_degree.get(k)
        if entry is None:
            by_degree[k] = KnnEntry(k, 1, value)
        else:
            entry.count += 1
            entry.knnsum += value
    return [by_degree[k] for k in sorted(by_degree)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print knn_w(k): ``knn_w <graph_in> [<NO|LIN|EXP> <bin_param>]``."""
    return _knn_command(
        argv,
        "knn_w",
        "Compute the weighted average nearest-neighbour degree function knn_w(k).",
        True,
        knn_weighted_by_degree,
    )