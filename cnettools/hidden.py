"""Hidden-variable random graphs reproducing a joint degree distribution."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Sequence

from cnettools.graph import Graph, read_graph


@dataclass
class Distributions:
    """Degree distribution ``pk`` and joint degree distribution ``pkk``."""

    k_min: int
    k_max: int
    pk: list[float]
    pkk: list[list[float]]


@dataclass
class HiddenSample:
    """A sampled graph: its edges, each node's hidden variable and new degree."""

    edges: list[tuple[int, int]]
    hidden: list[int]
    degrees: list[int]


def compute_distributions(graph: Graph) -> Distributions:
    """Normalised degree and joint degree distributions of ``graph``."""
    n = graph.num_nodes
    if n == 0:
        raise ValueError("graph has no nodes")
    degrees = graph.degrees()
    arcs = sum(degrees)
    if arcs == 0:
        raise ValueError("graph has no edges")
    k_min, k_max = min(degrees), max(degrees)
    pk = [0.0] * (k_max + 1)
    for k in degrees:
        pk[k] += 1
    pkk = [[0.0] * (k_max + 1) for _ in range(k_max + 1)]
    for node, k1 in enumerate(degrees):
        for neighbour in graph.neighbours[node]:
            pkk[k1][degrees[neighbour]] += 1
    pk = [count / n for count in pk]
    pkk = [[count / arcs for count in row] for row in pkk]
    return Distributions(k_min, k_max, pk, pkk)


def linking_function(graph: Graph, distributions: Distributions) -> list[list[float]]:
    """Connection probability f(h, h') for each pair of observed degrees."""
    n = graph.num_nodes
    avg_k = graph.num_arcs / n
    pk, pkk = distributions.pk, distributions.pkk
    size = distributions.k_max + 1
    f = [[0.0] * size for _ in range(size)]
    observed = [k for k in range(distributions.k_min, size) if pk[k] > 0]
    for k1 in observed:
        for k2 in observed:
            f[k1][k2] = avg_k * pkk[k1][k2] / (n * pk[k1] * pk[k2])
    return f


def hv_net(graph: Graph, rng: random.Random | None = None) -> HiddenSample:
    """Sample a graph with the same joint degree distribution as ``graph``."""
    rng = rng or random.Random()
    distributions = compute_distributions(graph)
    f = linking_function(graph, distributions)
    support = [
        k
        for k in range(distributions.k_min, distributions.k_max + 1)
        if distributions.pk[k] > 0
    ]
    weights = [distributions.pk[k] for k in support]
    n = graph.num_nodes
    hidden = rng.choices(support, weights=weights, k=n)
    new_degrees = [0] * n
    edges: list[tuple[int, int]] = []
    for i in range(n):
        row = f[hidden[i]]
        for j in range(i + 1, n):
            if rng.random() < row[hidden[j]]:
                edges.append((i, j))
                new_degrees[i] += 1
                new_degrees[j] += 1
    return HiddenSample(edges, hidden, new_degrees)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a hidden-variable graph: ``hv_net <graph_in> [SHOW]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Create a random graph with the joint degree distribution of the input.")
        print("Usage: hv_net <graph_in> [SHOW]")
        return 1
    try:
        graph = read_graph(args[0])
    except OSError as exc:
        print(f"Error opening file {args[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    try:
        sample = hv_net(graph)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    for i, j in sample.edges:
        print(f"{i} {j}")
    if len(args) > 1 and args[1].lower() == "show":
        for h, k in zip(sample.hidden, sample.degrees):
            print(f"{h} {k}", file=sys.stderr)
    return 0