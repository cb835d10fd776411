"""Minimum or maximum spanning tree (forest) of a weighted graph."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class WeightedEdge:
    """An edge ``(i, j)`` with weight ``w``."""

    i: int
    j: int
    w: float

    def __str__(self) -> str:
        return f"{self.i} {self.j} {self.w:2.8g}"


def read_weighted_edges(lines: Iterable[str]) -> Iterator[WeightedEdge]:
    """Yield the edges of a weighted edge list; a missing weight means 1.0.

    Lines starting with ``#`` and blank lines are skipped.
    """
    for lineno, line in enumerate(lines, 1):
        if line.startswith("#"):
            continue
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"line {lineno}: expected two node labels")
        try:
            i, j = int(fields[0]), int(fields[1])
            w = float(fields[2]) if len(fields) > 2 else 1.0
        except ValueError as exc:
            raise ValueError(f"line {lineno}: malformed edge") from exc
        if i < 0 or j < 0:
            raise ValueError(f"line {lineno}: node labels must be non-negative")
        yield WeightedEdge(i, j, w)


class _DisjointSets:
    """Union-find over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        return True


def kruskal(
    edges: Iterable[WeightedEdge],
    num_nodes: int | None = None,
    maximum: bool = False,
) -> list[WeightedEdge]:
    """Edges of the minimum (or, with ``maximum``, maximum) spanning forest.

    Edges are returned in the order they are accepted. When ``num_nodes`` is
    omitted it is one more than the largest label.
    """
    edge_list = list(edges)
    largest = max((max(e.i, e.j) for e in edge_list), default=-1)
    if num_nodes is None:
        num_nodes = largest + 1
    elif largest >= num_nodes:
        raise ValueError(f"node label {largest} out of range for {num_nodes} nodes")
    sets = _DisjointSets(num_nodes)
    ordered = sorted(edge_list, key=lambda e: e.w, reverse=maximum)
    return [e for e in ordered if sets.union(e.i, e.j)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a spanning tree: ``kruskal <graph_in> [MAX]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Find the minimum/maximum spanning tree of a weighted graph.")
        print("Usage: kruskal <graph_in> [MAX]")
        return 1
    maximum = len(args) > 1 and args[1].lower() == "max"
    try:
        with open(args[0], encoding="utf-8") as handle:
            edges = list(read_weighted_edges(handle))
    except OSError as exc:
        print(f"Error opening file {args[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 7
    for edge in kruskal(edges, maximum=maximum):
        print(edge)
    return 0