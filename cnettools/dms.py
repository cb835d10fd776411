"""Dorogovtsev-Mendes-Samukhin growth with attachment probability k_j + a."""

from __future__ import annotations

import random
import sys
from bisect import bisect_right
from collections import defaultdict
from typing import Sequence


class _CumulativeDistribution:
    """Weighted sampler over repeated (id, weight) additions."""

    def __init__(self) -> None:
        self._ids: list[int] = []
        self._cumulative: list[float] = []
        self._weight_of: dict[int, float] = defaultdict(float)

    @property
    def total(self) -> float:
        return self._cumulative[-1] if self._cumulative else 0.0

    @property
    def support(self) -> int:
        return sum(1 for w in self._weight_of.values() if w > 0)

    def add(self, item: int, weight: float) -> None:
        self._ids.append(item)
        self._cumulative.append(self.total + weight)
        self._weight_of[item] += weight

    def sample(self, rng: random.Random) -> int:
        total = self.total
        if total <= 0:
            raise ValueError("cannot sample from a distribution with no weight")
        x = rng.random() * total
        index = min(bisect_right(self._cumulative, x), len(self._ids) - 1)
        return self._ids[index]


def dms(
    n: int, m: int, n0: int, a: float, rng: random.Random | None = None
) -> list[tuple[int, int]]:
    """Grow a network and return its edges as ``(target, new_node)`` pairs.

    The seed is a clique of ``n0`` nodes; each new node attaches ``m``
    distinct edges to existing nodes with probability proportional to
    ``k_j + a``.
    """
    if n < 1:
        raise ValueError("N must be positive")
    if m > n0:
        raise ValueError("n0 cannot be smaller than m")
    if n0 < 1:
        raise ValueError("n0 must be positive")
    if m < 1:
        raise ValueError("m must be positive")
    if a < -m:
        raise ValueError("a must be larger than -m")

    rng = rng or random.Random()
    distribution = _CumulativeDistribution()
    edges: list[tuple[int, int]] = []

    for node in range(n0):
        edges.extend((other, node) for other in range(node + 1, n0))
        distribution.add(node, n0 + a)

    for node in range(n0, n):
        if distribution.support < m:
            raise ValueError("not enough nodes with positive attachment weight")
        targets: list[int] = []
        while len(targets) < m:
            dest = distribution.sample(rng)
            if dest not in targets:
                targets.append(dest)
        edges.extend((dest, node) for dest in targets)
        distribution.add(node, m + a)
        for dest in targets:
            distribution.add(dest, 1)
    return edges


def main(argv: Sequence[str] | None = None) -> int:
    """Print the edge list of a DMS network: ``dms N m n0 a``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 4:
        print("Grow a scale-free network with the Dorogovtsev-Mendes-Samukhin model.")
        print("Usage: dms <N> <m> <n0> <a>")
        return 1
    try:
        n, m, n0 = int(args[0]), int(args[1]), int(args[2])
        a = float(args[3])
        edges = dms(n, m, n0, a)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for target, new_node in edges:
        print(f"{target} {new_node}")
    return 0