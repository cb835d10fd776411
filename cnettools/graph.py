"""Edge-list graphs and their basic degree statistics."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence, TextIO

Edge = tuple[int, int, float]


@dataclass
class Graph:
    """Adjacency-list graph. Undirected edges are stored in both directions."""

    num_nodes: int
    neighbours: list[list[int]]
    weights: list[list[float]]
    directed: bool = False

    @property
    def num_arcs(self) -> int:
        """Total number of adjacency entries (twice the edges if undirected)."""
        return sum(len(adjacent) for adjacent in self.neighbours)

    def degree(self, node: int) -> int:
        """Number of adjacency entries of ``node``."""
        return len(self.neighbours[node])

    def strength(self, node: int) -> float:
        """Sum of the weights of the edges incident on ``node``."""
        return sum(self.weights[node])

    def degrees(self) -> list[int]:
        """Degree of every node, in label order."""
        return [len(adjacent) for adjacent in self.neighbours]

    def has_edge(self, i: int, j: int) -> bool:
        """True if ``j`` is in the adjacency list of ``i``."""
        return j in self.neighbours[i]


@dataclass(frozen=True)
class GraphInfo:
    """Number of nodes and edges, and the first two moments of the degrees."""

    num_nodes: int
    num_edges: int
    avg_degree: float
    avg_squared_degree: float

    def __str__(self) -> str:
        return (
            f"{self.num_nodes} {self.num_edges} "
            f"{self.avg_degree:2.6f} {self.avg_squared_degree:2.6f}"
        )


def parse_edges(lines: Iterable[str], weighted: bool = False) -> Iterator[Edge]:
    """Yield ``(i, j, w)`` for each edge line; comments and blank lines are skipped.

    Without ``weighted`` (or when a line has no third column) the weight is 1.0.
    """
    for lineno, line in enumerate(lines, 1):
        fields = line.split()
        if not fields or fields[0].startswith("#"):
            continue
        if len(fields) < 2:
            raise ValueError(f"line {lineno}: expected two node labels")
        try:
            i, j = int(fields[0]), int(fields[1])
        except ValueError as exc:
            raise ValueError(f"line {lineno}: invalid node label") from exc
        if i < 0 or j < 0:
            raise ValueError(f"line {lineno}: node labels must be non-negative")
        weight = 1.0
        if weighted and len(fields) > 2:
            try:
                weight = float(fields[2])
            except ValueError as exc:
                raise ValueError(f"line {lineno}: invalid weight") from exc
        yield i, j, weight


def build_graph(edges: Iterable[Sequence], directed: bool = False) -> Graph:
    """Build a graph from ``(i, j)`` or ``(i, j, w)`` tuples.

    The number of nodes is one more than the largest label.
    """
    edge_list = [
        (int(e[0]), int(e[1]), float(e[2]) if len(e) > 2 else 1.0) for e in edges
    ]
    for i, j, _ in edge_list:
        if i < 0 or j < 0:
            raise ValueError("node labels must be non-negative")
    num_nodes = max((max(i, j) for i, j, _ in edge_list), default=-1) + 1
    neighbours: list[list[int]] = [[] for _ in range(num_nodes)]
    weights: list[list[float]] = [[] for _ in range(num_nodes)]
    for i, j, w in edge_list:
        neighbours[i].append(j)
        weights[i].append(w)
        if not directed:
            neighbours[j].append(i)
            weights[j].append(w)
    return Graph(num_nodes, neighbours, weights, directed)


@contextmanager
def _open_input(path: str) -> Iterator[TextIO]:
    if path == "-":
        yield sys.stdin
    else:
        with open(path, encoding="utf-8") as handle:
            yield handle


def read_graph(path: str, weighted: bool = False, directed: bool = False) -> Graph:
    """Read an edge-list file; ``-`` means standard input."""
    with _open_input(path) as handle:
        return build_graph(parse_edges(handle, weighted), directed)


def degree_sequence(graph: Graph) -> list[int]:
    """Degree of each node."""
    return graph.degrees()


def degree_strength_sequence(graph: Graph) -> list[tuple[int, float]]:
    """``(degree, strength)`` of each node."""
    return [(graph.degree(n), graph.strength(n)) for n in range(graph.num_nodes)]


def graph_info(graph: Graph) -> GraphInfo:
    """Nodes, edges, average degree and average squared degree."""
    if graph.num_nodes == 0:
        raise ValueError("graph has no nodes")
    degrees = graph.degrees()
    arcs = sum(degrees)
    return GraphInfo(
        num_nodes=graph.num_nodes,
        num_edges=arcs // 2,
        avg_degree=arcs / graph.num_nodes,
        avg_squared_degree=sum(k * k for k in degrees) / graph.num_nodes,
    )


def _single_input_main(
    argv: Sequence[str] | None,
    name: str,
    description: str,
    weighted: bool,
    render: Callable[[Graph], Iterable[str]],
) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(description)
        print(f"Usage: {name} <graph_in>")
        return 1
    try:
        graph = read_graph(args[0], weighted=weighted)
        lines = list(render(graph))
    except OSError as exc:
        print(f"Error opening file {args[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    for line in lines:
        print(line)
    return 0


def deg_seq_main(argv: Sequence[str] | None = None) -> int:
    """Print the degree of each node, one per line."""
    return _single_input_main(
        argv,
        "deg_seq",
        "Compute the degree sequence of a graph given as an edge list.",
        False,
        lambda g: (str(k) for k in degree_sequence(g)),
    )


def deg_seq_w_main(argv: Sequence[str] | None = None) -> int:
    """Print the degree and strength of each node, one per line."""
    return _single_input_main(
        argv,
        "deg_seq_w",
        "Compute the degree and the strength sequence of a weighted graph.",
        True,
        lambda g: (f"{k} {s:.18g}" for k, s in degree_strength_sequence(g)),
    )


def graph_info_main(argv: Sequence[str] | None = None) -> int:
    """Print ``N K avg_k avg_k2`` for the graph."""
    return _single_input_main(
        argv,
        "graph_info",
        "Compute number of nodes, edges, average degree and average squared degree.",
        False,
        lambda g: [str(graph_info(g))],
    )