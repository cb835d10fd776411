import math
import random

import pytest

from cnettools.graph import build_graph
from cnettools.hidden import (
    compute_distributions,
    hv_net,
    linking_function,
    main,
)

STAR_PLUS = [(0, 1), (0, 2), (0, 3), (0, 4), (1, 2), (4, 5)]
K4 = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


def test_distributions_are_normalised():
    graph = build_graph(STAR_PLUS)
    d = compute_distributions(graph)
    assert math.isclose(sum(d.pk), 1.0)
    assert math.isclose(sum(sum(row) for row in d.pkk), 1.0)
    assert d.k_min == min(graph.degrees())
    assert d.k_max == max(graph.degrees())


def test_joint_distribution_is_symmetric():
    d = compute_distributions(build_graph(STAR_PLUS))
    size = d.k_max + 1
    for a in range(size):
        for b in range(size):
            assert d.pkk[a][b] == d.pkk[b][a]


def test_unobserved_degrees_have_zero_probability():
    graph = build_graph(STAR_PLUS)
    d = compute_distributions(graph)
    degrees = set(graph.degrees())
    for k, p in enumerate(d.pk):
        assert (p > 0) == (k in degrees)


def test_linking_function_regular_graph():
    graph = build_graph(K4)
    d = compute_distributions(graph)
    f = linking_function(graph, d)
    assert d.pk[3] == 1.0
    assert d.pkk[3][3] == 1.0
    assert math.isclose(f[3][3], 0.75)


def test_linking_function_is_symmetric():
    graph = build_graph(STAR_PLUS)
    f = linking_function(graph, compute_distributions(graph))
    for a in range(len(f)):
        for b in range(len(f)):
            assert math.isclose(f[a][b], f[b][a])


def test_sample_is_consistent():
    graph = build_graph(STAR_PLUS)
    sample = hv_net(graph, random.Random(1))
    n = graph.num_nodes
    assert len(sample.hidden) == n
    assert set(sample.hidden) <= set(graph.degrees())
    assert all(0 <= i < j < n for i, j in sample.edges)
    assert len(set(sample.edges)) == len(sample.edges)
    counts = [0] * n
    for i, j in sample.edges:
        counts[i] += 1
        counts[j] += 1
    assert counts == sample.degrees


def test_sample_is_reproducible_with_seed():
    graph = build_graph(STAR_PLUS)
    a = hv_net(graph, random.Random(7))
    b = hv_net(graph, random.Random(7))
    assert a == b


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        compute_distributions(build_graph([]))


def test_main_show(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("".join(f"{i} {j}\n" for i, j in K4), encoding="utf-8")
    assert main([str(path), "SHOW"]) == 0
    captured = capsys.readouterr()
    err_lines = captured.err.splitlines()
    assert len(err_lines) == 4
    assert all(line.split()[0] == "3" for line in err_lines)
    edges = [tuple(map(int, line.split())) for line in captured.out.splitlines()]
    assert all(i < j for i, j in edges)


def test_main_usage_and_missing_file(tmp_path):
    assert main([]) == 1
    assert main([str(tmp_path / "missing.txt")]) == 2