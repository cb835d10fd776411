import random
from itertools import combinations

import pytest

from cnettools.er import main, sample_er


def test_zero_probability_gives_no_edges():
    assert list(sample_er(10, 0.0, random.Random(1))) == []


@pytest.mark.parametrize("n", [0, 1, 2, 7])
def test_probability_one_gives_complete_graph(n):
    assert list(sample_er(n, 1.0, random.Random(1))) == list(combinations(range(n), 2))


def test_edges_are_ordered_and_unique():
    edges = list(sample_er(30, 0.3, random.Random(5)))
    assert all(i < j < 30 for i, j in edges)
    assert edges == sorted(set(edges))


def test_same_seed_same_graph():
    first = list(sample_er(25, 0.4, random.Random(42)))
    second = list(sample_er(25, 0.4, random.Random(42)))
    assert first == second


def test_edge_count_close_to_expectation():
    n, p = 200, 0.1
    edges = list(sample_er(n, p, random.Random(3)))
    expected = p * n * (n - 1) / 2
    assert abs(len(edges) - expected) < 0.15 * expected


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        sample_er(-1, 0.5)


def test_main_writes_file(tmp_path):
    out = tmp_path / "edges.txt"
    assert main(["3", "1", str(out)]) == 0
    assert out.read_text() == "0 1\n0 2\n1 2\n"


def test_main_stdout(capsys):
    assert main(["4", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_main_usage(capsys):
    assert main(["5"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_bad_probability():
    assert main(["5", "abc"]) == 1


def test_main_unwritable_output(tmp_path):
    target = tmp_path / "missing" / "edges.txt"
    assert main(["3", "1", str(target)]) == 2