import pytest

from cnettools.graph import (
    Graph,
    GraphInfo,
    build_graph,
    deg_seq_main,
    deg_seq_w_main,
    degree_sequence,
    degree_strength_sequence,
    graph_info,
    graph_info_main,
    parse_edges,
    read_graph,
)


@pytest.fixture
def triangle():
    return build_graph([(0, 1), (1, 2), (2, 0)])


def test_parse_edges_skips_comments_and_blank_lines():
    lines = ["# header\n", "\n", "0 1\n", "1 2 3.5\n"]
    assert list(parse_edges(lines)) == [(0, 1, 1.0), (1, 2, 1.0)]


def test_parse_edges_weighted_reads_third_column():
    lines = ["0 1 2.5\n", "1 2\n"]
    assert list(parse_edges(lines, weighted=True)) == [(0, 1, 2.5), (1, 2, 1.0)]


def test_parse_edges_rejects_bad_lines():
    with pytest.raises(ValueError):
        list(parse_edges(["0\n"]))
    with pytest.raises(ValueError):
        list(parse_edges(["a b\n"]))
    with pytest.raises(ValueError):
        list(parse_edges(["-1 2\n"]))


def test_build_graph_undirected_stores_both_directions(triangle):
    assert triangle.num_nodes == 3
    assert triangle.num_arcs == 6
    for i, j in [(0, 1), (1, 2), (2, 0)]:
        assert triangle.has_edge(i, j)
        assert triangle.has_edge(j, i)


def test_build_graph_directed():
    g = build_graph([(0, 1), (1, 2)], directed=True)
    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 0)
    assert g.degrees() == [1, 1, 0]


def test_build_graph_empty():
    g = build_graph([])
    assert g.num_nodes == 0
    assert g.degrees() == []


def test_isolated_labels_count_as_nodes():
    g = build_graph([(0, 4)])
    assert g.num_nodes == 5
    assert degree_sequence(g) == [1, 0, 0, 0, 1]


def test_degree_and_strength():
    g = build_graph([(0, 1, 2.5), (0, 2, 0.5)])
    assert g.degree(0) == 2
    assert g.strength(0) == 3.0
    assert g.strength(1) == 2.5
    assert degree_strength_sequence(g) == [(2, 3.0), (1, 2.5), (1, 0.5)]


def test_degree_sum_is_number_of_arcs():
    g = build_graph([(0, 1), (0, 2), (0, 3), (2, 3)])
    assert sum(degree_sequence(g)) == g.num_arcs


def test_graph_info_triangle(triangle):
    info = graph_info(triangle)
    assert info == GraphInfo(3, 3, 2.0, 4.0)
    assert str(info) == "3 3 2.000000 4.000000"


def test_graph_info_empty_graph_raises():
    with pytest.raises(ValueError):
        graph_info(Graph(0, [], [], False))


def test_read_graph_from_file(tmp_path):
    path = tmp_path / "g.txt"
    path.write_text("0 1 2.0\n1 2 4.0\n")
    g = read_graph(str(path), weighted=True)
    assert g.weights[1] == [2.0, 4.0]
    assert g.neighbours[1] == [0, 2]


def test_deg_seq_main(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n0 2\n")
    assert deg_seq_main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["2", "1", "1"]


def test_deg_seq_w_main(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1 2.5\n0 2 1\n")
    assert deg_seq_w_main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["2 3.5", "1 2.5", "1 1"]


def test_graph_info_main(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("0 1\n1 2\n2 0\n")
    assert graph_info_main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "3 3 2.000000 4.000000"


def test_main_without_arguments_prints_usage(capsys):
    assert deg_seq_main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert graph_info_main([str(tmp_path / "missing.txt")]) == 2