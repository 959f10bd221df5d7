import pytest

from statesearch import run_astar, run_bfs, run_dijkstra
from statesearch.util import Graph, GraphReader, GraphState, Node, format_bytes


def test_read_problem(problem_file):
    graph = GraphReader(problem_file).read_problem()
    assert graph.origin == 2
    assert graph.destinations == {4, 5}
    assert len(graph.nodes) == 6
    assert graph.get_coordinates(3) == (4.0, 4.0)
    assert (1, 4.0) in graph.adjacency[2]


def test_malformed_lines_are_skipped(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("Nodes:\n1: (0,0)\nnot a node\nEdges:\n(1,2) 3\nOrigin:\n1\nDestinations:\n2\n")
    graph = GraphReader(path).read_problem()
    out = capsys.readouterr().out
    assert "Error parsing node line 'not a node'" in out
    assert "Error parsing edge line" in out
    assert list(graph.nodes) == [1]
    assert graph.origin == 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GraphReader(tmp_path / "nope.txt").read_problem()


def test_graph_state_contract():
    graph = Graph()
    for nid, x, y in [(1, 0, 0), (2, 3, 4), (3, 6, 8)]:
        graph.add_node(Node(nid, x, y))
    graph.add_edge(1, 3, 2)
    graph.add_edge(1, 2, 5)
    graph.destinations = {3}

    state = GraphState(graph, 1)
    children = state.expand()
    assert [c.node_id for c in children] == [2, 3]
    assert [c.path_cost() for c in children] == [5.0, 2.0]
    assert state.heuristic_cost() == 10.0
    assert state.identity() == "1"
    assert not state.is_goal()
    assert children[1].is_goal()


def test_heuristic_without_coordinates_is_zero():
    graph = Graph()
    graph.destinations = {9}
    assert GraphState(graph, 1).heuristic_cost() == 0.0


def test_bfs_on_problem_file(problem_file):
    graph = GraphReader(problem_file).read_problem()
    result = run_bfs(graph.start_state(), keep_history=True)
    assert result.goal.identity() == "4"
    assert result.steps == 5
    assert [s.identity() for s in result.path()] == ["2", "1", "4"]
    assert result.goal.path_cost() == 10.0


@pytest.mark.parametrize("run_fn", [run_dijkstra, run_astar])
def test_cost_searches_on_problem_file(problem_file, run_fn):
    graph = GraphReader(problem_file).read_problem()
    result = run_fn(graph.start_state(), keep_history=True)
    assert result.goal.identity() in {"4", "5"}
    assert result.goal.path_cost() == 10.0


def test_format_bytes():
    assert format_bytes(512) == "512 B"
    assert format_bytes(2048) == "2.00 KB"
    assert format_bytes(3 * 1024 * 1024) == "3.00 MB"
    assert format_bytes(5 * 1024 ** 3) == "5.00 GB"
