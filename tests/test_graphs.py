import math

import pytest

from algostudy.graphs import Graph, even_tree_removable_edges, snakes_and_ladders_moves


def _sample_graph():
    graph = Graph(5)
    for a, b in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
        graph.add_edge(a, b, False, 0)
    return graph


def _weighted_graph():
    graph = Graph(5)
    graph.add_edge(0, 1, True, 3.0)
    graph.add_edge(0, 2, True, 8.0)
    graph.add_edge(1, 3, True, 1.0)
    graph.add_edge(1, 4, True, 1.0)
    graph.add_edge(2, 4, True, 1.0)
    graph.add_edge(3, 4, True, 2.0)
    return graph


def test_neighbours_newest_first():
    graph = Graph(4)
    graph.add_edge(0, 1, True, 1.0)
    graph.add_edge(0, 2, True, 2.0)
    graph.add_edge(0, 3, True, 5.0)
    assert graph.neighbours(0) == [(3, 5.0), (2, 2.0), (1, 1.0)]
    assert graph.neighbours(1) == []


def test_undirected_edge_goes_both_ways():
    graph = Graph(3)
    graph.add_edge(0, 2, False, 7.0)
    assert graph.neighbours(0) == [(2, 7.0)]
    assert graph.neighbours(2) == [(0, 7.0)]


def test_bfs_visits_every_vertex_once_from_origin():
    order = _sample_graph().bfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3, 4]


def test_dfs_visits_every_vertex_once_from_origin():
    order = _sample_graph().dfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3, 4]


def test_traversals_on_directed_chain():
    graph = Graph(4)
    graph.add_edge(0, 1, True, 1.0)
    graph.add_edge(1, 2, True, 1.0)
    graph.add_edge(2, 3, True, 1.0)
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.dfs(0) == [0, 1, 2, 3]
    assert graph.bfs(2) == [2, 3]


def test_dfs_goes_deep_before_wide():
    graph = Graph(4)
    graph.add_edge(0, 1, True, 0)
    graph.add_edge(0, 2, True, 0)
    graph.add_edge(2, 3, True, 0)
    assert graph.dfs(0) == [0, 2, 3, 1]
    assert graph.bfs(0) == [0, 2, 1, 3]


def test_sample_graph_is_not_bipartite():
    assert _sample_graph().is_bipartite(0) is False


def test_even_cycle_is_bipartite():
    graph = Graph(4)
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 0)]:
        graph.add_edge(a, b)
    assert graph.is_bipartite(0) is True


def test_shortest_path_worked_example():
    assert _weighted_graph().shortest_path(0, 4) == 4.0


def test_shortest_path_to_self_is_zero():
    assert _weighted_graph().shortest_path(2, 2) == 0.0


def test_shortest_path_unreachable_is_infinite():
    distance = _weighted_graph().shortest_path(4, 0)
    assert distance == math.inf


def test_invalid_vertex_rejected():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.bfs(5)
    with pytest.raises(IndexError):
        graph.shortest_path(0, -1)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_even_tree_sample():
    edges = [(2, 1), (3, 1), (4, 3), (5, 2), (6, 1), (7, 2), (8, 6), (9, 8), (10, 8)]
    assert even_tree_removable_edges(10, edges) == 2


def test_even_tree_single_edge_has_nothing_to_cut():
    assert even_tree_removable_edges(2, [(1, 2)]) == 0


def test_even_tree_rejects_bad_vertex():
    with pytest.raises(IndexError):
        even_tree_removable_edges(3, [(1, 4)])


def test_snakes_and_ladders_sample():
    ladders = [(32, 62), (42, 68), (12, 98)]
    snakes = [(95, 13), (97, 25), (93, 37), (79, 27), (75, 19), (49, 47), (67, 17)]
    assert snakes_and_ladders_moves(ladders, snakes) == 3


def test_ladder_never_makes_game_longer():
    plain = snakes_and_ladders_moves([], [])
    assert snakes_and_ladders_moves([(2, 99)], []) <= plain


def test_blocked_board_is_unreachable():
    snakes = [(square, 2) for square in range(94, 100)]
    assert snakes_and_ladders_moves([], snakes) == -1


def test_snakes_and_ladders_validation():
    with pytest.raises(ValueError):
        snakes_and_ladders_moves([(50, 20)], [])
    with pytest.raises(ValueError):
        snakes_and_ladders_moves([], [(20, 50)])
    with pytest.raises(ValueError):
        snakes_and_ladders_moves([(10, 40)], [(10, 5)])
    with pytest.raises(ValueError):
        snakes_and_ladders_moves([(10, 140)], [])