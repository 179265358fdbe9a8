import math

from hexlattice import Hex
from hexlattice.search import graph_path, movement_graph, path_travel_cost
from hexlattice.shapes import hex_range


def test_movement_graph_links_adjacent_coords():
    graph = movement_graph(hex_range(Hex(0, 0), 2))
    assert graph.number_of_nodes() == 19
    assert graph.has_edge(Hex(0, 0), Hex(1, 0))
    assert graph.has_edge(Hex(1, 0), Hex(0, 0))
    assert not graph.has_edge(Hex(0, 0), Hex(2, 0))
    assert graph.nodes[Hex(1, 1)]["coord"] == Hex(1, 1)


def test_graph_path_uses_astar_shortest_path():
    graph = movement_graph(hex_range(Hex(0, 0), 2))
    path = graph_path(graph, Hex(0, 0), Hex(2, 0), min_step_cost=1.0)
    assert path == [Hex(0, 0), Hex(1, 0), Hex(2, 0)]
    assert math.isclose(path_travel_cost(graph, path), 2.0)


def test_graph_path_avoids_expensive_cells():
    graph = movement_graph(hex_range(Hex(0, 0), 2), {Hex(1, 0): 5.0})
    path = graph_path(graph, Hex(0, 0), Hex(2, 0))
    assert path is not None
    assert Hex(1, 0) not in path
    assert math.isclose(path_travel_cost(graph, path), 3.0)


def test_graph_cost_function_and_impassable_cells():
    def cost(h: Hex) -> float | None:
        return None if h == Hex(1, 0) else 2.0

    graph = movement_graph(hex_range(Hex(0, 0), 1), cost)
    assert Hex(1, 0) in graph
    assert graph.in_degree(Hex(1, 0)) == 0
    assert graph_path(graph, Hex(0, 0), Hex(1, 0)) is None
    assert graph.edges[Hex(0, 0), Hex(0, 1)]["weight"] == 2.0


def test_graph_path_edge_cases():
    graph = movement_graph([Hex(0, 0), Hex(5, 5)])
    assert graph_path(graph, Hex(0, 0), Hex(0, 0)) == [Hex(0, 0)]
    assert graph_path(graph, Hex(0, 0), Hex(5, 5)) is None
    assert graph_path(graph, Hex(0, 0), Hex(9, 9)) is None
    assert path_travel_cost(graph, [Hex(0, 0)]) == 0.0
