import pytest

from wgraph.topology import WeightedGraph


def test_edges_are_symmetric_and_counted_once():
    g = WeightedGraph.from_edges([("A", "B", 3), ("B", "C", 4)])
    assert g.vertices == ["A", "B", "C"]
    assert g.are_adjacent("A", "B") and g.are_adjacent("B", "A")
    assert g.get_edge_weight("C", "B") == 4
    assert g.num_edges() == 2
    assert g.edges() == [("A", "B", 3), ("B", "C", 4)]
    assert g.total_weight() == 7
    assert g.degree("B") == 2
    assert g.weighted_degree("B") == 7


def test_remove_vertex_drops_incident_edges():
    g = WeightedGraph.from_edges([("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])
    g.remove_vertex("B")
    assert "B" not in g
    assert g.neighbours("A") == [("C", 1)]
    assert g.num_edges() == 1


def test_preconditions_raise():
    g = WeightedGraph.from_edges([("A", "B", 1)])
    with pytest.raises(KeyError):
        g.add_edge("A", "Z", 1)
    with pytest.raises(ValueError):
        g.add_edge("A", "A", 1)
    with pytest.raises(KeyError):
        g.get_edge_weight("A", "C")
    with pytest.raises(KeyError):
        g.remove_vertex("Z")
    with pytest.raises(KeyError):
        g.set_edge_weight("A", "Q", 2)


def test_copy_is_independent():
    g = WeightedGraph.from_edges([("A", "B", 1)])
    h = g.copy()
    h.set_edge_weight("A", "B", 9)
    h.add_vertex("C")
    assert g.get_edge_weight("A", "B") == 1
    assert "C" not in g
    assert g != h


def test_isolated_vertices_from_edges():
    g = WeightedGraph.from_edges([("A", "B", 2)], vertices=["Z"])
    assert g.vertices == ["Z", "A", "B"]
    assert g.degree("Z") == 0


def test_fractional_weight_rejected():
    g = WeightedGraph.from_edges([], vertices=["A", "B"])
    with pytest.raises(ValueError):
        g.add_edge("A", "B", 2.9)
    assert not g.are_adjacent("A", "B")

    g.add_edge("A", "B", 3.0)
    assert g.get_edge_weight("A", "B") == 3
    assert isinstance(g.get_edge_weight("A", "B"), int)
