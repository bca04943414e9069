import pytest

from wgraph.analysis import GraphAnalyzer
from wgraph.reports import JSONReporter
from wgraph.topology import WeightedGraph


def test_analyzer_report(tmp_path):
    g = WeightedGraph.from_edges([("A", "B", 1), ("B", "C", 1)], vertices=["A", "B", "C", "Z"])
    report = GraphAnalyzer(source="A").analyze(g)

    assert report.vertices == 4
    assert report.edges == 2
    assert report.total_weight == 2
    assert not report.connected
    assert report.components == [["A", "B", "C"], ["Z"]]
    assert report.distances == {"A": 0, "B": 1, "C": 2, "Z": None}

    payload = JSONReporter().generate(report, str(tmp_path / "r.json"))
    assert payload["source"] == "A"
    assert payload["component_count"] == 2


def test_analyzer_rejects_unknown_source():
    with pytest.raises(KeyError):
        GraphAnalyzer(source="nope").analyze(WeightedGraph.from_edges([("A", "B", 1)]))


def test_analyzer_empty_graph():
    report = GraphAnalyzer().analyze(WeightedGraph())
    assert report.connected
    assert report.components == []
    assert report.articulation_points == []
    assert report.distances == {}


def test_analyzer_empty_graph_with_source():
    report = GraphAnalyzer(source="A").analyze(WeightedGraph())
    assert report.connected
    assert report.source == "A"
    assert report.distances == {}
