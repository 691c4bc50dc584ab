import math

import networkx as nx
import pytest

from graph_algos.graph.convert import from_digraph, to_digraph
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge_weight import EdgeWeight


def build_sample_graph() -> Graph:
    graph = Graph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", EdgeWeight.infinity())
    graph.add_edge("C", "A")
    graph.add_edge("B", "D", -2)
    return graph


def test_to_digraph_basic():
    g = build_sample_graph()
    nxg = to_digraph(g)

    assert isinstance(nxg, nx.DiGraph)
    assert set(nxg.nodes) == {"A", "B", "C", "D"}
    assert nxg.number_of_edges() == 4
    assert nxg.edges["A", "B"]["weight"] == 1
    assert nxg.edges["B", "D"]["weight"] == -2
    assert nxg.edges["A", "C"]["weight"] == math.inf
    assert "weight" not in nxg.edges["C", "A"]


def test_to_digraph_custom_attr():
    nxg = to_digraph(build_sample_graph(), weight_attr="cost")
    assert nxg.edges["A", "B"]["cost"] == 1
    assert "weight" not in nxg.edges["A", "B"]


def test_from_digraph_roundtrip():
    g = build_sample_graph()
    assert from_digraph(to_digraph(g)) == g


def test_from_digraph_weights():
    nxg = nx.DiGraph()
    nxg.add_edge(1, 2, weight=3.0)
    nxg.add_edge(2, 3, weight=-math.inf)
    nxg.add_edge(3, 1)

    g = from_digraph(nxg)
    assert g.get_edge(1, 2).weight == 3
    assert g.get_edge(2, 3).weight == EdgeWeight.neg_infinity()
    assert g.get_edge(3, 1).weight is None


def test_from_digraph_rejects_bad_weight():
    nxg = nx.DiGraph()
    nxg.add_edge(1, 2, weight=0.5)
    with pytest.raises(TypeError):
        from_digraph(nxg)


def test_from_digraph_rejects_undirected():
    with pytest.raises(ValueError):
        from_digraph(nx.Graph([(1, 2)]))


def test_from_digraph_drops_isolated_nodes(caplog):
    nxg = nx.DiGraph()
    nxg.add_edge("A", "B")
    nxg.add_node("lonely")

    g = from_digraph(nxg)
    assert "lonely" not in g
    assert len(g) == 2
    assert "Dropping 1 isolated node(s)" in caplog.text


def test_from_digraph_multidigraph_last_edge_wins():
    nxg = nx.MultiDiGraph()
    nxg.add_edge("A", "B", weight=1)
    nxg.add_edge("A", "B", weight=7)

    g = from_digraph(nxg)
    assert g.num_edges() == 1
    assert g.get_edge("A", "B").weight == 7
