"""Graph conversion utilities between Graph and NetworkX DiGraph.

Finite weights become integer edge attributes, infinities become
``float('inf')`` / ``float('-inf')``, and unweighted edges carry no weight
attribute at all, so :func:`from_digraph` can restore them exactly.
"""

from __future__ import annotations

import networkx as nx

from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import Edge
from graph_algos.graph.edge_weight import EdgeWeight
from graph_algos.logging import get_logger

logger = get_logger(__name__)


def to_digraph(graph: Graph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a Graph to a NetworkX DiGraph.

    Args:
        graph: The graph to convert.
        weight_attr: Name of the edge attribute that receives the weight.

    Returns:
        A DiGraph with the same nodes and edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.nodes())
    for u, edge in graph.edges():
        if edge.weight is None:
            nx_graph.add_edge(u, edge.destination)
        else:
            nx_graph.add_edge(
                u, edge.destination, **{weight_attr: edge.weight.to_number()}
            )
    return nx_graph


def from_digraph(nx_graph: nx.DiGraph, weight_attr: str = "weight") -> Graph:
    """Convert a directed NetworkX graph to a Graph.

    Edges without ``weight_attr`` become unweighted edges. For a MultiDiGraph
    the last parallel edge between two nodes wins. Nodes without any edge
    cannot be represented and are dropped with a warning.

    Args:
        nx_graph: A directed NetworkX graph.
        weight_attr: Name of the edge attribute holding the weight.

    Returns:
        The converted graph.

    Raises:
        ValueError: If ``nx_graph`` is undirected.
        TypeError: If a weight is neither an int nor an integral or
            infinite float.
    """
    if not nx_graph.is_directed():
        raise ValueError("from_digraph expects a directed NetworkX graph.")

    graph = Graph()
    for u, v, data in nx_graph.edges(data=True):
        raw = data.get(weight_attr)
        weight = None if raw is None else EdgeWeight.coerce(raw)
        graph.add_edge(u, Edge(v, weight))

    isolated = [n for n in nx_graph.nodes if n not in graph]
    if isolated:
        logger.warning(
            f"Dropping {len(isolated)} isolated node(s) without edges: {isolated!r}"
        )
    return graph
