"""Helpers shared by the traversal algorithms."""

from __future__ import annotations

from typing import Tuple

from graph_algos.algorithms.types import DistMap, PredMap
from graph_algos.exceptions import (
    InfiniteWeightError,
    MissingWeightError,
    NodeNotFoundError,
)
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import Edge, NodeID
from graph_algos.graph.edge_weight import EdgeWeight


def check_source(graph: Graph, src_node: NodeID) -> None:
    """Raise NodeNotFoundError unless ``src_node`` is a node of ``graph``."""
    if src_node not in graph:
        raise NodeNotFoundError(f"Source node {src_node!r} is not in the graph.")


def relaxation_weight(u: NodeID, edge: Edge) -> EdgeWeight:
    """Return the weight of ``u -> edge.destination`` for relaxation.

    Raises:
        MissingWeightError: If the edge is unweighted.
        InfiniteWeightError: If the edge weight is infinite.
    """
    weight = edge.weight
    if weight is None:
        raise MissingWeightError(
            f"Edge {u!r} -> {edge.destination!r} has no weight; "
            "weighted algorithms require a weight on every edge."
        )
    if not weight.is_finite:
        raise InfiniteWeightError(
            f"Edge {u!r} -> {edge.destination!r} has infinite weight {weight}."
        )
    return weight


def init_single_source(graph: Graph, src_node: NodeID) -> Tuple[DistMap, PredMap]:
    """Return the initial distance and predecessor maps for ``src_node``.

    Every node starts at positive infinity except the source at zero, and the
    predecessor map holds only the source self-loop.
    """
    inf = EdgeWeight.infinity()
    costs: DistMap = {node: inf for node in graph.nodes()}
    costs[src_node] = EdgeWeight.zero()
    pred: PredMap = {src_node: (src_node, None)}
    return costs, pred
