from __future__ import annotations

from typing import List, Optional, Tuple

from graph_algos.algorithms.common import (
    check_source,
    init_single_source,
    relaxation_weight,
)
from graph_algos.algorithms.types import DistMap, PredMap
from graph_algos.config import SEARCH_CONFIG, SearchConfig
from graph_algos.exceptions import NegativeCycleError
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import NodeID
from graph_algos.graph.edge_weight import EdgeWeight
from graph_algos.logging import get_logger

logger = get_logger(__name__)

_WeightedEdge = Tuple[NodeID, NodeID, EdgeWeight]


def _relax_all(
    edges: List[_WeightedEdge], costs: DistMap, pred: Optional[PredMap]
) -> bool:
    """Relax every edge once; return True if any distance improved.

    With ``pred=None`` the pass only checks for an improvement and stops at
    the first one without touching ``costs``.
    """
    updated = False
    for u, v, weight in edges:
        if costs[u].is_infinite:
            continue
        new_cost = costs[u] + weight
        if new_cost < costs[v]:
            if pred is None:
                return True
            costs[v] = new_cost
            pred[v] = (u, weight)
            updated = True
    return updated


def bellman_ford(
    graph: Graph, src_node: NodeID, config: Optional[SearchConfig] = None
) -> Tuple[DistMap, PredMap]:
    """
    Compute shortest weighted paths from a source node with Bellman-Ford.

    Unlike Dijkstra, negative edge weights are allowed. The algorithm runs up
    to ``|V| - 1`` rounds, each relaxing every edge of the graph, and stops
    early after a round in which no distance improves.

    Args:
        graph: The directed graph. Every edge must carry a finite weight,
            including edges not reachable from ``src_node``.
        src_node: The source node.
        config: Round budget and negative-cycle settings. Defaults to
            :data:`graph_algos.config.SEARCH_CONFIG`.

    Returns:
        A tuple of (costs, pred) with the same shape as
        :func:`graph_algos.algorithms.spf.dijkstra`.

    Raises:
        NodeNotFoundError: If ``src_node`` is not in the graph.
        MissingWeightError: If any edge has no weight.
        InfiniteWeightError: If any edge has an infinite weight.
        NegativeCycleError: If cycle detection is enabled and a negative
            cycle is reachable from ``src_node``.
    """
    cfg = config or SEARCH_CONFIG
    check_source(graph, src_node)

    # Validate all weights up front, so a bad edge fails regardless of reach.
    edges: List[_WeightedEdge] = [
        (u, edge.destination, relaxation_weight(u, edge)) for u, edge in graph.edges()
    ]
    costs, pred = init_single_source(graph, src_node)

    num_nodes = len(graph)
    rounds = cfg.rounds_for(num_nodes)
    converged = False
    rounds_run = 0
    for _ in range(rounds):
        rounds_run += 1
        if not _relax_all(edges, costs, pred):
            converged = True
            break

    logger.debug(
        f"Bellman-Ford from {src_node!r}: {rounds_run} of {rounds} rounds, "
        f"converged={converged}"
    )

    # A capped run is under-converged, not evidence of a negative cycle.
    full_budget = rounds == max(num_nodes - 1, 0)
    if cfg.detect_negative_cycles and not converged and full_budget:
        if _relax_all(edges, costs, None):
            raise NegativeCycleError(
                f"Negative cycle reachable from source node {src_node!r}."
            )

    return costs, pred
