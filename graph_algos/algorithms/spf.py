from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Tuple

from graph_algos.algorithms.common import (
    check_source,
    init_single_source,
    relaxation_weight,
)
from graph_algos.algorithms.types import DistMap, PredMap
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import NodeID
from graph_algos.graph.edge_weight import EdgeWeight
from graph_algos.logging import get_logger

logger = get_logger(__name__)


def dijkstra(graph: Graph, src_node: NodeID) -> Tuple[DistMap, PredMap]:
    """
    Compute shortest weighted paths from a source node with Dijkstra's algorithm.

    Uses a binary heap with lazy deletion: an improved distance pushes a new
    heap entry instead of decreasing the old one, and entries whose weight no
    longer matches the distance map are discarded when popped.

    Weights are assumed non-negative; with negative weights the result is
    unspecified.

    Args:
        graph: The directed graph. Every edge reachable from ``src_node``
            must carry a finite weight.
        src_node: The source node.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps every node to its distance from ``src_node``
            (positive infinity for unreachable nodes).
          - pred: Maps each reached node to ``(predecessor, edge weight)``;
            the source maps to itself.

    Raises:
        NodeNotFoundError: If ``src_node`` is not in the graph.
        MissingWeightError: If a relaxed edge has no weight.
        InfiniteWeightError: If a relaxed edge has an infinite weight.
    """
    check_source(graph, src_node)
    costs, pred = init_single_source(graph, src_node)

    # The counter breaks ties so node ids never get compared.
    tie_breaker = count()
    min_pq: List[Tuple[EdgeWeight, int, NodeID]] = [
        (costs[src_node], next(tie_breaker), src_node)
    ]
    stale = 0

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if current_cost != costs[node_id]:
            stale += 1
            continue

        for edge in graph.successors(node_id) or ():
            edge_weight = relaxation_weight(node_id, edge)
            neighbor_id = edge.destination
            new_cost = current_cost + edge_weight
            if new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = (node_id, edge_weight)
                heappush(min_pq, (new_cost, next(tie_breaker), neighbor_id))

    logger.debug(
        f"Dijkstra from {src_node!r} reached {len(pred)} of {len(graph)} nodes "
        f"({stale} stale heap entries discarded)"
    )
    return costs, pred
