from __future__ import annotations

from collections import deque
from typing import Deque

from graph_algos.algorithms.common import check_source
from graph_algos.algorithms.types import PredMap
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import NodeID
from graph_algos.logging import get_logger

logger = get_logger(__name__)


def shortest_paths(graph: Graph, src_node: NodeID) -> PredMap:
    """
    Fewest-hop shortest paths from a source node (breadth-first search).

    Edge weights are ignored, even when present. A node's predecessor is
    fixed the first time the node is discovered, so following the map back
    from any reached node gives a path with the fewest edges.

    Args:
        graph: The directed graph.
        src_node: The node to search from.

    Returns:
        A predecessor map covering every node reachable from ``src_node``.
        All recorded weights are ``None``.

    Raises:
        NodeNotFoundError: If ``src_node`` is not in the graph.
    """
    check_source(graph, src_node)

    pred: PredMap = {src_node: (src_node, None)}
    queue: Deque[NodeID] = deque([src_node])

    while queue:
        node_id = queue.popleft()
        for edge in graph.successors(node_id) or ():
            neighbor_id = edge.destination
            if neighbor_id not in pred:
                # first discovery wins
                pred[neighbor_id] = (node_id, None)
                queue.append(neighbor_id)

    logger.debug(f"BFS from {src_node!r} reached {len(pred)} of {len(graph)} nodes")
    return pred


bfs = shortest_paths
