from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Tuple

from graph_algos.algorithms.common import check_source
from graph_algos.exceptions import CycleDetectedError
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import Edge, NodeID
from graph_algos.logging import get_logger

logger = get_logger(__name__)


class VisitState(Enum):
    """Depth-first search marks. Unvisited nodes carry no mark."""

    IN_PROGRESS = 1
    FINISHED = 2


def topological_sort(graph: Graph, start: NodeID) -> List[NodeID]:
    """
    Topologically order the nodes reachable from ``start``.

    Runs a depth-first search and returns the reverse of the order in which
    nodes finish, so every edge ``u -> v`` between reachable nodes has ``u``
    before ``v``. Successors are visited in edge-list order; the explicit
    stack gives the same result as the recursive formulation without being
    bounded by the interpreter's recursion limit.

    Args:
        graph: The directed graph. It is never modified.
        start: The node to start the search from.

    Returns:
        The reachable nodes in topological order, ``start`` first.

    Raises:
        NodeNotFoundError: If ``start`` is not in the graph.
        CycleDetectedError: If a cycle is reachable from ``start``.
    """
    check_source(graph, start)

    state: Dict[NodeID, VisitState] = {start: VisitState.IN_PROGRESS}
    finished: List[NodeID] = []
    stack: List[Tuple[NodeID, Iterator[Edge]]] = [
        (start, iter(graph.successors(start) or ()))
    ]

    while stack:
        node_id, successors = stack[-1]
        for edge in successors:
            neighbor_id = edge.destination
            mark = state.get(neighbor_id)
            if mark is VisitState.IN_PROGRESS:
                raise CycleDetectedError(neighbor_id)
            if mark is None:
                state[neighbor_id] = VisitState.IN_PROGRESS
                stack.append(
                    (neighbor_id, iter(graph.successors(neighbor_id) or ()))
                )
                break
        else:
            stack.pop()
            state[node_id] = VisitState.FINISHED
            finished.append(node_id)

    finished.reverse()
    logger.debug(f"Topological sort from {start!r} ordered {len(finished)} nodes")
    return finished
