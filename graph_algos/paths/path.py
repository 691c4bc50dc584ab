from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from graph_algos.algorithms.types import PredMap
from graph_algos.exceptions import CorruptPredMapError, MissingWeightError, NoPathError
from graph_algos.graph.edge import NodeID
from graph_algos.graph.edge_weight import EdgeWeight

#: One step of a path: the node reached and the weight of the edge taken.
Hop = Tuple[NodeID, Optional[EdgeWeight]]


@dataclass(frozen=True)
class Path:
    """
    A path from a traversal source to one reached node.

    Attributes:
        head: The first node of the path (the traversal source).
        hops: Ordered ``(node, weight)`` steps after ``head``. The weight is
            that of the edge entering ``node`` and is ``None`` for paths
            built from an unweighted traversal.
    """

    head: NodeID
    hops: Tuple[Hop, ...] = ()

    @classmethod
    def from_pred_map(cls, pred_map: PredMap, end: NodeID) -> Path:
        """Alias of :func:`path_to` for callers holding the class."""
        return path_to(pred_map, end)

    @property
    def src_node(self) -> NodeID:
        return self.head

    @property
    def dst_node(self) -> NodeID:
        """Return the last node of the path (``head`` for an empty path)."""
        return self.hops[-1][0] if self.hops else self.head

    @property
    def nodes_seq(self) -> Tuple[NodeID, ...]:
        """Return every node along the path, ``head`` first."""
        return (self.head,) + tuple(node for node, _ in self.hops)

    @property
    def weights(self) -> Tuple[Optional[EdgeWeight], ...]:
        return tuple(weight for _, weight in self.hops)

    def __len__(self) -> int:
        """Return the number of hops (edges) in the path."""
        return len(self.hops)

    def __iter__(self) -> Iterator[Hop]:
        return iter(self.hops)

    def total_weight(self) -> EdgeWeight:
        """
        Sum the weights of all hops.

        Returns:
            The path cost; zero for a path with no hops.

        Raises:
            MissingWeightError: If any hop is unweighted.
        """
        total = EdgeWeight.zero()
        for node, weight in self.hops:
            if weight is None:
                raise MissingWeightError(
                    f"Hop into {node!r} has no weight; path cost is undefined."
                )
            total = total + weight
        return total

    def __str__(self) -> str:
        """Render the path as ``'a' --(2)-> 'c' --> 'd'``."""
        parts = [repr(self.head)]
        for node, weight in self.hops:
            arrow = "-->" if weight is None else f"--({weight})->"
            parts.append(f"{arrow} {node!r}")
        return " ".join(parts)


def path_to(pred_map: PredMap, end: NodeID) -> Path:
    """
    Reconstruct the path to ``end`` from a predecessor map.

    Follows predecessors back from ``end`` until the source self-loop is
    reached, then reverses the collected hops.

    Args:
        pred_map: A predecessor map produced by any traversal.
        end: The destination node.

    Returns:
        The path from the traversal source to ``end``.

    Raises:
        NoPathError: If ``end`` was not reached by the traversal.
        CorruptPredMapError: If the predecessors never lead back to a source,
            either because an entry is missing or because they form a cycle.
    """
    if end not in pred_map:
        raise NoPathError(f"No path to node {end!r}; it was not reached.")

    hops: List[Hop] = []
    node = end
    # A well-formed map reaches its source in fewer than len(pred_map) steps.
    for _ in range(len(pred_map)):
        try:
            prev, weight = pred_map[node]
        except KeyError:
            raise CorruptPredMapError(
                f"Predecessor {node!r} has no entry in the predecessor map."
            ) from None
        if prev == node:
            hops.reverse()
            return Path(head=node, hops=tuple(hops))
        hops.append((node, weight))
        node = prev

    raise CorruptPredMapError(
        f"Predecessor map does not lead from {end!r} back to a source."
    )
