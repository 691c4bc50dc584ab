"""Adjacency-list directed graph, generic over the node type.

`Graph` maps every node to its outgoing edges. Nodes are any hashable
values; they are inserted implicitly by :meth:`Graph.add_edge`, both as the
source and as the destination, so sink nodes are always present.
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from graph_algos.graph.edge import Edge, NodeID
from graph_algos.graph.edge_weight import EdgeWeight, WeightLike

#: ``(source, destination)`` or ``(source, destination, weight)``; the weight
#: may be ``None`` for an unweighted edge.
EdgeTriple = Union[
    Tuple[NodeID, NodeID], Tuple[NodeID, NodeID, Optional[WeightLike]]
]


class Graph:
    """A directed graph backed by a hash map from node to successor edges.

    This class enforces:
      - Every edge destination is also a node (possibly with no out-edges).
      - At most one edge per ``(source, destination)`` pair; adding a second
        edge replaces the first while keeping its position.
      - Removing an edge never removes nodes.

    Successors are kept in insertion order. The graph must not be mutated
    while a traversal over it is in progress.
    """

    def __init__(self, edges: Optional[Iterable[EdgeTriple]] = None) -> None:
        """Initialize a Graph, optionally from ``(u, v[, weight])`` triples.

        Args:
            edges: Optional iterable of triples folded through :meth:`add_edge`.

        Attributes:
            _adj: Map node to ``{destination: Edge}`` in insertion order.
        """
        self._adj: Dict[NodeID, Dict[NodeID, Edge]] = {}
        if edges is not None:
            for triple in edges:
                self._add_triple(triple)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeTriple]) -> Graph:
        """Build a graph from ``(u, v)`` or ``(u, v, weight)`` triples.

        Args:
            edges: Triples in insertion order.

        Returns:
            A new graph containing every edge.
        """
        return cls(edges)

    def _add_triple(self, triple: Sequence[Any]) -> None:
        if len(triple) == 2:
            u, v = triple
            weight = None
        elif len(triple) == 3:
            u, v, weight = triple
        else:
            raise ValueError(
                f"Expected (u, v) or (u, v, weight), got {len(triple)} items."
            )
        self.add_edge(u, v, weight)

    #
    # Edge management
    #
    def add_edge(
        self,
        u: NodeID,
        edge: Union[Edge, NodeID],
        weight: Optional[WeightLike] = None,
    ) -> None:
        """Add a directed edge from ``u``.

        Both ``u`` and the destination become nodes if they are not already.
        An existing edge from ``u`` to the same destination is replaced.

        Args:
            u: The source node.
            edge: An :class:`Edge`, or a bare destination node.
            weight: Weight for a bare destination; must be ``None`` when
                ``edge`` is an :class:`Edge`.

        Raises:
            ValueError: If both an :class:`Edge` and a weight are given.
        """
        if isinstance(edge, Edge):
            if weight is not None:
                raise ValueError("Pass the weight inside the Edge, not separately.")
        else:
            edge = Edge(edge, None if weight is None else EdgeWeight.coerce(weight))

        succs = self._adj.setdefault(u, {})
        self._adj.setdefault(edge.destination, {})
        succs[edge.destination] = edge

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge from ``u`` to ``v`` if it exists.

        Missing nodes or edges are ignored; no node is ever removed.
        """
        succs = self._adj.get(u)
        if succs is not None:
            succs.pop(v, None)

    def is_edge(self, u: NodeID, v: NodeID) -> bool:
        """Return True if there is an edge from ``u`` to ``v``."""
        succs = self._adj.get(u)
        return succs is not None and v in succs

    def get_edge(self, u: NodeID, v: NodeID) -> Optional[Edge]:
        """Return the edge from ``u`` to ``v``, or ``None`` if there is none."""
        succs = self._adj.get(u)
        if succs is None:
            return None
        return succs.get(v)

    def successors(self, u: NodeID) -> Optional[Tuple[Edge, ...]]:
        """Return the outgoing edges of ``u`` in insertion order.

        Returns:
            A tuple of edges (empty for a sink), or ``None`` if ``u`` has
            never been inserted.
        """
        succs = self._adj.get(u)
        if succs is None:
            return None
        return tuple(succs.values())

    #
    # Queries
    #
    def has_node(self, u: NodeID) -> bool:
        return u in self

    def __contains__(self, u: object) -> bool:
        try:
            return u in self._adj
        except TypeError:
            return False

    def __len__(self) -> int:
        """Return the number of nodes."""
        return len(self._adj)

    def is_empty(self) -> bool:
        return not self._adj

    def num_edges(self) -> int:
        """Return the number of edges."""
        return sum(len(succs) for succs in self._adj.values())

    def nodes(self, sort: bool = False) -> Iterator[NodeID]:
        """Iterate over all nodes.

        Args:
            sort: If True, yield nodes in their natural order (the node type
                must then be orderable). Otherwise the order is the backing
                map's order.

        Yields:
            Each node exactly once.
        """
        if sort:
            yield from sorted(self._adj)
        else:
            yield from self._adj

    def __iter__(self) -> Iterator[NodeID]:
        return self.nodes()

    def edges(self, sort: bool = False) -> Iterator[Tuple[NodeID, Edge]]:
        """Iterate over all edges as ``(source, edge)`` pairs.

        Args:
            sort: If True, order by source and then by destination.

        Yields:
            One pair per stored edge.
        """
        for u in self.nodes(sort=sort):
            succs: Iterable[Edge] = self._adj[u].values()
            if sort:
                succs = sorted(succs, key=lambda e: e.destination)
            for edge in succs:
                yield u, edge

    #
    # Convenience methods
    #
    def copy(self) -> Graph:
        """Return an independent copy sharing the (immutable) edges."""
        new = Graph()
        new._adj = {u: dict(succs) for u, succs in self._adj.items()}
        return new

    def __eq__(self, other: Any) -> bool:
        """Graphs are equal with the same nodes and the same weighted edges."""
        if not isinstance(other, Graph):
            return NotImplemented
        if self._adj.keys() != other._adj.keys():
            return False
        for u, succs in self._adj.items():
            mine = {(e.destination, e.weight) for e in succs.values()}
            theirs = {(e.destination, e.weight) for e in other._adj[u].values()}
            if mine != theirs:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Render the graph in a ``{ u => [v => w, ...], }`` block."""
        if not self._adj:
            return "{}"
        lines = ["{"]
        for u, succs in self._adj.items():
            items = []
            for edge in succs.values():
                if edge.weight is None:
                    items.append(f"{edge.destination}")
                else:
                    items.append(f"{edge.destination} => {edge.weight}")
            lines.append(f"    {u} => [{', '.join(items)}],")
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.num_edges()})"
