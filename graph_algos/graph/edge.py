"""Directed edge primitive: a destination node and an optional weight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from graph_algos.exceptions import EdgeNodeParseError, WeightParseError
from graph_algos.graph.edge_weight import EdgeWeight, WeightLike

NodeID = Hashable


@dataclass(frozen=True, eq=False)
class Edge:
    """An outgoing edge, stored in the successor list of its source node.

    Two edges are equal when they point at the same destination, whatever
    their weights. A graph therefore holds at most one edge from a given
    source to a given destination.

    Attributes:
        destination: The node this edge leads to.
        weight: The cost of traversing the edge, or ``None`` for an
            unweighted edge.
    """

    destination: NodeID
    weight: Optional[EdgeWeight] = None

    def __post_init__(self) -> None:
        if self.weight is not None and not isinstance(self.weight, EdgeWeight):
            object.__setattr__(self, "weight", EdgeWeight.coerce(self.weight))

    @classmethod
    def with_weight(cls, destination: NodeID, weight: WeightLike) -> Edge:
        """Return an edge to ``destination`` carrying ``weight``."""
        return cls(destination, EdgeWeight.coerce(weight))

    @classmethod
    def parse(
        cls,
        token: str,
        parse_node: Callable[[str], NodeID] = str,
        weight_separator: str = ",",
        line_no: Optional[int] = None,
    ) -> Edge:
        """Parse an edge token of the form ``dest`` or ``dest,weight``.

        Args:
            token: The text of a single edge.
            parse_node: Converts the destination text into a node.
            weight_separator: Separator between destination and weight.
            line_no: Line number reported in errors, if known.

        Returns:
            The parsed edge.

        Raises:
            EdgeNodeParseError: If ``parse_node`` rejects the destination.
            WeightParseError: If the weight is not an integer or infinity.
        """
        dst_text, sep, weight_text = token.partition(weight_separator)
        if not dst_text:
            raise EdgeNodeParseError(
                "missing destination node", fragment=token, line_no=line_no
            )
        try:
            destination = parse_node(dst_text)
        except (TypeError, ValueError) as exc:
            raise EdgeNodeParseError(
                f"failed to parse destination node {dst_text!r}: {exc}",
                fragment=token,
                line_no=line_no,
            ) from exc

        if not sep:
            return cls(destination)

        try:
            weight = EdgeWeight.parse(weight_text)
        except ValueError as exc:
            raise WeightParseError(
                f"failed to parse edge weight {weight_text!r}",
                fragment=token,
                line_no=line_no,
            ) from exc
        return cls(destination, weight)

    @property
    def is_weighted(self) -> bool:
        return self.weight is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.destination == other.destination

    def __hash__(self) -> int:
        return hash(self.destination)

    def __repr__(self) -> str:
        if self.weight is None:
            return f"Edge({self.destination!r})"
        return f"Edge({self.destination!r}, {self.weight})"
