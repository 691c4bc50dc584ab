"""Exception types raised across :mod:`graph_algos`."""

from __future__ import annotations

from typing import Any, Optional


class GraphAlgosError(Exception):
    """Base class for all package-specific errors."""


class GraphParseError(GraphAlgosError, ValueError):
    """Raised when graph text cannot be parsed.

    Attributes:
        fragment: The piece of input that failed to parse.
        line_no: 1-based line number of the fragment, when known.
    """

    def __init__(
        self, message: str, fragment: str = "", line_no: Optional[int] = None
    ) -> None:
        self.fragment = fragment
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class GraphFormatError(GraphParseError):
    """Raised for a malformed line, e.g. one without a ``:`` separator."""


class NodeParseError(GraphParseError):
    """Raised when the source node of a line fails to parse."""


class EdgeParseError(GraphParseError):
    """Raised when an outbound edge token fails to parse."""


class EdgeNodeParseError(EdgeParseError):
    """Raised when the destination node of an edge token fails to parse."""


class WeightParseError(EdgeParseError):
    """Raised when the weight of an edge token fails to parse."""


class UndefinedWeightOperation(GraphAlgosError, ArithmeticError):
    """Raised for arithmetic on infinities that has no defined result."""


class WeightError(GraphAlgosError, ValueError):
    """Raised when a weighted algorithm receives an unusable edge weight."""


class MissingWeightError(WeightError):
    """Raised when a weighted algorithm meets an edge without a weight."""


class InfiniteWeightError(WeightError):
    """Raised when a weighted algorithm meets an edge with an infinite weight."""


class NoPathError(GraphAlgosError, LookupError):
    """Raised when a path is requested to a node the traversal never reached."""


class CorruptPredMapError(GraphAlgosError, RuntimeError):
    """Raised when a predecessor map does not lead back to a source."""


class CycleDetectedError(GraphAlgosError):
    """Raised by topological sort when the reachable subgraph has a cycle.

    Attributes:
        node: The node that was reached again while still in progress.
    """

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"Cycle detected at node {node!r}.")


class NegativeCycleError(GraphAlgosError):
    """Raised by Bellman-Ford when a negative cycle is reachable from the source."""


class NodeNotFoundError(GraphAlgosError, KeyError):
    """Raised when a traversal is started from a node that is not in the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "GraphAlgosError",
    "GraphParseError",
    "GraphFormatError",
    "NodeParseError",
    "EdgeParseError",
    "EdgeNodeParseError",
    "WeightParseError",
    "UndefinedWeightOperation",
    "WeightError",
    "MissingWeightError",
    "InfiniteWeightError",
    "NoPathError",
    "CorruptPredMapError",
    "CycleDetectedError",
    "NegativeCycleError",
    "NodeNotFoundError",
]
