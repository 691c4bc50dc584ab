"""Graph primitives and helpers.

This package provides the adjacency-list `Graph`, its `Edge` and `EdgeWeight`
building blocks, and helper modules for serialization (`io`) and NetworkX
conversion (`convert`).
"""

from graph_algos.graph.digraph import EdgeTriple, Graph
from graph_algos.graph.edge import Edge, NodeID
from graph_algos.graph.edge_weight import EdgeWeight, WeightKind

__all__ = [
    "Edge",
    "EdgeTriple",
    "EdgeWeight",
    "Graph",
    "NodeID",
    "WeightKind",
]
