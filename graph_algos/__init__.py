"""graph_algos: directed graphs and classic single-source traversals.

Primary API:
    Graph, Edge, EdgeWeight - Adjacency-list directed graph and its parts
    shortest_paths() - Fewest-hop paths (breadth-first search)
    dijkstra() - Shortest weighted paths, non-negative weights
    bellman_ford() - Shortest weighted paths, negative weights allowed
    topological_sort() - Order of the nodes reachable from a start node
    path_to() - Turn a predecessor map into a Path
    parse_graph(), graph_to_text() - Adjacency text format

Example:
    from graph_algos import dijkstra, parse_graph, path_to

    graph = parse_graph("a:b,4 c,2\\nc:b,1\\n")
    costs, pred = dijkstra(graph, "a")
    print(costs["b"], path_to(pred, "b"))  # 3 'a' --(2)-> 'c' --(1)-> 'b'
"""

from __future__ import annotations

from graph_algos import cli, logging
from graph_algos.algorithms import (
    DistMap,
    PredMap,
    bellman_ford,
    bfs,
    dijkstra,
    shortest_paths,
    topological_sort,
)
from graph_algos.config import SEARCH_CONFIG, TEXT_FORMAT, SearchConfig, TextFormatConfig
from graph_algos.exceptions import GraphAlgosError
from graph_algos.graph import Edge, EdgeWeight, Graph, NodeID, WeightKind
from graph_algos.graph.io import graph_to_text, parse_graph, read_graph, write_graph
from graph_algos.paths import Path, path_to

__version__ = "0.1.0"

__all__ = [
    "cli",
    "logging",
    "__version__",
    "DistMap",
    "PredMap",
    "bellman_ford",
    "bfs",
    "dijkstra",
    "shortest_paths",
    "topological_sort",
    "SEARCH_CONFIG",
    "TEXT_FORMAT",
    "SearchConfig",
    "TextFormatConfig",
    "GraphAlgosError",
    "Edge",
    "EdgeWeight",
    "Graph",
    "NodeID",
    "WeightKind",
    "graph_to_text",
    "parse_graph",
    "read_graph",
    "write_graph",
    "Path",
    "path_to",
]
