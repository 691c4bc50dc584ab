"""Graph traversal algorithms.

Each single-source algorithm returns a predecessor map (see
:mod:`graph_algos.algorithms.types`) that :func:`graph_algos.paths.path_to`
turns into a :class:`~graph_algos.paths.Path`.
"""

from graph_algos.algorithms.bellman_ford import bellman_ford
from graph_algos.algorithms.bfs import bfs, shortest_paths
from graph_algos.algorithms.spf import dijkstra
from graph_algos.algorithms.topo_sort import topological_sort
from graph_algos.algorithms.types import DistMap, PredMap

__all__ = [
    "DistMap",
    "PredMap",
    "bellman_ford",
    "bfs",
    "dijkstra",
    "shortest_paths",
    "topological_sort",
]
