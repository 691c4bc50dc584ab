"""Path reconstruction from traversal predecessor maps."""

from graph_algos.paths.path import Hop, Path, path_to

__all__ = ["Hop", "Path", "path_to"]
