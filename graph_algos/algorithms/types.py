"""Type aliases shared by the traversal algorithms."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from graph_algos.graph.edge import NodeID
from graph_algos.graph.edge_weight import EdgeWeight

#: Maps each reached node to ``(predecessor, weight of the edge used)``.
#: The traversal source maps to itself with weight ``None``; that self-loop
#: is the sentinel that ends path reconstruction.
PredMap = Dict[NodeID, Tuple[NodeID, Optional[EdgeWeight]]]

#: Maps each node to its best known distance from the source
#: (positive infinity when unreached).
DistMap = Dict[NodeID, EdgeWeight]
