"""Configuration classes for graph_algos components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Knobs for the relaxation-based shortest-path algorithms."""

    # Run one extra Bellman-Ford pass and fail if it still improves a distance
    detect_negative_cycles: bool = True

    # Optional cap on Bellman-Ford rounds; None means |V| - 1
    max_rounds: Optional[int] = None

    def rounds_for(self, num_nodes: int) -> int:
        """Return the number of Bellman-Ford rounds for a graph of ``num_nodes``."""
        rounds = max(num_nodes - 1, 0)
        if self.max_rounds is not None:
            rounds = min(rounds, max(self.max_rounds, 0))
        return rounds


@dataclass
class TextFormatConfig:
    """Separators of the adjacency text format ``source:dest,weight dest``."""

    node_separator: str = ":"
    edge_separator: str = " "
    weight_separator: str = ","


# Global configuration instances
SEARCH_CONFIG = SearchConfig()
TEXT_FORMAT = TextFormatConfig()
