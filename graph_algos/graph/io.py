"""Text serialization for :class:`~graph_algos.graph.digraph.Graph`.

Two formats are supported:

* Adjacency text, one line per source node with at least one out-edge::

      a:c,2 b,3
      b:e,6 d,5

  Each edge token is ``dest`` or ``dest,weight``.

* Edge list, one ``src dst [weight]`` line per edge.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from graph_algos.config import TEXT_FORMAT, TextFormatConfig
from graph_algos.exceptions import (
    EdgeNodeParseError,
    GraphFormatError,
    NodeParseError,
    WeightParseError,
)
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import Edge, NodeID
from graph_algos.graph.edge_weight import EdgeWeight
from graph_algos.logging import get_logger

logger = get_logger(__name__)

NodeParser = Callable[[str], NodeID]


def _split_tokens(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty tokens."""
    if separator.isspace():
        return text.split()
    return [token.strip() for token in text.split(separator) if token.strip()]


def _parse_node(
    text: str, parse_node: NodeParser, line: str, line_no: int
) -> NodeID:
    if not text:
        raise NodeParseError("missing source node", fragment=line, line_no=line_no)
    try:
        return parse_node(text)
    except (TypeError, ValueError) as exc:
        raise NodeParseError(
            f"failed to parse source node {text!r}: {exc}",
            fragment=text,
            line_no=line_no,
        ) from exc


def parse_graph(
    text: str,
    parse_node: NodeParser = str,
    config: Optional[TextFormatConfig] = None,
    graph: Optional[Graph] = None,
) -> Graph:
    """Build or extend a graph from adjacency text.

    Blank lines are skipped. Every other line must look like
    ``source:dest1[,w1] dest2[,w2] ...``.

    Args:
        text: The adjacency text.
        parse_node: Converts node text into a node (e.g. ``int``).
        config: Separators to use; defaults to :data:`TEXT_FORMAT`.
        graph: An existing graph to extend; a new one is created if None.

    Returns:
        The populated graph.

    Raises:
        GraphFormatError: If a line has no ``:`` or no edges.
        NodeParseError: If a source node fails to parse.
        EdgeNodeParseError: If a destination node fails to parse.
        WeightParseError: If a weight fails to parse.
    """
    cfg = config or TEXT_FORMAT
    if graph is None:
        graph = Graph()

    lines_read = 0
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        src_text, sep, rest = line.partition(cfg.node_separator)
        if not sep:
            raise GraphFormatError(
                f"missing '{cfg.node_separator}' after source node",
                fragment=line,
                line_no=line_no,
            )
        u = _parse_node(src_text.strip(), parse_node, line, line_no)

        tokens = _split_tokens(rest, cfg.edge_separator)
        if not tokens:
            raise GraphFormatError(
                "no outbound edges", fragment=line, line_no=line_no
            )
        for token in tokens:
            edge = Edge.parse(
                token,
                parse_node=parse_node,
                weight_separator=cfg.weight_separator,
                line_no=line_no,
            )
            graph.add_edge(u, edge)
        lines_read += 1

    logger.debug(
        f"Parsed {lines_read} adjacency lines: "
        f"{len(graph)} nodes, {graph.num_edges()} edges"
    )
    return graph


def _format_edge(edge: Edge, cfg: TextFormatConfig) -> str:
    if edge.weight is None:
        return f"{edge.destination}"
    return f"{edge.destination}{cfg.weight_separator}{edge.weight}"


def graph_to_text(
    graph: Graph,
    sort: bool = True,
    config: Optional[TextFormatConfig] = None,
) -> str:
    """Serialize a graph to adjacency text, the inverse of :func:`parse_graph`.

    Nodes without out-edges only appear as destinations. Nodes are written
    with ``str()``, so round-tripping needs a matching ``parse_node``.

    Args:
        graph: The graph to serialize.
        sort: If True, write source lines in node order (stable output; the
            node type must be orderable). Otherwise use map order.
        config: Separators to use; defaults to :data:`TEXT_FORMAT`.

    Returns:
        The text, one newline-terminated line per source node.
    """
    cfg = config or TEXT_FORMAT
    lines: List[str] = []
    for u in graph.nodes(sort=sort):
        succs = graph.successors(u)
        if not succs:
            continue
        tokens = [_format_edge(edge, cfg) for edge in succs]
        lines.append(f"{u}{cfg.node_separator}{cfg.edge_separator.join(tokens)}\n")
    return "".join(lines)


def read_graph(
    path: Union[str, Path],
    parse_node: NodeParser = str,
    config: Optional[TextFormatConfig] = None,
) -> Graph:
    """Read a graph from an adjacency text file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphParseError: If the contents are malformed. Text that is not
            valid UTF-8 is a ``GraphFormatError``.
    """
    p = Path(path)
    logger.debug(f"Reading graph from {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GraphFormatError(
            f"not valid UTF-8 text ({e.reason} at byte {e.start})",
            fragment=str(p),
        ) from e
    return parse_graph(text, parse_node, config)


def write_graph(
    graph: Graph,
    path: Union[str, Path],
    sort: bool = True,
    config: Optional[TextFormatConfig] = None,
) -> None:
    """Write a graph to an adjacency text file."""
    p = Path(path)
    logger.debug(f"Writing graph to {p}")
    p.write_text(graph_to_text(graph, sort=sort, config=config), encoding="utf-8")


def edgelist_to_graph(
    lines: Iterable[str],
    parse_node: NodeParser = str,
    separator: str = " ",
    graph: Optional[Graph] = None,
) -> Graph:
    """Build or extend a graph from ``src dst [weight]`` lines.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        lines: An iterable of strings, each representing one edge.
        parse_node: Converts node text into a node.
        separator: Column separator (default is whitespace).
        graph: An existing graph to update; if None, a new graph is created.

    Returns:
        The updated (or newly created) graph.

    Raises:
        GraphFormatError: If a line does not have two or three columns.
        NodeParseError: If the source column fails to parse.
        EdgeNodeParseError: If the destination column fails to parse.
        WeightParseError: If the weight column fails to parse.
    """
    if graph is None:
        graph = Graph()

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        tokens = _split_tokens(line, separator)
        if len(tokens) not in (2, 3):
            raise GraphFormatError(
                f"expected 2 or 3 columns, got {len(tokens)}",
                fragment=line,
                line_no=line_no,
            )

        u = _parse_node(tokens[0], parse_node, line, line_no)
        try:
            v = parse_node(tokens[1])
        except (TypeError, ValueError) as exc:
            raise EdgeNodeParseError(
                f"failed to parse destination node {tokens[1]!r}: {exc}",
                fragment=tokens[1],
                line_no=line_no,
            ) from exc

        weight: Optional[EdgeWeight] = None
        if len(tokens) == 3:
            try:
                weight = EdgeWeight.parse(tokens[2])
            except ValueError as exc:
                raise WeightParseError(
                    f"failed to parse edge weight {tokens[2]!r}",
                    fragment=tokens[2],
                    line_no=line_no,
                ) from exc

        graph.add_edge(u, Edge(v, weight))

    return graph


def graph_to_edgelist(
    graph: Graph,
    separator: str = " ",
    sort: bool = False,
) -> List[str]:
    """Convert a graph into ``src dst [weight]`` lines.

    Args:
        graph: The graph to export.
        separator: The string used to join columns (default is a space).
        sort: If True, order lines by source and destination.

    Returns:
        A list of strings, one per edge; unweighted edges have two columns.
    """
    lines: List[str] = []
    for u, edge in graph.edges(sort=sort):
        tokens = [str(u), str(edge.destination)]
        if edge.weight is not None:
            tokens.append(str(edge.weight))
        lines.append(separator.join(tokens))
    return lines
