"""Command-line interface for graph_algos."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, Callable, Dict, List, Optional

from graph_algos.algorithms import bellman_ford, dijkstra, shortest_paths
from graph_algos.algorithms.topo_sort import topological_sort
from graph_algos.config import SearchConfig
from graph_algos.exceptions import GraphAlgosError
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge import NodeID
from graph_algos.graph.io import graph_to_text, read_graph
from graph_algos.logging import get_logger, set_global_log_level, timed
from graph_algos.paths.path import Path, path_to

logger = get_logger(__name__)


def _node_parser(int_nodes: bool) -> Callable[[str], NodeID]:
    return int if int_nodes else str


def _load_graph(path: FilePath, int_nodes: bool) -> Graph:
    """Read a graph file in the adjacency text format."""
    logger.info(f"Loading graph from: {path}")
    graph = read_graph(path, parse_node=_node_parser(int_nodes))
    logger.info(f"Loaded graph: nodes={len(graph)}, edges={graph.num_edges()}")
    return graph


def _path_payload(path: Path, distance: Optional[Any] = None) -> Dict[str, Any]:
    """Build the JSON object printed by ``--json``."""
    payload: Dict[str, Any] = {
        "source": path.src_node,
        "target": path.dst_node,
        "hops": len(path),
        "path": list(path.nodes_seq),
    }
    if distance is not None:
        payload["distance"] = distance.to_number()
    return payload


def _show(path: FilePath, int_nodes: bool, unsorted: bool) -> None:
    graph = _load_graph(path, int_nodes)
    print(graph)
    print()
    print(graph_to_text(graph, sort=not unsorted), end="")


def _run_bfs(
    path: FilePath, int_nodes: bool, src: NodeID, dst: NodeID, as_json: bool
) -> None:
    graph = _load_graph(path, int_nodes)

    pred = shortest_paths(graph, src)
    found = path_to(pred, dst)
    if as_json:
        print(json.dumps(_path_payload(found), indent=2))
        return
    print(f"Node {src!r} is {len(found)} hops from Node {dst!r}")
    print(f"Path taken: {found}")


def _run_weighted(
    algorithm: str,
    path: FilePath,
    int_nodes: bool,
    src: NodeID,
    dst: NodeID,
    as_json: bool,
    cycle_check: bool = True,
) -> None:
    graph = _load_graph(path, int_nodes)

    with timed(logger, algorithm, level=logging.INFO):
        if algorithm == "dijkstra":
            costs, pred = dijkstra(graph, src)
        else:
            config = SearchConfig(detect_negative_cycles=cycle_check)
            costs, pred = bellman_ford(graph, src, config=config)

    found = path_to(pred, dst)
    if as_json:
        print(json.dumps(_path_payload(found, costs[dst]), indent=2))
        return
    print(f"Node {src!r} is distance {costs[dst]} from Node {dst!r}")
    print(f"Path taken: {found}")


def _run_topo_sort(path: FilePath, int_nodes: bool, start: NodeID) -> None:
    graph = _load_graph(path, int_nodes)
    order = topological_sort(graph, start)
    for node in order:
        print(node)


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--source", "-s", required=True, help="Source node")
    parser.add_argument("--target", "-t", required=True, help="Target node")
    parser.add_argument(
        "--json", action="store_true", help="Print the result as a JSON object"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graph-algos`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="graph-algos",
        description="Run shortest-path and ordering algorithms on graph files.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--int-nodes",
        action="store_true",
        help="Parse node names (in the file and on the command line) as integers",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{show,bfs,dijkstra,bellman-ford,topo-sort}",
        help="Available commands",
    )

    show_parser = subparsers.add_parser("show", help="Print a graph file")
    show_parser.add_argument(
        "--unsorted",
        action="store_true",
        help="Serialize in storage order instead of sorted order",
    )

    bfs_parser = subparsers.add_parser("bfs", help="Fewest-hop path between nodes")
    _add_path_arguments(bfs_parser)

    dijkstra_parser = subparsers.add_parser(
        "dijkstra", help="Shortest weighted path (non-negative weights)"
    )
    _add_path_arguments(dijkstra_parser)

    bf_parser = subparsers.add_parser(
        "bellman-ford", help="Shortest weighted path (negative weights allowed)"
    )
    _add_path_arguments(bf_parser)
    bf_parser.add_argument(
        "--no-cycle-check",
        action="store_true",
        help="Skip negative-cycle detection",
    )

    topo_parser = subparsers.add_parser(
        "topo-sort", help="Topological order of nodes reachable from a start node"
    )
    topo_parser.add_argument("--start", required=True, help="Start node")

    for p in (show_parser, bfs_parser, dijkstra_parser, bf_parser, topo_parser):
        p.add_argument("graph", type=FilePath, help="Path to graph file")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    # Convert node arguments before the graph file is read.
    parse_node = _node_parser(args.int_nodes)
    try:
        nodes: Dict[str, NodeID] = {
            name: parse_node(getattr(args, name))
            for name in ("source", "target", "start")
            if getattr(args, name, None) is not None
        }
    except ValueError as e:
        logger.error(f"Invalid node argument: {e}")
        print(f"ERROR: Invalid node argument: {e}")
        sys.exit(1)

    try:
        if args.command == "show":
            _show(args.graph, args.int_nodes, args.unsorted)
        elif args.command == "bfs":
            _run_bfs(
                args.graph, args.int_nodes, nodes["source"], nodes["target"], args.json
            )
        elif args.command in ("dijkstra", "bellman-ford"):
            _run_weighted(
                args.command,
                args.graph,
                args.int_nodes,
                nodes["source"],
                nodes["target"],
                args.json,
                cycle_check=not getattr(args, "no_cycle_check", False),
            )
        elif args.command == "topo-sort":
            _run_topo_sort(args.graph, args.int_nodes, nodes["start"])
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except (GraphAlgosError, OSError) as e:
        logger.error(f"Failed to run {args.command}: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
