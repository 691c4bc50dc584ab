import pytest

from graph_algos.config import TextFormatConfig
from graph_algos.exceptions import (
    EdgeNodeParseError,
    GraphFormatError,
    GraphParseError,
    NodeParseError,
    WeightParseError,
)
from graph_algos.graph.digraph import Graph
from graph_algos.graph.edge_weight import EdgeWeight
from graph_algos.graph.io import (
    edgelist_to_graph,
    graph_to_edgelist,
    graph_to_text,
    parse_graph,
    read_graph,
    write_graph,
)


def test_parse_graph_basic():
    g = parse_graph("a:c,2 b,3\nb:e,6 d\n")

    assert g.get_edge("a", "c").weight == 2
    assert g.get_edge("a", "b").weight == 3
    assert g.get_edge("b", "e").weight == 6
    assert g.get_edge("b", "d").weight is None
    assert set(g.nodes()) == {"a", "b", "c", "d", "e"}
    assert [e.destination for e in g.successors("a")] == ["c", "b"]


def test_parse_graph_int_nodes_and_blank_lines():
    g = parse_graph("\n1:2 3\n\n   \n2:3,-1\n", parse_node=int)
    assert g.is_edge(1, 2) and g.is_edge(1, 3) and g.is_edge(2, 3)
    assert g.get_edge(2, 3).weight == -1


def test_parse_graph_extends_existing():
    g = Graph([("x", "y")])
    parse_graph("a:b", graph=g)
    assert g.is_edge("x", "y") and g.is_edge("a", "b")


def test_parse_graph_infinite_weights():
    g = parse_graph("a:b,+inf c,-inf d,inf")
    assert g.get_edge("a", "b").weight == EdgeWeight.infinity()
    assert g.get_edge("a", "c").weight == EdgeWeight.neg_infinity()
    assert g.get_edge("a", "d").weight == EdgeWeight.infinity()


def test_graph_to_text_sorted(weighted_graph_1):
    assert graph_to_text(weighted_graph_1) == (
        "a:c,2 b,3\n"
        "b:e,6 d,5\n"
        "c:g,2 f,1\n"
        "d:i,2 h,3\n"
        "e:h,7\n"
        "f:e,6\n"
        "i:b,4\n"
    )


def test_graph_to_text_unsorted_same_lines(weighted_graph_1):
    sorted_lines = graph_to_text(weighted_graph_1).splitlines()
    unsorted_lines = graph_to_text(weighted_graph_1, sort=False).splitlines()
    assert sorted(unsorted_lines) == sorted_lines


def test_graph_to_text_empty():
    assert graph_to_text(Graph()) == ""


def test_round_trip(weighted_graph_1, unweighted_tree_1):
    assert parse_graph(graph_to_text(weighted_graph_1)) == weighted_graph_1
    assert (
        parse_graph(graph_to_text(unweighted_tree_1, sort=False), parse_node=int)
        == unweighted_tree_1
    )

    g = Graph([("a", "b", EdgeWeight.infinity()), ("b", "a", EdgeWeight.neg_infinity())])
    assert parse_graph(graph_to_text(g)) == g


def test_custom_separators():
    cfg = TextFormatConfig(node_separator="->", edge_separator=";", weight_separator="=")
    g = parse_graph("a->b=1; c\n", config=cfg)
    assert g.get_edge("a", "b").weight == 1
    assert g.is_edge("a", "c")
    assert graph_to_text(g, config=cfg) == "a->b=1;c\n"


@pytest.mark.parametrize(
    "text, error, line_no",
    [
        ("a c,2", GraphFormatError, 1),
        ("a:b\n\nc d", GraphFormatError, 3),
        ("a:", GraphFormatError, 1),
        ("a:   ", GraphFormatError, 1),
        (":b", NodeParseError, 1),
        ("a:b,x", WeightParseError, 1),
        ("a:b,1.5", WeightParseError, 1),
    ],
)
def test_parse_errors(text, error, line_no):
    with pytest.raises(error) as exc_info:
        parse_graph(text)
    assert exc_info.value.line_no == line_no


def test_parse_errors_int_nodes():
    with pytest.raises(NodeParseError) as exc_info:
        parse_graph("x:1", parse_node=int)
    assert exc_info.value.fragment == "x"

    with pytest.raises(EdgeNodeParseError) as exc_info:
        parse_graph("1:2\n1:y,3", parse_node=int)
    assert exc_info.value.fragment == "y,3"
    assert exc_info.value.line_no == 2


def test_parse_errors_are_distinct():
    kinds = set()
    for text in ("a b", "x:1", "1:x", "1:2,z"):
        with pytest.raises(GraphParseError) as exc_info:
            parse_graph(text, parse_node=int)
        kinds.add(type(exc_info.value))
    assert kinds == {GraphFormatError, NodeParseError, EdgeNodeParseError, WeightParseError}


def test_read_write_graph(tmp_path, weighted_graph_1):
    path = tmp_path / "graph.txt"
    write_graph(weighted_graph_1, path)

    assert path.read_text() == graph_to_text(weighted_graph_1)
    assert read_graph(path) == weighted_graph_1
    assert read_graph(str(path)) == weighted_graph_1


def test_read_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_graph(tmp_path / "absent.txt")


def test_read_graph_not_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"a:\xff\xfe\n")
    with pytest.raises(GraphFormatError) as exc_info:
        read_graph(path)
    assert exc_info.value.fragment == str(path)
    assert exc_info.value.line_no is None
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_edgelist_to_graph():
    lines = ["# src dst weight", "A B 1", "", "B C", "C A -4"]
    g = edgelist_to_graph(lines)

    assert g.get_edge("A", "B").weight == 1
    assert g.get_edge("B", "C").weight is None
    assert g.get_edge("C", "A").weight == -4


def test_edgelist_to_graph_custom_separator_and_int_nodes():
    g = edgelist_to_graph(["1,2,5", "2,3"], parse_node=int, separator=",")
    assert g.get_edge(1, 2).weight == 5
    assert g.is_edge(2, 3)


def test_edgelist_to_graph_errors():
    with pytest.raises(GraphFormatError) as exc_info:
        edgelist_to_graph(["A B 1 2"])
    assert exc_info.value.line_no == 1

    with pytest.raises(GraphFormatError):
        edgelist_to_graph(["A"])
    with pytest.raises(NodeParseError):
        edgelist_to_graph(["x 1"], parse_node=int)
    with pytest.raises(EdgeNodeParseError):
        edgelist_to_graph(["1 x"], parse_node=int)
    with pytest.raises(WeightParseError):
        edgelist_to_graph(["A B\n", "A C heavy"])


def test_graph_to_edgelist():
    g = Graph([("B", "A", 2), ("A", "C"), ("A", "B", EdgeWeight.infinity())])

    assert graph_to_edgelist(g, sort=True) == ["A B +inf", "A C", "B A 2"]
    assert graph_to_edgelist(g, separator="\t", sort=True)[2] == "B\tA\t2"
    assert edgelist_to_graph(graph_to_edgelist(g)) == g
