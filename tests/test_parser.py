"""Tests for the graph parser (plain text and array modes)."""

import pytest

from graph import InputMode, ParseConfig, ParseError, parse
from graph.graph import AdjacencyEntry

UNDIRECTED = ParseConfig(weighted=True, directed=False)
DIRECTED   = ParseConfig(weighted=True, directed=True)
ARRAY      = ParseConfig(weighted=True, input_mode=InputMode.ARRAY)
ARRAY_DIR  = ParseConfig(weighted=False, directed=True, input_mode=InputMode.ARRAY)


def edge_tuples(model):
    return [(e.source, e.target, e.weight) for e in model.edges]


# ---------------------------------------------------------------------------
# Plain text — edge lists
# ---------------------------------------------------------------------------
def test_edge_list_round_trip():
    model = parse("A B 4\nB C 1", UNDIRECTED)

    assert model.node_ids() == ["A", "B", "C"]
    assert edge_tuples(model) == [("A", "B", 4), ("B", "C", 1)]
    assert [e.id for e in model.edges] == [0, 1]


def test_edge_ids_dense_in_creation_order():
    model = parse("A B\nB C\nC D\nD A\nA C", UNDIRECTED)
    assert [e.id for e in model.edges] == list(range(5))


def test_blank_and_short_lines_ignored():
    model = parse("\n  \nlonely\nA B 2\n\n", UNDIRECTED)
    assert model.node_ids() == ["A", "B"]
    assert model.edge_count() == 1


def test_missing_or_bad_weight_defaults_to_one():
    model = parse("A B\nB C heavy", UNDIRECTED)
    assert [e.weight for e in model.edges] == [1, 1]


def test_hex_and_binary_weights():
    model = parse("A B 0x10\nB C 0b11", UNDIRECTED)
    assert [e.weight for e in model.edges] == [16, 3]


def test_numeric_ids_are_strings():
    model = parse("1 2 3", UNDIRECTED)
    assert model.node_ids() == ["1", "2"]
    assert model.edges[0].source == "1"


def test_undirected_adjacency_has_both_directions():
    model = parse("A B 4", UNDIRECTED)
    assert model.adjacency["A"] == [AdjacencyEntry("B", 4, 0)]
    assert model.adjacency["B"] == [AdjacencyEntry("A", 4, 0)]
    assert model.edge_key_to_id == {"A--B": 0}


def test_directed_adjacency_is_one_way():
    model = parse("B A 4", DIRECTED)
    assert model.adjacency == {"B": [AdjacencyEntry("A", 4, 0)]}
    assert model.edge_key_to_id == {"B->A": 0}


def test_undirected_key_is_symmetric():
    model = parse("Z A 1", UNDIRECTED)
    assert model.edge_key_to_id == {"A--Z": 0}


def test_parallel_edges_last_write_wins():
    model = parse("A B 5\nB A 2", UNDIRECTED)
    assert model.edge_count() == 2
    assert model.edge_key_to_id == {"A--B": 1}
    assert len(model.adjacency["A"]) == 2


# ---------------------------------------------------------------------------
# Plain text — adjacency lines
# ---------------------------------------------------------------------------
def test_adjacency_line_with_weights():
    model = parse("A: B-3 C D-0x10", UNDIRECTED)
    assert edge_tuples(model) == [("A", "B", 3), ("A", "C", 1), ("A", "D", 16)]


def test_adjacency_line_bad_weight_defaults_to_one():
    model = parse("A: B-x", UNDIRECTED)
    assert edge_tuples(model) == [("A", "B", 1)]


def test_adjacency_line_ignores_text_after_second_colon():
    model = parse("A:B:C D", UNDIRECTED)
    assert edge_tuples(model) == [("A", "B", 1)]
    assert model.node_ids() == ["A", "B"]


def test_adjacency_line_without_neighbours_adds_isolated_node():
    model = parse("A:\nB C", UNDIRECTED)
    assert model.node_ids() == ["A", "B", "C"]
    assert model.edge_count() == 1
    assert "A" not in model.adjacency


def test_mixed_adjacency_and_edge_lines():
    model = parse("A: B-2\nB C 5", UNDIRECTED)
    assert edge_tuples(model) == [("A", "B", 2), ("B", "C", 5)]


# ---------------------------------------------------------------------------
# Labels / serialisation
# ---------------------------------------------------------------------------
def test_weighted_edges_carry_labels_and_arrows():
    model = parse("A B 2.0", DIRECTED)
    assert model.edges[0].to_dict() == {"id": 0, "from": "A", "to": "B", "label": "2", "arrows": "to"}


def test_unweighted_edges_have_no_label():
    model = parse("A B 2", ParseConfig())
    assert model.edges[0].to_dict() == {"id": 0, "from": "A", "to": "B"}


def test_model_to_dict_shape():
    data = parse("A B 4", UNDIRECTED).to_dict()
    assert data["nodes"] == [{"id": "A", "label": "A"}, {"id": "B", "label": "B"}]
    assert data["edgeKeyToId"] == {"A--B": 0}
    assert data["adjacency"]["B"] == [{"to": "A", "weight": 4, "edgeId": 0}]
    assert data["isDirected"] is False


def test_empty_input_is_an_empty_model_not_an_error():
    model = parse("", UNDIRECTED)
    assert model.is_empty()
    assert model.edges == []


def test_parse_is_idempotent():
    text = "A B 4\nB C 1\nC: D-2"
    first, second = parse(text, UNDIRECTED), parse(text, UNDIRECTED)
    assert first == second
    assert first is not second
    assert first.adjacency is not second.adjacency


# ---------------------------------------------------------------------------
# Array mode
# ---------------------------------------------------------------------------
def test_array_adjacency_list_by_position():
    model = parse("[[0,1],[1,2],[2]]", ARRAY_DIR)

    assert set(model.node_ids()) == {"0", "1", "2"}
    pairs = [(e.source, e.target) for e in model.edges]
    assert ("0", "1") in pairs
    assert ("1", "2") in pairs
    # every listed neighbour is an edge, self references included
    assert pairs == [("0", "0"), ("0", "1"), ("1", "1"), ("1", "2"), ("2", "2")]


def test_array_adjacency_list_with_empty_rows():
    model = parse("[[1, 2], [], [0]]", ARRAY_DIR)
    assert [(e.source, e.target) for e in model.edges] == [("0", "1"), ("0", "2"), ("2", "0")]
    assert all(e.weight == 1 for e in model.edges)


def test_array_edge_list_with_weights():
    model = parse("[[1,2,5],[2,3,3]]", ARRAY)
    assert edge_tuples(model) == [("1", "2", 5), ("2", "3", 3)]
    assert model.node_ids() == ["1", "2", "3"]


def test_array_edge_list_string_weights():
    model = parse('[["a","b","0x0a"],["b","c","oops"],["c","d"]]', ARRAY)
    assert edge_tuples(model) == [("a", "b", 10), ("b", "c", 1), ("c", "d", 1)]


def test_array_float_ids_display_like_integers():
    model = parse("[[1.0, 2.0, 3]]", ARRAY)
    assert model.node_ids() == ["1", "2"]


def test_array_object_with_edges_property():
    model = parse('{"name": "g", "edges": [["A","B",2]]}', ARRAY)
    assert edge_tuples(model) == [("A", "B", 2)]


def test_array_object_with_graph_property():
    model = parse('{"graph": [[1],[0]]}', ARRAY)
    assert [(e.source, e.target) for e in model.edges] == [("0", "1"), ("1", "0")]


def test_array_object_first_array_property():
    model = parse('{"meta": 1, "links": [["x","y"]]}', ARRAY)
    assert edge_tuples(model) == [("x", "y", 1)]


def test_array_fallback_first_bracketed():
    model = parse("graph = [[1,2,5],[2,3,3]]; // from my notes", ARRAY)
    assert edge_tuples(model) == [("1", "2", 5), ("2", "3", 3)]


def test_array_fallback_edges_assignment():
    # the first bracket pair is not valid JSON, so only the `edges =` tail parses
    text = "weights = [a, b]\nedges = [[0, 1], [1, 2]];\nprint(edges)"
    model = parse(text, ARRAY)
    assert [(e.source, e.target) for e in model.edges] == [("0", "1"), ("1", "2")]


def test_array_malformed_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse("not an array at all {", ARRAY)
    assert "array" in excinfo.value.message


def test_array_unbalanced_brackets_raise():
    with pytest.raises(ParseError):
        parse("[[1,2]", ARRAY)


def test_array_deeply_nested_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse("[" * 5000 + "]" * 5000, ARRAY)
    assert "Failed to parse array-style input" in excinfo.value.message


@pytest.mark.parametrize("text", ["[[1,2,NaN]]", "[[1,2,Infinity]]", "edges = [[1,2,-Infinity]];"])
def test_array_non_json_constants_are_rejected(text):
    with pytest.raises(ParseError):
        parse(text, ARRAY)


def test_array_of_scalars_is_unrecognized():
    with pytest.raises(ParseError) as excinfo:
        parse("[1, 2, 3]", ARRAY)
    assert "Unrecognized array structure" in excinfo.value.message
    assert "adjacency-list" in excinfo.value.message


def test_array_empty_is_unrecognized():
    with pytest.raises(ParseError):
        parse("[]", ARRAY)


def test_array_object_without_arrays_raises():
    with pytest.raises(ParseError) as excinfo:
        parse('{"a": 1}', ARRAY)
    assert "no array-property" in excinfo.value.message


def test_array_scalar_json_raises():
    with pytest.raises(ParseError) as excinfo:
        parse("42", ARRAY)
    assert "did not result in an array" in excinfo.value.message


# ---------------------------------------------------------------------------
# ParseConfig
# ---------------------------------------------------------------------------
def test_parse_config_from_dict():
    config = ParseConfig.from_dict({"weighted": True, "directed": True, "inputMode": "array"})
    assert config == ParseConfig(weighted=True, directed=True, input_mode=InputMode.ARRAY)


def test_parse_config_defaults():
    assert ParseConfig.from_dict({}) == ParseConfig()


def test_parse_config_unknown_mode():
    with pytest.raises(ParseError):
        ParseConfig.from_dict({"inputMode": "yaml"})
