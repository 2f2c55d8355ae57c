import pytest
from hypothesis import given, strategies as st

from ptools.json_node import (
    Node,
    NodeBuilder,
    NodeType,
    node_type_to_string,
    parse,
    parse_query,
)
from ptools.json_scanner import JsonScanError

DOC = '{"name": "lamp", "on": true, "level": 42, "tags": ["a", "b"], "cfg": {"mode": "eco", "list": [1, {"x": 7}]}, "none": null}'


def to_python(node):
    if node.node_type is NodeType.Object:
        return {k: to_python(v) for k, v in node.map_values.items()}
    if node.node_type is NodeType.Array:
        return [to_python(v) for v in node.array_values]
    if node.node_type is NodeType.String:
        return node.string_value
    if node.node_type is NodeType.Boolean:
        return node.bool_value
    if node.node_type is NodeType.Number:
        return node.number_value
    return None


def test_parse_document_structure():
    root = parse(DOC)
    assert root.is_type_object()
    assert to_python(root) == {
        "name": "lamp",
        "on": True,
        "level": 42.0,
        "tags": ["a", "b"],
        "cfg": {"mode": "eco", "list": [1.0, {"x": 7.0}]},
        "none": None,
    }


def test_query_paths():
    root = parse(DOC)
    assert root.query(".name").string_value == "lamp"
    assert root.query(".tags[1]").string_value == "b"
    assert root.query(".cfg.list[1].x").number_value == 7.0
    assert root.query(".cfg.missing") is None
    assert root.query(".tags[5]") is None
    assert root.query("") is root


def test_query_none_raises():
    with pytest.raises(ValueError):
        parse(DOC).query(None)


def test_parse_query_tokens():
    assert parse_query(".items[2].name") == ["items", 2, "name"]
    assert parse_query("a.b") == ["b"]
    assert parse_query("..x") == ["x"]
    assert parse_query(".a[3") == ["a"]


def test_count_nodes():
    root = parse(DOC)
    # root + 6 members + 2 tags + mode + list + 2 list items + x
    assert root.count_nodes() == 14
    assert parse("5").count_nodes() == 1


def test_type_names():
    assert node_type_to_string(NodeType.Boolean) == "Boolean"
    assert parse("[]").type_as_string() == "Array"
    assert parse("null").is_type_null_type()
    assert parse('"s"').is_type_primitive()
    assert not parse("{}").is_type_primitive()


def test_to_json_string_pinned():
    root = Node(NodeType.Object)
    root.add_bool("a", True)
    assert root.to_json_string() == '{\n    "a" : true\n}'


def test_builder_api_round_trip():
    root = Node(NodeType.Object)
    root.add_string("name", "desk")
    cfg = root.create_object("cfg")
    cfg.add_bool("on", False)
    arr = root.create_array("vals")
    arr.add_to_array(NodeType.Number).number_value = 3
    arr.add_to_array(NodeType.String).string_value = "z"
    again = parse(root.to_json_string())
    assert to_python(again) == {"name": "desk", "cfg": {"on": False}, "vals": [3.0, "z"]}


def test_get_node_at_bounds():
    root = parse("[1, 2]")
    assert root.get_node_at(1).number_value == 2.0
    assert root.get_node_at(2) is None
    assert root.get_node_at(-1) is None


def test_invalid_json_raises():
    with pytest.raises(JsonScanError):
        parse("{")
    with pytest.raises(JsonScanError):
        parse('{"a" 1}')


def test_builder_records_error():
    builder = NodeBuilder()
    builder.error("bad", 3)
    assert builder.errors == [("bad", 3)]


def test_builder_end_without_start():
    with pytest.raises(ValueError):
        NodeBuilder().end_object()


def test_show_prints_values(capsys):
    parse('{"k": true}').show()
    out = capsys.readouterr().out
    assert out == "k\n    boolValue:1\n"


_text = st.text(alphabet="abcXYZ019 _-", max_size=6)
_leaf = st.one_of(st.booleans(), st.integers(-10**6, 10**6), _text)
_tree = st.recursive(
    _leaf,
    lambda kids: st.one_of(
        st.lists(kids, max_size=4),
        st.dictionaries(_text, kids, max_size=4),
    ),
    max_leaves=15,
)


@given(st.dictionaries(_text, _tree, max_size=5))
def test_round_trip_property(value):
    import json

    root = parse(json.dumps(value))
    assert to_python(parse(root.to_json_string())) == to_python(root)
    assert to_python(root) == value