"""A JSON document tree, its builder and a small path query language."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ptools.json_scanner import Handler, Scanner
from ptools.textfmt import ascii_to_number, number_to_ascii

QueryToken = Union[str, int]


class NodeType(Enum):
    """Kinds of JSON values."""

    NullType = "NullType"
    Boolean = "Boolean"
    Number = "Number"
    String = "String"
    Object = "Object"
    Array = "Array"


_PRIMITIVES = (NodeType.NullType, NodeType.Boolean, NodeType.Number, NodeType.String)


def node_type_to_string(node_type: NodeType) -> str:
    """Display name of ``node_type``."""
    return NodeType(node_type).value


def _format_number(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


def parse_query(path: str) -> List[QueryToken]:
    """Split a query such as ``.items[2].name`` into keys (str) and indices (int).

    Empty keys are dropped, an unterminated ``[`` ends the query and any
    character outside a ``.key`` or ``[index]`` part is skipped.
    """
    tokens: List[QueryToken] = []
    size = len(path)
    i = 0
    while i < size:
        ch = path[i]
        if ch == ".":
            i += 1
            start = i
            while i < size and path[i] not in ".[":
                i += 1
            key = path[start:i]
            if key:
                tokens.append(key)
        elif ch == "[":
            i += 1
            start = i
            while i < size and path[i] != "]":
                i += 1
            if i >= size:
                break
            tokens.append(ascii_to_number(path[start:i], int))
            i += 1
        else:
            i += 1
    return tokens


@dataclass
class Node:
    """One JSON value with its children."""

    node_type: NodeType = NodeType.NullType
    bool_value: bool = False
    number_value: float = 0.0
    string_value: str = ""
    map_values: Dict[str, "Node"] = field(default_factory=dict)
    array_values: List["Node"] = field(default_factory=list)

    def __iter__(self) -> Iterator["Node"]:
        """Iterate over the children: array items or object values."""
        if self.node_type is NodeType.Array:
            return iter(self.array_values)
        if self.node_type is NodeType.Object:
            return iter(self.map_values.values())
        return iter(())

    def show(self, space: int = 0) -> None:
        """Print the tree, indented by ``space``."""
        pad = " " * space
        if self.node_type is NodeType.Boolean:
            print(f"{pad}boolValue:{number_to_ascii(self.bool_value)}")
        elif self.node_type is NodeType.Number:
            print(f"{pad}numberValue:{_format_number(self.number_value)}")
        elif self.node_type is NodeType.String:
            print(f"{pad}string:'{self.string_value}'")
        elif self.node_type is NodeType.NullType:
            print(f"{pad}NullType")
        elif self.node_type is NodeType.Object:
            for key, node in self.map_values.items():
                print(f"{pad}{key}")
                node.show(space + 4)
        elif self.node_type is NodeType.Array:
            print(f"{pad}[{len(self.array_values)}]")
            for node in self.array_values:
                print(f"{' ' * (space + 2)}object")
                node.show(space + 4)

    def to_json_string(
        self,
        space: int = 0,
        type_parent: Optional[NodeType] = None,
        flag_root: bool = True,
    ) -> str:
        """Indented JSON-like text of the tree; a null value is written as ``null-type``."""
        kind = self.node_type
        if kind is NodeType.NullType:
            return "null-type"
        if kind is NodeType.Boolean:
            return "true" if self.bool_value else "false"
        if kind is NodeType.Number:
            return _format_number(self.number_value)
        if kind is NodeType.String:
            return f'"{self.string_value}"'

        pad = " " * space
        inner = " " * (space + 4)
        parts: List[str] = []
        if kind is NodeType.Array:
            parts.append(f"\n{pad}[\n")
            items = self.array_values
            for index, node in enumerate(items):
                parts.append(inner + node.to_json_string(space + 4, kind, False))
                if index + 1 < len(items):
                    parts.append(",")
                parts.append("\n")
            parts.append(f"{pad}]")
            return "".join(parts)

        if type_parent is NodeType.Object:
            if not flag_root:
                parts.append("\n")
            parts.append(f"{pad}{{\n")
        else:
            parts.append("{\n")
        entries = list(self.map_values.items())
        for index, (key, node) in enumerate(entries):
            parts.append(f'{inner}"{key}" : ')
            parts.append(node.to_json_string(space + 4, kind, False))
            if index + 1 < len(entries):
                parts.append(",")
            parts.append("\n")
        parts.append(f"{pad}}}")
        return "".join(parts)

    def count_nodes(self) -> int:
        """Number of nodes in the tree, this one included."""
        return 1 + sum(child.count_nodes() for child in self)

    def type_as_string(self) -> str:
        return node_type_to_string(self.node_type)

    def get_node(self, key: str) -> Optional["Node"]:
        """Member ``key`` of an object, or None."""
        return self.map_values.get(key)

    def get_node_at(self, index: int) -> Optional["Node"]:
        """Array item at ``index``, or None when out of range."""
        if index < 0 or index >= len(self.array_values):
            return None
        return self.array_values[index]

    def query(self, path: str) -> Optional["Node"]:
        """Follow a path such as ``.items[2].name``; None if a step is missing."""
        if path is None:
            raise ValueError("query path is missing")
        node: Optional[Node] = self
        for token in parse_query(path):
            if node is None:
                break
            if isinstance(token, int):
                node = node.get_node_at(token)
            else:
                node = node.get_node(token)
        return node

    def add(self, key: str, node_type: NodeType) -> "Node":
        """Add (or replace) member ``key`` with a fresh node of ``node_type``."""
        node = Node(NodeType(node_type))
        self.map_values[key] = node
        return node

    def add_string(self, key: str, text: str) -> "Node":
        node = self.add(key, NodeType.String)
        node.string_value = text
        return node

    def add_bool(self, key: str, flag: bool) -> "Node":
        node = self.add(key, NodeType.Boolean)
        node.bool_value = bool(flag)
        return node

    def add_to_array(self, node_type: NodeType) -> "Node":
        """Append a fresh node of ``node_type`` to the array items."""
        node = Node(NodeType(node_type))
        self.array_values.append(node)
        return node

    def create_object(self, key: str) -> "Node":
        return self.add(key, NodeType.Object)

    def create_array(self, key: str) -> "Node":
        return self.add(key, NodeType.Array)

    def is_type_primitive(self) -> bool:
        return self.node_type in _PRIMITIVES

    def is_type_bool(self) -> bool:
        return self.node_type is NodeType.Boolean

    def is_type_number(self) -> bool:
        return self.node_type is NodeType.Number

    def is_type_string(self) -> bool:
        return self.node_type is NodeType.String

    def is_type_null_type(self) -> bool:
        return self.node_type is NodeType.NullType

    def is_type_array(self) -> bool:
        return self.node_type is NodeType.Array

    def is_type_object(self) -> bool:
        return self.node_type is NodeType.Object


@dataclass
class _Context:
    node: Node
    current_key: str = ""


class NodeBuilder(Handler):
    """Builds a :class:`Node` tree from scanner events; the result is :attr:`root`."""

    def __init__(self) -> None:
        super().__init__()
        self.root = Node()
        self.depth = 0
        self.errors: List[Tuple[str, int]] = []
        self._stack: List[_Context] = []

    def _top(self, what: str) -> _Context:
        if not self._stack:
            raise ValueError(f"{what}: no open object or array")
        return self._stack[-1]

    def _attach(self, node: Node) -> None:
        if not self._stack:
            self.root = node
            return
        context = self._stack[-1]
        if context.node.node_type is NodeType.Object:
            context.node.map_values[context.current_key] = node
        elif context.node.node_type is NodeType.Array:
            context.node.array_values.append(node)

    def _close(self, what: str) -> None:
        self._top(what)
        node = self._stack.pop().node
        self._attach(node)
        self.depth -= 1

    def start_object(self) -> None:
        self.depth += 1
        self._stack.append(_Context(Node(NodeType.Object)))

    def end_object(self) -> None:
        self._close("end_object")

    def start_array(self) -> None:
        self.depth += 1
        self._stack.append(_Context(Node(NodeType.Array)))

    def end_array(self) -> None:
        self._close("end_array")

    def key(self, data: str) -> None:
        self._top("key").current_key = data

    def string_value(self, data: str) -> None:
        self._attach(Node(NodeType.String, string_value=data))

    def number_value(self, data: str) -> None:
        self._attach(Node(NodeType.Number, number_value=ascii_to_number(data, float)))

    def boolean_value(self, value: bool) -> None:
        self._attach(Node(NodeType.Boolean, bool_value=bool(value)))

    def null_value(self) -> None:
        self._attach(Node(NodeType.NullType))

    def error(self, message: str, position: int) -> None:
        self.errors.append((message, position))
        print(f"{' ' * (self.depth * 4)}ERROR at {position}: {message}")


def parse(text: Union[str, bytes, bytearray]) -> Node:
    """Parse JSON text into a tree; raises JsonScanError on invalid input."""
    builder = NodeBuilder()
    Scanner(text, builder).scan_json_data()
    return builder.root