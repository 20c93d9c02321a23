"""
JSON reader/writer for GraphNode trees.

Shape: {"value": <0-255>, "nodes": [<same shape>, ...]}
Both keys are required; unknown keys are ignored.
"""

from __future__ import annotations
import json
from typing import Any

from treegraph.config import CONFIG
from treegraph.core.node import GraphNode
from treegraph.core.ports import FormatError, GraphReader, GraphWriter


# -------------------------------------------------------------------
# Validation helpers
# -------------------------------------------------------------------

def _check_value(value: Any, where: str) -> int:
    lo, hi = CONFIG["value_min"], CONFIG["value_max"]
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"{where}: 'value' must be an integer, got {type(value).__name__}")
    if not lo <= value <= hi:
        raise FormatError(f"{where}: 'value' {value} outside {lo}..{hi}")
    return value


def graph_from_obj(obj: Any, where: str = "$") -> GraphNode:
    """Build a tree from already-parsed JSON data."""
    if not isinstance(obj, dict):
        raise FormatError(f"{where}: expected an object, got {type(obj).__name__}")
    if "value" not in obj:
        raise FormatError(f"{where}: missing field 'value'")
    if "nodes" not in obj:
        raise FormatError(f"{where}: missing field 'nodes'")

    nodes = obj["nodes"]
    if not isinstance(nodes, list):
        raise FormatError(f"{where}: 'nodes' must be a list, got {type(nodes).__name__}")

    graph = GraphNode(_check_value(obj["value"], where))
    for i, child in enumerate(nodes):
        graph.add(graph_from_obj(child, f"{where}.nodes[{i}]"))
    return graph


def graph_to_obj(graph: GraphNode, where: str = "$") -> dict:
    return {
        "value": _check_value(graph.value, where),
        "nodes": [graph_to_obj(node, f"{where}.nodes[{i}]") for i, node in enumerate(graph.nodes)],
    }


# -------------------------------------------------------------------
# Reader / Writer
# -------------------------------------------------------------------

class JsonGraphReader(GraphReader):
    format_name = "json"

    def read(self, src: str | bytes) -> GraphNode:
        try:
            obj = json.loads(src)
        except RecursionError as e:
            raise FormatError("JSON nested too deeply") from e
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError, integer digit limit
            raise FormatError(f"invalid JSON: {e}") from e
        except TypeError as e:
            raise FormatError(f"cannot decode {type(src).__name__}") from e
        try:
            return graph_from_obj(obj)
        except RecursionError as e:
            raise FormatError("tree nested too deeply") from e


class JsonGraphWriter(GraphWriter):
    format_name = "json"

    def __init__(self, indent: int | None = None):
        self.indent = CONFIG["json_indent"] if indent is None else indent

    def write(self, graph: GraphNode) -> str:
        try:
            return json.dumps(graph_to_obj(graph), indent=self.indent)
        except RecursionError as e:
            raise FormatError("tree nested too deeply") from e
